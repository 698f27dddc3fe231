"""
CSV Annotations Validation

Checks the annotations every operator in the product must carry.
"""

from typing import List

from ...bundle.models import Bundle
from ..models import CheckResult, CheckStatus, wrap_result
from ..rules import (
    ANNOTATIONS_CHECK,
    INFRASTRUCTURE_FEATURES_ERROR,
    INFRASTRUCTURE_FEATURES_KEY,
    INFRASTRUCTURE_FEATURES_VALUE,
    OPERATOR_TYPE_ERROR,
    OPERATOR_TYPE_KEY,
    OPERATOR_TYPE_VALUE,
    SUGGESTED_NAMESPACE_ERROR,
    SUGGESTED_NAMESPACE_EXEMPT_PREFIX,
    SUGGESTED_NAMESPACE_KEY,
)


def annotations_check(bundle: Bundle) -> CheckStatus:
    """
    Verify the required CSV annotations.

    All rules are evaluated; each violation adds one error.

    Args:
        bundle: Loaded bundle

    Returns:
        Status with a single ``annotations-check`` result
    """
    annotations = bundle.csv.annotations
    errors: List[str] = []
    suggestions: List[str] = []

    if annotations.get(INFRASTRUCTURE_FEATURES_KEY) != INFRASTRUCTURE_FEATURES_VALUE:
        errors.append(INFRASTRUCTURE_FEATURES_ERROR)
        suggestions.append(
            f"Add annotation {INFRASTRUCTURE_FEATURES_KEY}: '{INFRASTRUCTURE_FEATURES_VALUE}'"
        )

    if annotations.get(OPERATOR_TYPE_KEY) != OPERATOR_TYPE_VALUE:
        errors.append(OPERATOR_TYPE_ERROR)
        suggestions.append(f"Add annotation {OPERATOR_TYPE_KEY}: {OPERATOR_TYPE_VALUE}")

    if (
        not bundle.csv.name.startswith(SUGGESTED_NAMESPACE_EXEMPT_PREFIX)
        and not annotations.get(SUGGESTED_NAMESPACE_KEY)
    ):
        errors.append(SUGGESTED_NAMESPACE_ERROR)
        suggestions.append(f"Add annotation {SUGGESTED_NAMESPACE_KEY} with the target namespace")

    return wrap_result(CheckResult.from_errors(ANNOTATIONS_CHECK, errors, suggestions))
