"""
Install Modes Validation

Checks declared install modes against the supported-mode matrix.
"""

from typing import List

from ...bundle.models import Bundle
from ..models import CheckResult, CheckStatus, wrap_result
from ..rules import INSTALL_MODE_SUPPORT, INSTALL_MODES_CHECK, install_mode_error


def install_modes_check(bundle: Bundle) -> CheckStatus:
    """
    Verify install mode support flags.

    Modes missing from the CSV are not reported.

    Args:
        bundle: Loaded bundle

    Returns:
        Status with a single ``install-modes-check`` result
    """
    errors: List[str] = []
    suggestions: List[str] = []

    for mode in bundle.csv.spec.install_modes:
        expected = INSTALL_MODE_SUPPORT[mode.type]
        if mode.supported != expected:
            errors.append(install_mode_error(mode.type, expected))
            suggestions.append(
                f"Set supported: {'true' if expected else 'false'} for installMode {mode.type.value}"
            )

    return wrap_result(CheckResult.from_errors(INSTALL_MODES_CHECK, errors, suggestions))
