"""
Scorecard Check Runner

Selects a check by name and runs it against a loaded bundle.
"""

from typing import Callable, Dict, List

from ..bundle.models import Bundle
from .models import CheckResult, CheckStatus, wrap_result
from .rules import (
    ANNOTATIONS_CHECK,
    INSTALL_MODES_CHECK,
    RELATED_IMAGES_CHECK,
    valid_tests_message,
)
from .checks import annotations_check, install_modes_check, related_images_check

CheckFunc = Callable[[Bundle], CheckStatus]

CHECKS: Dict[str, CheckFunc] = {
    RELATED_IMAGES_CHECK: related_images_check,
    ANNOTATIONS_CHECK: annotations_check,
    INSTALL_MODES_CHECK: install_modes_check,
}


def available_checks() -> List[str]:
    """Names of the registered checks, in registration order."""
    return list(CHECKS)


def valid_tests_status() -> CheckStatus:
    """Unnamed failing result listing the valid check names."""
    return wrap_result(CheckResult.from_errors("", [valid_tests_message()]))


class CheckRunner:
    """
    Runs named scorecard checks against one bundle.

    Unknown names are not an error: they produce a failing result that
    tells the caller which names are valid.
    """

    def __init__(self, bundle: Bundle):
        self.bundle = bundle

    def run(self, check_name: str) -> CheckStatus:
        """
        Run a specific check by name.

        Args:
            check_name: Name of the check to run

        Returns:
            Status with exactly one result
        """
        check = CHECKS.get(check_name)
        if check is None:
            return valid_tests_status()
        return check(self.bundle)


def run_check(check_name: str, bundle: Bundle) -> CheckStatus:
    """Run check_name against bundle."""
    return CheckRunner(bundle).run(check_name)
