"""
Scorecard Check Module

Custom scorecard tests for operator bundles and their result format.
"""

from .models import CheckResult, CheckState, CheckStatus
from .runner import CheckRunner, available_checks, run_check

__all__ = [
    "CheckRunner",
    "CheckResult",
    "CheckState",
    "CheckStatus",
    "available_checks",
    "run_check",
]
