"""
Scorecard custom tests for operator bundles.

Runs one named check against an unpacked bundle and reports the
outcome in the scorecard ``v1alpha3`` result format.
"""

__version__ = "1.0.0"
