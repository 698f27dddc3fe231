"""
Operator Bundle Module

Loads unpacked operator bundles into read-only models.
"""

from .models import (
    Bundle,
    ClusterServiceVersion,
    CSVSpec,
    InstallMode,
    InstallModeType,
    ObjectMeta,
    RelatedImage,
)
from .loader import BundleLoader, BundleLoadError, load_bundle

__all__ = [
    "Bundle",
    "ClusterServiceVersion",
    "CSVSpec",
    "InstallMode",
    "InstallModeType",
    "ObjectMeta",
    "RelatedImage",
    "BundleLoader",
    "BundleLoadError",
    "load_bundle",
]
