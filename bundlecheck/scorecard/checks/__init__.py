"""
Scorecard Check Implementations

One module per check; each exposes a function taking a bundle and
returning a single-result status.
"""

from .related_images import related_images_check
from .annotations import annotations_check
from .install_modes import install_modes_check

__all__ = [
    "related_images_check",
    "annotations_check",
    "install_modes_check",
]
