"""
Related Images Validation

Keeps pinned sidecar images at their known-good digests.
"""

from typing import List

from ...bundle.models import Bundle
from ..models import CheckResult, CheckStatus, wrap_result
from ..rules import PINNED_IMAGES, RELATED_IMAGES_CHECK, pinned_image_error


def related_images_check(bundle: Bundle) -> CheckStatus:
    """
    Verify pinned related images.

    Every related image named in the pinned table must reference
    exactly the pinned digest. Other images are not inspected.

    Args:
        bundle: Loaded bundle

    Returns:
        Status with a single ``related-images-check`` result
    """
    errors: List[str] = []
    suggestions: List[str] = []

    for image in bundle.csv.spec.related_images:
        pin = PINNED_IMAGES.get(image.name)
        if pin is None or image.image == pin.image:
            continue
        errors.append(pinned_image_error(image.name, pin))
        suggestions.append(f"Set relatedImage {image.name} to {pin.image}")

    return wrap_result(CheckResult.from_errors(RELATED_IMAGES_CHECK, errors, suggestions))
