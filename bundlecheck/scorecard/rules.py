"""
Rule tables for the scorecard checks.

Check names, the pinned sidecar digest, the required annotations and the
install mode support matrix live here so each rule can be audited and
updated without touching the check code.
"""

from typing import Dict, NamedTuple, Tuple

from ..bundle.models import InstallModeType

RELATED_IMAGES_CHECK = "related-images-check"
ANNOTATIONS_CHECK = "annotations-check"
INSTALL_MODES_CHECK = "install-modes-check"

CHECK_NAMES: Tuple[str, ...] = (
    RELATED_IMAGES_CHECK,
    ANNOTATIONS_CHECK,
    INSTALL_MODES_CHECK,
)

# ============================================================
# Related images
# ============================================================

KUBE_RBAC_PROXY = "kube-rbac-proxy"
KUBE_RBAC_PROXY_TAG = "gcr.io/kubebuilder/kube-rbac-proxy:v0.13.1"
# SHA256 form of KUBE_RBAC_PROXY_TAG
KUBE_RBAC_PROXY_IMAGE = (
    "gcr.io/kubebuilder/kube-rbac-proxy"
    "@sha256:d4883d7c622683b3319b5e6b3a7edfbf2594c18060131a8bf64504805f875522"
)


class PinnedImage(NamedTuple):
    """A related image that must stay at one digest."""
    tag: str
    image: str


PINNED_IMAGES: Dict[str, PinnedImage] = {
    KUBE_RBAC_PROXY: PinnedImage(tag=KUBE_RBAC_PROXY_TAG, image=KUBE_RBAC_PROXY_IMAGE),
}


def pinned_image_error(name: str, pin: PinnedImage) -> str:
    return f"{name} does not match a SHA256 form of {pin.tag}"


# ============================================================
# Annotations
# ============================================================

INFRASTRUCTURE_FEATURES_KEY = "operators.openshift.io/infrastructure-features"
INFRASTRUCTURE_FEATURES_VALUE = '["disconnected"]'

OPERATOR_TYPE_KEY = "operators.operatorframework.io/operator-type"
OPERATOR_TYPE_VALUE = "non-standalone"

SUGGESTED_NAMESPACE_KEY = "operatorframework.io/suggested-namespace"
# Only the top-level operator may leave suggested-namespace unset.
SUGGESTED_NAMESPACE_EXEMPT_PREFIX = "openstack-operator"

INFRASTRUCTURE_FEATURES_ERROR = (
    "Missing annotation for disconnected/offline operator installation support"
)
OPERATOR_TYPE_ERROR = "Missing annotation for operator type: non-standalone"
# Same text as OPERATOR_TYPE_ERROR; consumers match on it.
SUGGESTED_NAMESPACE_ERROR = OPERATOR_TYPE_ERROR

# ============================================================
# Install modes
# ============================================================

INSTALL_MODE_SUPPORT: Dict[InstallModeType, bool] = {
    InstallModeType.OWN_NAMESPACE: True,
    InstallModeType.SINGLE_NAMESPACE: True,
    InstallModeType.MULTI_NAMESPACE: False,
    InstallModeType.ALL_NAMESPACES: True,
}


def install_mode_error(mode: InstallModeType, expected: bool) -> str:
    return f"installMode type {mode.value} should be {'true' if expected else 'false'}"


def valid_tests_message() -> str:
    """Usage hint listing every check this image runs."""
    return "Valid tests for this image include: " + " ".join(CHECK_NAMES)
