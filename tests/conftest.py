"""Pytest configuration for bundlecheck tests."""

from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pytest
import yaml

from bundlecheck.bundle import Bundle, ClusterServiceVersion
from bundlecheck.scorecard.rules import KUBE_RBAC_PROXY_IMAGE

GOOD_ANNOTATIONS = {
    "operators.openshift.io/infrastructure-features": '["disconnected"]',
    "operators.operatorframework.io/operator-type": "non-standalone",
    "operatorframework.io/suggested-namespace": "openstack",
}

GOOD_INSTALL_MODES = [
    {"type": "OwnNamespace", "supported": True},
    {"type": "SingleNamespace", "supported": True},
    {"type": "MultiNamespace", "supported": False},
    {"type": "AllNamespaces", "supported": True},
]


def csv_manifest(
    name: str = "nova-operator.v0.0.1",
    annotations: Optional[Dict[str, str]] = None,
    related_images: Optional[List[Dict[str, str]]] = None,
    install_modes: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """Build a ClusterServiceVersion document as it appears on disk."""
    return {
        "apiVersion": "operators.coreos.com/v1alpha1",
        "kind": "ClusterServiceVersion",
        "metadata": {
            "name": name,
            "namespace": "placeholder",
            "annotations": dict(GOOD_ANNOTATIONS if annotations is None else annotations),
        },
        "spec": {
            "displayName": "Nova Operator",
            "relatedImages": list(related_images or []),
            "installModes": list(GOOD_INSTALL_MODES if install_modes is None else install_modes),
        },
    }


@pytest.fixture
def make_bundle() -> Callable[..., Bundle]:
    """Return a factory for in-memory bundles; accepts csv_manifest arguments."""

    def _make(**kwargs) -> Bundle:
        csv = ClusterServiceVersion.model_validate(csv_manifest(**kwargs))
        return Bundle(name=csv.name, csv=csv)

    return _make


@pytest.fixture
def good_related_images() -> List[Dict[str, str]]:
    return [
        {"name": "kube-rbac-proxy", "image": KUBE_RBAC_PROXY_IMAGE},
        {"name": "nova-operator", "image": "quay.io/openstack-k8s-operators/nova-operator:latest"},
    ]


def write_yaml(path: Path, *documents: Any) -> Path:
    """Write one or more YAML documents to path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.safe_dump_all(documents, f, default_flow_style=False, sort_keys=False)
    return path


@pytest.fixture
def bundle_dir(tmp_path: Path) -> Path:
    """An unpacked registry-format bundle with a passing CSV."""
    root = tmp_path / "bundle"
    write_yaml(
        root / "metadata" / "annotations.yaml",
        {
            "annotations": {
                "operators.operatorframework.io.bundle.mediatype.v1": "registry+v1",
                "operators.operatorframework.io.bundle.manifests.v1": "manifests/",
                "operators.operatorframework.io.bundle.metadata.v1": "metadata/",
                "operators.operatorframework.io.bundle.package.v1": "nova-operator",
                "operators.operatorframework.io.bundle.channels.v1": "alpha,stable",
                "operators.operatorframework.io.bundle.channel.default.v1": "alpha",
            }
        },
    )
    write_yaml(
        root / "manifests" / "nova-operator.clusterserviceversion.yaml",
        csv_manifest(
            related_images=[{"name": "kube-rbac-proxy", "image": KUBE_RBAC_PROXY_IMAGE}],
        ),
    )
    write_yaml(
        root / "manifests" / "nova.openstack.org_novas.yaml",
        {
            "apiVersion": "apiextensions.k8s.io/v1",
            "kind": "CustomResourceDefinition",
            "metadata": {"name": "novas.nova.openstack.org"},
        },
    )
    write_yaml(
        root / "manifests" / "nova-operator-metrics_v1_service.yaml",
        {"apiVersion": "v1", "kind": "Service", "metadata": {"name": "nova-operator-metrics"}},
    )
    return root


@pytest.fixture
def yaml_writer() -> Callable[..., Path]:
    return write_yaml


@pytest.fixture
def csv_factory() -> Callable[..., Dict[str, Any]]:
    return csv_manifest
