"""
Pydantic models for operator bundle manifests.

Only the parts of a ClusterServiceVersion that the scorecard checks
read are modelled; every other field is ignored on load.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class InstallModeType(str, Enum):
    """Operator install mode types."""
    OWN_NAMESPACE = "OwnNamespace"
    SINGLE_NAMESPACE = "SingleNamespace"
    MULTI_NAMESPACE = "MultiNamespace"
    ALL_NAMESPACES = "AllNamespaces"


class _Manifest(BaseModel):
    """Base for manifest models: camelCase keys, read-only after load."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


# ============================================================
# ClusterServiceVersion
# ============================================================

class RelatedImage(_Manifest):
    """A container image declared alongside the operator."""

    name: str = Field(default="", description="Image name within the bundle")
    image: str = Field(default="", description="Image reference")


class InstallMode(_Manifest):
    """Whether the operator supports one install mode."""

    type: InstallModeType = Field(..., description="Install mode type")
    supported: bool = Field(..., description="Whether the mode is supported")


class ObjectMeta(_Manifest):
    """Subset of Kubernetes object metadata."""

    name: str = Field(default="", description="Object name")
    namespace: Optional[str] = Field(None, description="Object namespace")
    annotations: Dict[str, str] = Field(default_factory=dict, description="Annotations")

    @field_validator("annotations", mode="before")
    @classmethod
    def coerce_annotations(cls, v: Any) -> Any:
        """Treat null as empty and unquoted YAML scalars as text."""
        if v is None:
            return {}
        if not isinstance(v, dict):
            return v
        coerced = {}
        for key, value in v.items():
            if value is None:
                value = ""
            elif isinstance(value, bool):
                value = "true" if value else "false"
            elif isinstance(value, (int, float)):
                value = str(value)
            coerced[key] = value
        return coerced


class CSVSpec(_Manifest):
    """Subset of the ClusterServiceVersion spec."""

    related_images: List[RelatedImage] = Field(
        default_factory=list, alias="relatedImages", description="Related images"
    )
    install_modes: List[InstallMode] = Field(
        default_factory=list, alias="installModes", description="Install modes"
    )

    @field_validator("related_images", "install_modes", mode="before")
    @classmethod
    def default_lists(cls, v: Any) -> Any:
        return v if v is not None else []


class ClusterServiceVersion(_Manifest):
    """The primary manifest describing an operator."""

    api_version: str = Field(default="", alias="apiVersion")
    kind: str = Field(default="ClusterServiceVersion")
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: CSVSpec = Field(default_factory=CSVSpec)

    @property
    def name(self) -> str:
        """CSV name from metadata."""
        return self.metadata.name

    @property
    def annotations(self) -> Dict[str, str]:
        """CSV annotations from metadata."""
        return self.metadata.annotations


# ============================================================
# Bundle
# ============================================================

class Bundle(_Manifest):
    """An operator bundle loaded from disk."""

    name: str = Field(..., description="Bundle name (the CSV name)")
    package: Optional[str] = Field(None, description="Package from bundle metadata")
    channels: List[str] = Field(default_factory=list, description="Channels from bundle metadata")
    default_channel: Optional[str] = Field(None, description="Default channel from bundle metadata")
    csv: ClusterServiceVersion = Field(..., description="The bundle's ClusterServiceVersion")
    crds: List[str] = Field(default_factory=list, description="CustomResourceDefinition names")
    objects: List[Dict[str, Any]] = Field(default_factory=list, description="Other manifests")
