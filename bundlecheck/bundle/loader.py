"""
Bundle loader for unpacked operator bundles.

Reads ``metadata/annotations.yaml`` and every manifest under the
manifests directory, and assembles a :class:`Bundle`.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

import yaml
from pydantic import ValidationError

from .models import Bundle, ClusterServiceVersion

ANNOTATIONS_FILE = Path("metadata") / "annotations.yaml"
DEFAULT_MANIFESTS_DIR = "manifests/"

MANIFESTS_KEY = "operators.operatorframework.io.bundle.manifests.v1"
PACKAGE_KEY = "operators.operatorframework.io.bundle.package.v1"
CHANNELS_KEY = "operators.operatorframework.io.bundle.channels.v1"
DEFAULT_CHANNEL_KEY = "operators.operatorframework.io.bundle.channel.default.v1"

MANIFEST_SUFFIXES = (".yaml", ".yml", ".json")

CSV_KIND = "ClusterServiceVersion"
CRD_KIND = "CustomResourceDefinition"


class BundleLoadError(Exception):
    """Bundle directory could not be read or parsed."""
    pass


class BundleLoader:
    """
    Loads an operator bundle from a directory.

    The directory layout follows the registry bundle format: a
    ``metadata/annotations.yaml`` describing the package and a
    manifests directory holding the CSV, CRDs and other objects.
    Bundles without metadata are scanned from the root.
    """

    def __init__(self, bundle_path: Union[str, Path]):
        """
        Initialize the loader.

        Args:
            bundle_path: Path to the unpacked bundle directory
        """
        self.bundle_path = Path(bundle_path)

    def load(self) -> Bundle:
        """
        Load the bundle.

        Returns:
            Parsed bundle

        Raises:
            BundleLoadError: If the bundle is missing, unreadable or has no CSV
        """
        if not self.bundle_path.is_dir():
            raise BundleLoadError(f"Bundle directory does not exist: {self.bundle_path}")

        metadata = self._read_metadata()
        manifests_dir = self._manifests_dir(metadata)

        csv: Optional[ClusterServiceVersion] = None
        csv_file: Optional[Path] = None
        crds: List[str] = []
        objects: List[Dict[str, Any]] = []

        for file_path, document in self._iter_documents(manifests_dir):
            kind = document.get("kind")
            if kind == CSV_KIND:
                if csv is not None:
                    raise BundleLoadError(
                        f"More than one ClusterServiceVersion in bundle: {csv_file} and {file_path}"
                    )
                csv = self._parse_csv(document, file_path)
                csv_file = file_path
            elif kind == CRD_KIND:
                meta = document.get("metadata")
                crds.append(str(meta.get("name", "")) if isinstance(meta, dict) else "")
            else:
                objects.append(document)

        if csv is None:
            raise BundleLoadError(f"Unable to find a CSV in bundle directory {self.bundle_path}")

        channels = metadata.get(CHANNELS_KEY) or ""
        return Bundle(
            name=csv.name,
            package=_optional_text(metadata.get(PACKAGE_KEY)),
            channels=[c.strip() for c in str(channels).split(",") if c.strip()],
            default_channel=_optional_text(metadata.get(DEFAULT_CHANNEL_KEY)),
            csv=csv,
            crds=crds,
            objects=objects,
        )

    def _read_metadata(self) -> Dict[str, Any]:
        """Read bundle annotations, or an empty mapping if there are none."""
        path = self.bundle_path / ANNOTATIONS_FILE
        if not path.is_file():
            return {}

        documents = self._read_yaml(path)
        data = documents[0] if documents else {}
        annotations = data.get("annotations") if isinstance(data, dict) else None
        if annotations is None:
            return {}
        if not isinstance(annotations, dict):
            raise BundleLoadError(f"Invalid bundle annotations in {path}: expected a mapping")
        return annotations

    def _manifests_dir(self, metadata: Dict[str, Any]) -> Path:
        """Resolve the manifests directory, falling back to the bundle root."""
        relative = metadata.get(MANIFESTS_KEY) or DEFAULT_MANIFESTS_DIR
        path = self.bundle_path / str(relative).strip("/")
        if path.is_dir():
            return path
        return self.bundle_path

    def _iter_documents(self, root: Path) -> Iterator[Tuple[Path, Dict[str, Any]]]:
        """Yield every manifest document under root, in a stable order."""
        for file_path in sorted(root.rglob("*")):
            relative = file_path.relative_to(root)
            if any(part.startswith(".") for part in relative.parts):
                continue
            if not file_path.is_file() or file_path.suffix not in MANIFEST_SUFFIXES:
                continue
            if file_path == self.bundle_path / ANNOTATIONS_FILE:
                continue

            for document in self._read_manifest(file_path):
                if document is None:
                    continue
                if not isinstance(document, dict):
                    raise BundleLoadError(f"Invalid manifest in {file_path}: expected a mapping")
                yield file_path, document

    def _read_manifest(self, file_path: Path) -> List[Any]:
        """Read a manifest file; JSON files hold a single document."""
        if file_path.suffix == ".json":
            return [self._read_json(file_path)]
        return self._read_yaml(file_path)

    def _read_json(self, file_path: Path) -> Any:
        """Read and parse a JSON file."""
        try:
            with open(file_path, "rb") as f:
                return json.load(f)
        except ValueError as e:
            raise BundleLoadError(f"Invalid JSON in {file_path}: {e}")
        except IOError as e:
            raise BundleLoadError(f"Cannot read {file_path}: {e}")

    def _read_yaml(self, file_path: Path) -> List[Any]:
        """Read and parse every YAML document in a file."""
        try:
            with open(file_path, "rb") as f:
                return list(yaml.safe_load_all(f))
        except yaml.YAMLError as e:
            raise BundleLoadError(f"Invalid YAML in {file_path}: {e}")
        except IOError as e:
            raise BundleLoadError(f"Cannot read {file_path}: {e}")

    def _parse_csv(self, data: Dict[str, Any], file_path: Path) -> ClusterServiceVersion:
        """Parse a ClusterServiceVersion document."""
        try:
            return ClusterServiceVersion.model_validate(data)
        except ValidationError as e:
            raise BundleLoadError(f"Invalid ClusterServiceVersion in {file_path}: {e}")


def _optional_text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def load_bundle(bundle_path: Union[str, Path]) -> Bundle:
    """Load the bundle at bundle_path."""
    return BundleLoader(bundle_path).load()
