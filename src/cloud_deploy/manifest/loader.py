# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Runtime manifest index: region base URI lookup and package matching."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from xml.etree.ElementTree import Element

from ..config import ManifestSettings
from ..errors import InvalidManifestError, RuntimeNotInManifestError
from ..locations import Location
from ..types import (
    BLOB_CONTAINER_TAG,
    BLOB_URI_ATTRIBUTE,
    DATACENTER_ATTRIBUTE,
    MANIFEST_ROOT_TAG,
    RUNTIME_NODES_PATH,
    ManifestSource,
)
from .io import load_manifest_document
from .model_runtime import CloudRuntime, Runtime, RuntimePackage
from .table import RuntimePackageTable

LOGGER = logging.getLogger(__name__)


def find_blob_uri(manifest: Element, location: Location) -> tuple[bool, str | None]:
    """Return whether ``location`` has a storage container and its base URI.

    The first ``blobcontainer`` element whose ``datacenter`` attribute equals
    the location name, compared upper-cased, is used.

    Args:
        manifest: Root element of the parsed manifest.
        location: Region whose container is requested.

    Returns:
        tuple[bool, str | None]: ``(True, uri)`` when found, ``(False, None)``
        when the manifest has no container for the region.

    Raises:
        InvalidManifestError: If the container exists without a usable ``uri``.
    """

    key = location.datacenter_key
    for node in manifest.iter(BLOB_CONTAINER_TAG):
        datacenter = node.get(DATACENTER_ATTRIBUTE)
        if datacenter is None or datacenter.upper() != key:
            continue
        uri = node.get(BLOB_URI_ATTRIBUTE)
        if not uri:
            raise InvalidManifestError()
        return True, uri
    return False, None


def collect_runtime_packages(manifest: Element, base_uri: str | None) -> tuple[bool, tuple[RuntimePackage, ...]]:
    """Build a package for every ``/runtimemanifest/runtimes/runtime`` node.

    Args:
        manifest: Root element of the parsed manifest.
        base_uri: Region base URI that package paths are resolved against.

    Returns:
        tuple[bool, tuple[RuntimePackage, ...]]: ``False`` with no packages
        when the manifest declares no runtime nodes.
    """

    if manifest.tag != MANIFEST_ROOT_TAG:
        return False, ()
    nodes = manifest.findall(RUNTIME_NODES_PATH)
    if not nodes:
        return False, ()
    return True, tuple(RuntimePackage.from_node(node, base_uri) for node in nodes)


@dataclass(frozen=True, slots=True)
class RuntimeManifestIndex:
    """Packages declared by a runtime manifest, partitioned per runtime type."""

    location: Location
    base_uri: str | None
    blob_uri_found: bool
    packages_retrieved: bool
    _table: RuntimePackageTable = field(repr=False, compare=False)

    @classmethod
    def build(
        cls,
        location: Location,
        manifest_source: ManifestSource | None = None,
        *,
        settings: ManifestSettings | None = None,
    ) -> tuple[RuntimeManifestIndex, bool]:
        """Load a manifest and index the packages it declares.

        Args:
            location: Region whose storage base URI packages resolve against.
            manifest_source: File path or binary stream; ``None`` fetches the
                manifest from ``settings.manifest_uri``.
            settings: Optional settings for the network fetch.

        Returns:
            tuple[RuntimeManifestIndex, bool]: The index and whether both the
            region lookup and the package retrieval succeeded. The index is
            returned even on failure but should not be relied upon.

        Raises:
            InvalidManifestError: If the region container lacks a ``uri`` or a
                runtime node declares an unknown type.
        """

        manifest = load_manifest_document(manifest_source, settings=settings)
        return cls.from_document(manifest, location)

    @classmethod
    def from_document(cls, manifest: Element, location: Location) -> tuple[RuntimeManifestIndex, bool]:
        """Index an already-parsed manifest; see :meth:`build`."""

        found, base_uri = find_blob_uri(manifest, location)
        if not found:
            LOGGER.debug("manifest has no blob container for %s", location.display_name)
        retrieved, packages = collect_runtime_packages(manifest, base_uri)
        if not retrieved:
            LOGGER.debug("manifest declares no runtime packages")
        table = RuntimePackageTable()
        for package in packages:
            table.add(package)
        LOGGER.debug("indexed %d runtime packages for %s", len(packages), location.display_name)
        index = cls(
            location=location,
            base_uri=base_uri,
            blob_uri_found=found,
            packages_retrieved=retrieved,
            _table=table,
        )
        return index, index.success

    @property
    def success(self) -> bool:
        """Return ``True`` when both the base URI and the packages were resolved."""

        return self.blob_uri_found and self.packages_retrieved

    def find_match(self, requested: CloudRuntime) -> tuple[bool, RuntimePackage]:
        """Return the best package for ``requested``.

        The first candidate, in document order, that ``requested`` matches is
        returned with ``True``. Otherwise the runtime's default package is
        returned with ``False``.

        Args:
            requested: Runtime configuration requested by the deployment.

        Returns:
            tuple[bool, RuntimePackage]: Whether an explicit match was found,
            and the selected package.

        Raises:
            RuntimeNotInManifestError: If the manifest recorded no default
                package for the requested runtime type.
        """

        default = self._table.default_for(requested.runtime)
        if default is None:
            raise RuntimeNotInManifestError(requested.runtime.value)
        for candidate in self._table.candidates(requested.runtime):
            if requested.match(candidate):
                return True, candidate
        return False, default

    def candidates(self, runtime: Runtime) -> tuple[RuntimePackage, ...]:
        """Return the non-default packages declared for ``runtime``."""

        return self._table.candidates(runtime)

    def default_for(self, runtime: Runtime) -> RuntimePackage | None:
        """Return the default package declared for ``runtime``, if any."""

        return self._table.default_for(runtime)

    def packages(self) -> tuple[RuntimePackage, ...]:
        """Return every indexed package in document order."""

        return self._table.packages()

    def runtimes(self) -> tuple[Runtime, ...]:
        """Return the runtime types the manifest declared packages for."""

        return self._table.runtimes()


__all__ = [
    "RuntimeManifestIndex",
    "collect_runtime_packages",
    "find_blob_uri",
]
