# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Runtime types, manifest packages, and requested runtime configurations."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any
from xml.etree.ElementTree import Element

from ..errors import InvalidRuntimeError
from ..types import (
    RUNTIME_DEFAULT_ATTRIBUTE,
    RUNTIME_FILEPATH_ATTRIBUTE,
    RUNTIME_TYPE_ATTRIBUTE,
    RUNTIME_VERSION_ATTRIBUTE,
)
from .utils import flag_attribute, frozen_attributes, join_uri, optional_attribute


class Runtime(str, Enum):
    """Enumerate the runtime types a manifest may declare packages for."""

    NODE = "node"
    IISNODE = "iisnode"
    PHP = "php"
    JAVA = "java"

    @classmethod
    def from_raw(cls, raw: str | None) -> Runtime:
        """Return the member matching ``raw`` regardless of case.

        Raises:
            InvalidRuntimeError: If ``raw`` is missing or not a known runtime.
        """

        if raw is not None:
            try:
                return cls(raw.strip().lower())
            except ValueError:
                pass
        raise InvalidRuntimeError(raw)


@dataclass(frozen=True, slots=True)
class RuntimePackage:
    """Package declared by a single ``<runtime>`` manifest node."""

    runtime: Runtime
    version: str | None
    is_default: bool
    file_path: str | None = None
    package_uri: str | None = None
    attributes: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}), compare=False)

    @staticmethod
    def from_node(node: Element, base_uri: str | None) -> RuntimePackage:
        """Create a package from ``node`` resolving its address against ``base_uri``.

        Args:
            node: ``<runtime>`` element from the manifest.
            base_uri: Region storage base address, when one was resolved.

        Returns:
            RuntimePackage: Frozen package metadata.

        Raises:
            InvalidRuntimeError: If the ``type`` attribute is missing or unknown.
        """

        runtime = Runtime.from_raw(node.get(RUNTIME_TYPE_ATTRIBUTE))
        file_path = optional_attribute(node, RUNTIME_FILEPATH_ATTRIBUTE)
        return RuntimePackage(
            runtime=runtime,
            version=optional_attribute(node, RUNTIME_VERSION_ATTRIBUTE),
            is_default=flag_attribute(node, RUNTIME_DEFAULT_ATTRIBUTE),
            file_path=file_path,
            package_uri=join_uri(base_uri, file_path),
            attributes=frozen_attributes(node),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible rendering of the package."""

        return {
            "runtime": self.runtime.value,
            "version": self.version,
            "default": self.is_default,
            "filepath": self.file_path,
            "uri": self.package_uri,
        }


@dataclass(frozen=True, slots=True)
class CloudRuntime:
    """Runtime configuration requested by a deployment."""

    runtime: Runtime
    version: str | None = None

    def match(self, package: RuntimePackage) -> bool:
        """Return ``True`` when ``package`` satisfies this request.

        A package matches when it targets the same runtime and declares the
        exact requested version. Requests without a version never match.
        """

        if package.runtime is not self.runtime or self.version is None:
            return False
        return package.version == self.version


__all__ = ["CloudRuntime", "Runtime", "RuntimePackage"]
