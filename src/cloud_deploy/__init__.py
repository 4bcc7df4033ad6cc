# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Runtime manifest index and role-instance snapshots for cloud deployments."""

from __future__ import annotations

from .config import ManifestSettings, load_settings
from .errors import (
    ConfigError,
    InvalidManifestError,
    InvalidRuntimeError,
    RuntimeNotInManifestError,
)
from .instances import EndpointSnapshot, InstanceSnapshot
from .locations import Location
from .manifest import (
    CloudRuntime,
    ManifestDocumentSource,
    Runtime,
    RuntimeManifestIndex,
    RuntimePackage,
    RuntimePackageTable,
)

__all__ = [
    "CloudRuntime",
    "ConfigError",
    "EndpointSnapshot",
    "InstanceSnapshot",
    "InvalidManifestError",
    "InvalidRuntimeError",
    "Location",
    "ManifestDocumentSource",
    "ManifestSettings",
    "Runtime",
    "RuntimeManifestIndex",
    "RuntimeNotInManifestError",
    "RuntimePackage",
    "RuntimePackageTable",
    "load_settings",
]
