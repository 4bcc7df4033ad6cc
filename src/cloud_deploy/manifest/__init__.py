# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Public export surface for runtime manifest handling."""

from __future__ import annotations

from typing import Final

from .io import ManifestDocumentSource, load_manifest_document, parse_manifest
from .loader import RuntimeManifestIndex, collect_runtime_packages, find_blob_uri
from .model_runtime import CloudRuntime, Runtime, RuntimePackage
from .table import RuntimePackageTable

__all__: Final[tuple[str, ...]] = (
    "CloudRuntime",
    "ManifestDocumentSource",
    "Runtime",
    "RuntimeManifestIndex",
    "RuntimePackage",
    "RuntimePackageTable",
    "collect_runtime_packages",
    "find_blob_uri",
    "load_manifest_document",
    "parse_manifest",
)
