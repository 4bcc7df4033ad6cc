# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for manifest handling."""

from __future__ import annotations

from os import PathLike
from typing import BinaryIO, Final, TypeAlias

ManifestSource: TypeAlias = str | PathLike[str] | BinaryIO

DEFAULT_MANIFEST_URI: Final[str] = "http://localhost/runtimemanifest.xml"
DEFAULT_USER_AGENT: Final[str] = "cloud-deploy/1.0"

BLOB_CONTAINER_TAG: Final[str] = "blobcontainer"
DATACENTER_ATTRIBUTE: Final[str] = "datacenter"
BLOB_URI_ATTRIBUTE: Final[str] = "uri"
MANIFEST_ROOT_TAG: Final[str] = "runtimemanifest"
RUNTIME_NODES_PATH: Final[str] = "./runtimes/runtime"

RUNTIME_TYPE_ATTRIBUTE: Final[str] = "type"
RUNTIME_VERSION_ATTRIBUTE: Final[str] = "version"
RUNTIME_DEFAULT_ATTRIBUTE: Final[str] = "default"
RUNTIME_FILEPATH_ATTRIBUTE: Final[str] = "filepath"

__all__ = [
    "BLOB_CONTAINER_TAG",
    "BLOB_URI_ATTRIBUTE",
    "DATACENTER_ATTRIBUTE",
    "DEFAULT_MANIFEST_URI",
    "DEFAULT_USER_AGENT",
    "MANIFEST_ROOT_TAG",
    "ManifestSource",
    "RUNTIME_DEFAULT_ATTRIBUTE",
    "RUNTIME_FILEPATH_ATTRIBUTE",
    "RUNTIME_NODES_PATH",
    "RUNTIME_TYPE_ATTRIBUTE",
    "RUNTIME_VERSION_ATTRIBUTE",
]
