# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for reading attributes from manifest elements."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from xml.etree.ElementTree import Element

_TRUE_TOKEN = "true"


def optional_attribute(node: Element, key: str) -> str | None:
    """Return attribute ``key`` of ``node`` or ``None`` when absent or empty."""

    value = node.get(key)
    if value is None or not value.strip():
        return None
    return value


def flag_attribute(node: Element, key: str) -> bool:
    """Return ``True`` only when attribute ``key`` reads ``true`` (any case)."""

    value = node.get(key)
    return value is not None and value.strip().lower() == _TRUE_TOKEN


def frozen_attributes(node: Element) -> Mapping[str, str]:
    """Return a read-only copy of every attribute declared on ``node``."""

    return MappingProxyType(dict(node.attrib))


def join_uri(base_uri: str | None, relative: str | None) -> str | None:
    """Return ``relative`` appended to ``base_uri`` with a single separator.

    Args:
        base_uri: Region storage base address.
        relative: Package path declared by the manifest.

    Returns:
        str | None: Joined address, or ``None`` when either part is missing.
    """

    if not base_uri or not relative:
        return None
    return f"{base_uri.rstrip('/')}/{relative.lstrip('/')}"


__all__ = ["flag_attribute", "frozen_attributes", "join_uri", "optional_attribute"]
