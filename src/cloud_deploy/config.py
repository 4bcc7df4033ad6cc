# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Settings model and loaders controlling where the runtime manifest comes from."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError
from .types import DEFAULT_MANIFEST_URI, DEFAULT_USER_AGENT

MANIFEST_URI_ENV: Final[str] = "CLOUD_DEPLOY_MANIFEST_URI"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "cloud-deploy"
_PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
_SUPPORTED_SCHEMES: Final[frozenset[str]] = frozenset({"http", "https"})


class ManifestSettings(BaseModel):
    """Network settings used when no explicit manifest source is supplied."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    manifest_uri: str = Field(default=DEFAULT_MANIFEST_URI)
    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=1)

    @field_validator("manifest_uri")
    @classmethod
    def _check_scheme(cls, value: str) -> str:
        scheme = urlparse(value).scheme.lower()
        if scheme not in _SUPPORTED_SCHEMES:
            raise ValueError(f"unsupported manifest URI scheme '{scheme}'")
        return value


def load_settings(path: Path | None = None, *, env: Mapping[str, str] | None = None) -> ManifestSettings:
    """Build settings from an optional TOML file and the process environment.

    ``pyproject.toml`` files contribute their ``[tool.cloud-deploy]`` table;
    any other TOML file contributes its root table. The
    ``CLOUD_DEPLOY_MANIFEST_URI`` variable overrides the manifest address.

    Args:
        path: Optional TOML document supplying settings.
        env: Environment mapping; defaults to ``os.environ``.

    Returns:
        ManifestSettings: Validated, immutable settings.

    Raises:
        ConfigError: If the document cannot be parsed or holds invalid values.
    """

    environment = os.environ if env is None else env
    payload: dict[str, Any] = dict(_read_table(path)) if path is not None else {}
    override = environment.get(MANIFEST_URI_ENV)
    if override:
        payload["manifest_uri"] = override
    try:
        return ManifestSettings.model_validate(payload)
    except ValidationError as exc:
        source = str(path) if path is not None else "environment"
        raise ConfigError(f"Invalid settings from {source}: {exc}") from exc


def _read_table(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Failed to parse settings at {path}: {exc}") from exc
    if path.name != _PYPROJECT_FILENAME:
        return data
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"[tool.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    return {str(key).replace("-", "_"): value for key, value in section.items()}


__all__ = [
    "MANIFEST_URI_ENV",
    "ManifestSettings",
    "load_settings",
]
