# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by manifest, settings, and CLI operations."""

from __future__ import annotations

from typing import Final

INVALID_MANIFEST_MESSAGE: Final[str] = (
    "Could not download a valid runtime manifest, Please check your internet connection and try again"
)
INVALID_RUNTIME_MESSAGE: Final[str] = "{0} is not a recognized runtime type"


class InvalidManifestError(ValueError):
    """Raised when a runtime manifest carries unusable configuration data."""

    def __init__(self, message: str | None = None) -> None:
        """Create the error with ``message`` or the templated manifest message."""

        super().__init__(message or INVALID_MANIFEST_MESSAGE)


class InvalidRuntimeError(InvalidManifestError):
    """Raised when a manifest declares a runtime type outside the known set."""

    def __init__(self, runtime_type: str | None) -> None:
        """Record ``runtime_type`` and render the templated message."""

        super().__init__(INVALID_RUNTIME_MESSAGE.format(runtime_type))
        self.runtime_type = runtime_type


class RuntimeNotInManifestError(KeyError):
    """Raised when a query targets a runtime type the manifest never declared."""

    def __init__(self, runtime: str) -> None:
        super().__init__(runtime)
        self.runtime = runtime

    def __str__(self) -> str:
        return f"runtime '{self.runtime}' has no default package in the manifest"


class ConfigError(Exception):
    """Raised when settings input is invalid."""


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


__all__ = (
    "CLIError",
    "ConfigError",
    "INVALID_MANIFEST_MESSAGE",
    "INVALID_RUNTIME_MESSAGE",
    "InvalidManifestError",
    "InvalidRuntimeError",
    "RuntimeNotInManifestError",
)
