# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

SAMPLE_MANIFEST = """\
<?xml version="1.0" encoding="utf-8"?>
<runtimemanifest>
  <blobcontainer datacenter="North Central US" uri="http://example/blob" />
  <blobcontainer datacenter="WEST EUROPE" uri="http://example/weu/" />
  <runtimes>
    <runtime type="node" version="0.10" default="true" filepath="/node/0.10.exe" />
    <runtime type="node" version="0.12" filepath="/node/0.12.exe" />
    <runtime type="iisnode" version="0.1.21" default="TRUE" filepath="iisnode/0.1.21.exe" channel="stable" />
  </runtimes>
</runtimemanifest>
"""


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper writing manifest text into a temporary file."""

    def _write(text: str, name: str = "runtimemanifest.xml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_manifest(write_manifest: Callable[[str], Path]) -> Path:
    """Return the path of a manifest declaring node and iisnode packages."""

    return write_manifest(SAMPLE_MANIFEST)


@pytest.fixture(autouse=True)
def _isolate_manifest_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the host environment from redirecting manifest downloads."""

    monkeypatch.delenv("CLOUD_DEPLOY_MANIFEST_URI", raising=False)


@pytest.fixture
def manifest_text() -> str:
    """Return the text of the shared sample manifest."""

    return SAMPLE_MANIFEST
