# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for scoped manifest acquisition and parsing."""

from __future__ import annotations

import io
import logging
from collections.abc import Callable
from pathlib import Path
from xml.etree.ElementTree import ParseError

import pytest

from cloud_deploy.config import ManifestSettings
from cloud_deploy.manifest import ManifestDocumentSource, load_manifest_document
from cloud_deploy.manifest import io as manifest_io


class _CountingStream(io.BytesIO):
    """Byte stream recording how often ``close`` is invoked."""

    def __init__(self, payload: bytes) -> None:
        super().__init__(payload)
        self.close_calls = 0

    def close(self) -> None:
        self.close_calls += 1
        super().close()


def test_close_twice_releases_stream_once(monkeypatch: pytest.MonkeyPatch, manifest_text: str) -> None:
    stream = _CountingStream(manifest_text.encode("utf-8"))
    monkeypatch.setattr(manifest_io, "_open_url", lambda uri, *, user_agent: stream)
    source = ManifestDocumentSource()

    source.open()
    source.close()
    source.close()

    assert source.closed
    assert stream.close_calls == 1


def test_context_exit_then_explicit_close_is_a_no_op(monkeypatch: pytest.MonkeyPatch, manifest_text: str) -> None:
    stream = _CountingStream(manifest_text.encode("utf-8"))
    monkeypatch.setattr(manifest_io, "_open_url", lambda uri, *, user_agent: stream)
    source = ManifestDocumentSource()

    with source as handle:
        assert handle is stream
    source.close()

    assert stream.close_calls == 1


def test_close_before_open_does_not_raise() -> None:
    source = ManifestDocumentSource(Path("never-opened.xml"))

    source.close()
    source.close()

    assert source.closed
    with pytest.raises(ValueError):
        source.open()


def test_stream_released_when_parsing_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    stream = _CountingStream(b"<runtimemanifest><runtimes>")
    monkeypatch.setattr(manifest_io, "_open_url", lambda uri, *, user_agent: stream)

    with pytest.raises(ParseError):
        load_manifest_document()

    assert stream.close_calls == 1


def test_network_fetch_uses_configured_address(monkeypatch: pytest.MonkeyPatch, manifest_text: str) -> None:
    requested: list[tuple[str, str]] = []

    def fake_open(uri: str, *, user_agent: str) -> io.BytesIO:
        requested.append((uri, user_agent))
        return io.BytesIO(manifest_text.encode("utf-8"))

    monkeypatch.setattr(manifest_io, "_open_url", fake_open)
    settings = ManifestSettings(manifest_uri="https://cdn.example/runtimemanifest.xml", user_agent="tests/1.0")

    root = load_manifest_document(settings=settings)

    assert root.tag == "runtimemanifest"
    assert requested == [("https://cdn.example/runtimemanifest.xml", "tests/1.0")]


def test_caller_stream_is_left_open(manifest_text: str) -> None:
    stream = _CountingStream(manifest_text.encode("utf-8"))

    root = load_manifest_document(stream)

    assert root.tag == "runtimemanifest"
    assert stream.close_calls == 0
    assert not stream.closed


def test_file_source_is_read_and_described(sample_manifest: Path) -> None:
    source = ManifestDocumentSource(sample_manifest)

    with source as handle:
        assert handle.read(5) == b"<?xml"

    assert source.closed
    assert source.description == str(sample_manifest)


def test_missing_file_propagates(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_manifest_document(tmp_path / "absent.xml")


def test_entity_declarations_are_refused(write_manifest: Callable[[str], Path]) -> None:
    path = write_manifest(
        '<?xml version="1.0"?>\n'
        '<!DOCTYPE runtimemanifest [<!ENTITY boom "boom">]>\n'
        "<runtimemanifest>&boom;</runtimemanifest>\n"
    )

    with pytest.raises(ValueError):
        load_manifest_document(path)


def test_open_logs_where_the_document_comes_from(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
    manifest_text: str,
) -> None:
    monkeypatch.setattr(manifest_io, "_open_url", lambda uri, *, user_agent: io.BytesIO(manifest_text.encode("utf-8")))
    settings = ManifestSettings(manifest_uri="https://cdn.example/runtimemanifest.xml")

    with caplog.at_level(logging.DEBUG, logger="cloud_deploy.manifest.io"):
        load_manifest_document(settings=settings)
        load_manifest_document(io.BytesIO(manifest_text.encode("utf-8")))

    assert "reading runtime manifest from https://cdn.example/runtimemanifest.xml" in caplog.text
    assert "reading runtime manifest from <stream>" in caplog.text
