# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the cloud-deploy command line."""

from __future__ import annotations

from collections.abc import Callable
from io import StringIO
from pathlib import Path

from rich.console import Console
from typer.testing import CliRunner

from cloud_deploy.cli import app, run_match
from cloud_deploy.locations import Location
from cloud_deploy.manifest import Runtime


def _console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, width=160, color_system=None), buffer


def test_runtimes_lists_packages(sample_manifest: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["runtimes", "--location", "North Central US", "--manifest", str(sample_manifest), "--no-emoji"],
    )

    assert result.exit_code == 0
    assert "0.12" in result.stdout
    assert "iisnode" in result.stdout


def test_match_reports_explicit_match(sample_manifest: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        app,
        [
            "match",
            "node",
            "--location",
            "north central us",
            "--version",
            "0.12",
            "--manifest",
            str(sample_manifest),
            "--no-emoji",
        ],
    )

    assert result.exit_code == 0
    assert "node 0.12 matched" in result.stdout


def test_match_reports_default_fallback(sample_manifest: Path) -> None:
    console, buffer = _console()

    exit_code = run_match(
        Runtime.NODE,
        Location.NORTH_CENTRAL_US,
        version="0.8",
        manifest=sample_manifest,
        console=console,
        use_emoji=False,
    )

    output = buffer.getvalue()
    assert exit_code == 0
    assert "using default" in output
    assert "0.10" in output


def test_match_unknown_runtime_fails(sample_manifest: Path) -> None:
    console, buffer = _console()

    exit_code = run_match(Runtime.PHP, Location.NORTH_CENTRAL_US, manifest=sample_manifest, console=console)

    assert exit_code == 1
    assert "runtime 'php' has no default package" in buffer.getvalue()


def test_missing_region_fails(sample_manifest: Path) -> None:
    console, buffer = _console()

    exit_code = run_match(Runtime.NODE, Location.EAST_ASIA, manifest=sample_manifest, console=console)

    assert exit_code == 1
    assert "no storage container for East Asia" in buffer.getvalue()


def test_invalid_manifest_message_is_shown(write_manifest: Callable[[str], Path]) -> None:
    path = write_manifest(
        '<runtimemanifest><blobcontainer datacenter="EAST ASIA" />'
        '<runtimes><runtime type="node" default="true" /></runtimes></runtimemanifest>'
    )
    console, buffer = _console()

    exit_code = run_match(Runtime.NODE, Location.EAST_ASIA, manifest=path, console=console)

    assert exit_code == 1
    assert "Could not download a valid runtime manifest" in buffer.getvalue()


def test_malformed_manifest_is_reported(write_manifest: Callable[[str], Path]) -> None:
    path = write_manifest("<runtimemanifest>")
    console, buffer = _console()

    exit_code = run_match(Runtime.NODE, Location.EAST_ASIA, manifest=path, console=console)

    assert exit_code == 1
    assert "Unable to read runtime manifest" in buffer.getvalue()


def test_debug_output_reports_index_summary(sample_manifest: Path) -> None:
    console, buffer = _console()

    exit_code = run_match(
        Runtime.NODE,
        Location.NORTH_CENTRAL_US,
        version="0.12",
        manifest=sample_manifest,
        console=console,
        use_emoji=False,
        debug=True,
    )

    output = buffer.getvalue()
    assert exit_code == 0
    assert "[debug] base_uri=http://example/blob packages=3" in output
    assert "node 0.12 matched" in output
