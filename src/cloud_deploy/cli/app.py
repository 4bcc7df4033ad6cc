# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command line entry points for querying the runtime manifest."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated
from urllib.error import URLError
from xml.etree.ElementTree import ParseError

import typer
from defusedxml import DefusedXmlException
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from ..config import load_settings
from ..errors import CLIError, ConfigError, InvalidManifestError, RuntimeNotInManifestError
from ..locations import Location
from ..logging import CLILogger, build_cli_logger
from ..manifest import CloudRuntime, Runtime, RuntimeManifestIndex
from ._rendering import build_packages_table

app = typer.Typer(help="Inspect cloud runtime manifests.", no_args_is_help=True)

LocationOption = Annotated[
    Location,
    typer.Option("--location", "-l", case_sensitive=False, help="Deployment region."),
]
ManifestOption = Annotated[
    Path | None,
    typer.Option("--manifest", "-m", exists=True, dir_okay=False, help="Local manifest file."),
]
SettingsOption = Annotated[
    Path | None,
    typer.Option("--config", help="TOML or pyproject.toml file with [tool.cloud-deploy] settings."),
]
DebugOption = Annotated[bool, typer.Option("--debug", help="Emit debug logging.")]
NoEmojiOption = Annotated[bool, typer.Option("--no-emoji", help="Disable emoji output.")]


def _load_index(
    location: Location,
    manifest: Path | None,
    config: Path | None,
    logger: CLILogger,
) -> RuntimeManifestIndex:
    """Build the manifest index, converting documented failures into ``CLIError``."""

    try:
        settings = load_settings(config)
        index, success = RuntimeManifestIndex.build(location, manifest, settings=settings)
    except (ConfigError, InvalidManifestError) as exc:
        raise CLIError(str(exc)) from exc
    except (ParseError, DefusedXmlException, URLError, OSError) as exc:
        raise CLIError(f"Unable to read runtime manifest: {exc}") from exc
    logger.debug(f"base_uri={index.base_uri} packages={len(index.packages())}")
    if not success:
        if not index.blob_uri_found:
            raise CLIError(f"Runtime manifest has no storage container for {location.display_name}")
        raise CLIError("Runtime manifest declares no runtime packages")
    return index


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING)


def run_runtimes(
    location: Location,
    *,
    manifest: Path | None = None,
    config: Path | None = None,
    console: Console | None = None,
    use_emoji: bool = True,
    debug: bool = False,
) -> int:
    """List every package the manifest declares and return an exit status.

    Returns:
        int: ``0`` when the manifest loads, otherwise the error's exit code.
    """

    target = console or Console()
    logger = build_cli_logger(emoji=use_emoji, debug=debug, console=target)
    try:
        index = _load_index(location, manifest, config, logger)
    except CLIError as exc:
        target.print(Panel(f"[red]{escape(str(exc))}[/red]", border_style="red"))
        return exc.exit_code
    target.print(build_packages_table(index.packages(), title=f"Runtimes ({location.display_name})"))
    return 0


def run_match(
    runtime: Runtime,
    location: Location,
    *,
    version: str | None = None,
    manifest: Path | None = None,
    config: Path | None = None,
    console: Console | None = None,
    use_emoji: bool = True,
    debug: bool = False,
) -> int:
    """Report the package selected for ``runtime`` and return an exit status.

    Returns:
        int: ``0`` for an explicit match or a default fallback, otherwise the
        error's exit code.
    """

    target = console or Console()
    logger = build_cli_logger(emoji=use_emoji, debug=debug, console=target)
    requested = CloudRuntime(runtime=runtime, version=version)
    try:
        index = _load_index(location, manifest, config, logger)
        try:
            matched, package = index.find_match(requested)
        except RuntimeNotInManifestError as exc:
            raise CLIError(str(exc)) from exc
    except CLIError as exc:
        target.print(Panel(f"[red]{escape(str(exc))}[/red]", border_style="red"))
        return exc.exit_code
    if matched:
        logger.ok(f"{runtime.value} {package.version} matched")
    else:
        logger.warn(f"no {runtime.value} package for version {version or '<unspecified>'}; using default")
    target.print(build_packages_table((package,), title="Selected package"))
    return 0


@app.command("runtimes")
def runtimes_command(
    location: LocationOption,
    manifest: ManifestOption = None,
    config: SettingsOption = None,
    debug: DebugOption = False,
    no_emoji: NoEmojiOption = False,
) -> None:
    """List runtime packages declared by the manifest."""

    _configure_logging(debug)
    exit_code = run_runtimes(location, manifest=manifest, config=config, use_emoji=not no_emoji, debug=debug)
    raise typer.Exit(code=exit_code)


@app.command("match")
def match_command(
    runtime: Annotated[Runtime, typer.Argument(case_sensitive=False, help="Runtime type to resolve.")],
    location: LocationOption,
    version: Annotated[str | None, typer.Option("--version", "-v", help="Requested runtime version.")] = None,
    manifest: ManifestOption = None,
    config: SettingsOption = None,
    debug: DebugOption = False,
    no_emoji: NoEmojiOption = False,
) -> None:
    """Select the package best matching a requested runtime."""

    _configure_logging(debug)
    exit_code = run_match(
        runtime,
        location,
        version=version,
        manifest=manifest,
        config=config,
        use_emoji=not no_emoji,
        debug=debug,
    )
    raise typer.Exit(code=exit_code)


def main() -> None:
    """Console script entry point."""

    app()


__all__ = ["app", "main", "run_match", "run_runtimes"]
