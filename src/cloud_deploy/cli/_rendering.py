# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rich renderables used by the manifest commands."""

from __future__ import annotations

from collections.abc import Iterable

from rich.table import Table

from ..manifest import RuntimePackage


def build_packages_table(packages: Iterable[RuntimePackage], *, title: str) -> Table:
    """Return a table listing ``packages`` with their resolved addresses."""

    table = Table(title=title, show_lines=False)
    table.add_column("Runtime", style="bold cyan")
    table.add_column("Version")
    table.add_column("Default", justify="center")
    table.add_column("URI", overflow="fold")
    for package in packages:
        table.add_row(
            package.runtime.value,
            package.version or "-",
            "yes" if package.is_default else "",
            package.package_uri or "-",
        )
    return table


__all__ = ["build_packages_table"]
