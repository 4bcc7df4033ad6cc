# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Per-runtime partition of manifest packages into candidates and defaults."""

from __future__ import annotations

import logging

from .model_runtime import Runtime, RuntimePackage

LOGGER = logging.getLogger(__name__)


class RuntimePackageTable:
    """Owning table mapping each runtime type to candidates and one default.

    Every :class:`Runtime` member has a candidate list from construction
    onwards. The candidate list never holds the package recorded as the
    default for that runtime. The mutators exist for populating the table
    while a manifest is loaded; index-taking mutators assert their bounds.
    """

    __slots__ = ("_candidates", "_defaults", "_order")

    def __init__(self) -> None:
        self._candidates: dict[Runtime, list[RuntimePackage]] = {runtime: [] for runtime in Runtime}
        self._defaults: dict[Runtime, RuntimePackage] = {}
        self._order: list[RuntimePackage] = []

    def add(self, package: RuntimePackage) -> None:
        """Record ``package`` as its runtime's default or append it as a candidate.

        A later default for the same runtime replaces the earlier one.
        """

        self._order.append(package)
        if not package.is_default:
            self._candidates[package.runtime].append(package)
            return
        previous = self._defaults.get(package.runtime)
        if previous is not None:
            LOGGER.warning(
                "manifest declares more than one default %s package; %s replaces %s",
                package.runtime.value,
                package.version,
                previous.version,
            )
            del self._order[self._position(previous)]
        self._defaults[package.runtime] = package

    def insert(self, index: int, package: RuntimePackage) -> None:
        """Insert a non-default ``package`` at ``index`` of its candidate list."""

        candidates = self._candidates[package.runtime]
        assert 0 <= index <= len(candidates), (
            f"Attempt to insert a runtime package at position {index} when there are {len(candidates)} packages total"
        )
        assert not package.is_default, "default packages are recorded with add()"
        if index < len(candidates):
            self._order.insert(self._position(candidates[index]), package)
        elif candidates:
            self._order.insert(self._position(candidates[-1]) + 1, package)
        else:
            self._order.append(package)
        candidates.insert(index, package)

    def replace(self, index: int, package: RuntimePackage) -> None:
        """Replace the candidate at ``index`` of the package's runtime list."""

        candidates = self._candidates[package.runtime]
        assert 0 <= index < len(candidates), (
            f"Attempt to set a runtime package at position {index} when there are {len(candidates)} packages total"
        )
        assert not package.is_default, "default packages are recorded with add()"
        previous = candidates[index]
        candidates[index] = package
        self._order[self._position(previous)] = package

    def remove(self, runtime: Runtime, index: int) -> RuntimePackage:
        """Remove and return the candidate at ``index`` for ``runtime``."""

        candidates = self._candidates[runtime]
        assert 0 <= index < len(candidates), (
            f"Attempt to remove a runtime package at position {index} when there are {len(candidates)} packages total"
        )
        package = candidates.pop(index)
        del self._order[self._position(package)]
        return package

    def clear(self) -> None:
        """Drop every candidate and default while keeping the runtime keys."""

        for candidates in self._candidates.values():
            candidates.clear()
        self._defaults.clear()
        self._order.clear()

    def candidates(self, runtime: Runtime) -> tuple[RuntimePackage, ...]:
        """Return the non-default packages for ``runtime`` in document order."""

        return tuple(self._candidates[runtime])

    def default_for(self, runtime: Runtime) -> RuntimePackage | None:
        """Return the default package for ``runtime`` when one was declared."""

        return self._defaults.get(runtime)

    def packages(self) -> tuple[RuntimePackage, ...]:
        """Return every recorded package in the order it was added."""

        return tuple(self._order)

    def runtimes(self) -> tuple[Runtime, ...]:
        """Return the runtime types that hold at least one package."""

        return tuple(
            runtime for runtime in Runtime if self._candidates[runtime] or runtime in self._defaults
        )

    def __len__(self) -> int:
        return len(self._order)

    def _position(self, package: RuntimePackage) -> int:
        """Return the index of ``package`` itself in the recorded order."""

        return next(position for position, entry in enumerate(self._order) if entry is package)


__all__ = ["RuntimePackageTable"]
