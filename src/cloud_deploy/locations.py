# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Deployment locations recognised by the runtime manifest."""

from __future__ import annotations

from enum import Enum


class Location(str, Enum):
    """Enumerate deployment regions keyed by their manifest display name."""

    ANYWHERE_US = "Anywhere US"
    ANYWHERE_EUROPE = "Anywhere Europe"
    ANYWHERE_ASIA = "Anywhere Asia"
    NORTH_CENTRAL_US = "North Central US"
    SOUTH_CENTRAL_US = "South Central US"
    EAST_US = "East US"
    WEST_US = "West US"
    NORTH_EUROPE = "North Europe"
    WEST_EUROPE = "West Europe"
    EAST_ASIA = "East Asia"
    SOUTHEAST_ASIA = "Southeast Asia"

    @property
    def display_name(self) -> str:
        """Return the human-readable region name used by the manifest."""

        return self.value

    @property
    def datacenter_key(self) -> str:
        """Return the upper-cased name compared against ``datacenter`` attributes."""

        return self.value.upper()


__all__ = ["Location"]
