# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Role-instance snapshot models."""

from __future__ import annotations

from .models import (
    EndpointSnapshot,
    InstanceEndpointLike,
    InstanceSnapshot,
    RoleInstanceLike,
    power_state_text,
)

__all__ = [
    "EndpointSnapshot",
    "InstanceEndpointLike",
    "InstanceSnapshot",
    "RoleInstanceLike",
    "power_state_text",
]
