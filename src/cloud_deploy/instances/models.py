# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Point-in-time snapshots of role instances reported by the compute API."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from ipaddress import IPv4Address, IPv6Address
from typing import Any, Protocol, TypeAlias

IPAddressValue: TypeAlias = IPv4Address | IPv6Address | str | None


class InstanceEndpointLike(Protocol):
    """Structural view of an endpoint exposed by a remote role instance."""

    name: str | None
    vip: IPAddressValue
    public_port: int | None
    local_port: int | None
    protocol: str | None


class RoleInstanceLike(Protocol):
    """Structural view of the remote role-instance resource."""

    role_name: str | None
    instance_name: str | None
    instance_status: str | None
    instance_upgrade_domain: str | int | None
    instance_fault_domain: str | int | None
    instance_size: str | None
    instance_state_details: str | None
    instance_error_code: str | None
    ip_address: IPAddressValue
    instance_endpoints: Iterable[InstanceEndpointLike] | None
    power_state: Enum | str | None
    host_name: str | None
    remote_access_certificate_thumbprint: str | None


def power_state_text(value: Enum | str | None) -> str | None:
    """Return the textual form of a power state value.

    Enum members render as their value when it is a string and as their
    member name otherwise; ``None`` stays ``None``.
    """

    if value is None:
        return None
    if isinstance(value, Enum):
        return value.value if isinstance(value.value, str) else value.name
    return str(value)


@dataclass(frozen=True, slots=True)
class EndpointSnapshot:
    """Copy of a single instance endpoint."""

    name: str | None
    vip: IPAddressValue
    public_port: int | None
    local_port: int | None
    protocol: str | None

    @classmethod
    def from_endpoint(cls, endpoint: InstanceEndpointLike) -> EndpointSnapshot:
        return cls(
            name=endpoint.name,
            vip=endpoint.vip,
            public_port=endpoint.public_port,
            local_port=endpoint.local_port,
            protocol=endpoint.protocol,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "vip": _address_text(self.vip),
            "public_port": self.public_port,
            "local_port": self.local_port,
            "protocol": self.protocol,
        }


@dataclass(frozen=True, slots=True)
class InstanceSnapshot:
    """Immutable copy of a role instance, never re-synchronised with its source."""

    role_name: str | None = None
    instance_name: str | None = None
    instance_status: str | None = None
    instance_upgrade_domain: str | int | None = None
    instance_fault_domain: str | int | None = None
    instance_size: str | None = None
    instance_state_details: str | None = None
    instance_error_code: str | None = None
    ip_address: IPAddressValue = None
    instance_endpoints: tuple[EndpointSnapshot, ...] = ()
    power_state: str | None = None
    host_name: str | None = None
    remote_access_certificate_thumbprint: str | None = None

    @classmethod
    def from_role_instance(cls, resource: RoleInstanceLike) -> InstanceSnapshot:
        """Copy ``resource`` into a snapshot.

        Descriptive fields are copied verbatim without validation, the power
        state is rendered as text, and every endpoint is copied in order.

        Args:
            resource: Role instance returned by the compute API.

        Returns:
            InstanceSnapshot: Snapshot owning copies of all endpoint records.
        """

        endpoints = resource.instance_endpoints or ()
        return cls(
            role_name=resource.role_name,
            instance_name=resource.instance_name,
            instance_status=resource.instance_status,
            instance_upgrade_domain=resource.instance_upgrade_domain,
            instance_fault_domain=resource.instance_fault_domain,
            instance_size=resource.instance_size,
            instance_state_details=resource.instance_state_details,
            instance_error_code=resource.instance_error_code,
            ip_address=resource.ip_address,
            instance_endpoints=tuple(EndpointSnapshot.from_endpoint(endpoint) for endpoint in endpoints),
            power_state=power_state_text(resource.power_state),
            host_name=resource.host_name,
            remote_access_certificate_thumbprint=resource.remote_access_certificate_thumbprint,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible rendering of the snapshot."""

        return {
            "role_name": self.role_name,
            "instance_name": self.instance_name,
            "instance_status": self.instance_status,
            "instance_upgrade_domain": self.instance_upgrade_domain,
            "instance_fault_domain": self.instance_fault_domain,
            "instance_size": self.instance_size,
            "instance_state_details": self.instance_state_details,
            "instance_error_code": self.instance_error_code,
            "ip_address": _address_text(self.ip_address),
            "instance_endpoints": [endpoint.to_dict() for endpoint in self.instance_endpoints],
            "power_state": self.power_state,
            "host_name": self.host_name,
            "remote_access_certificate_thumbprint": self.remote_access_certificate_thumbprint,
        }


def _address_text(value: IPAddressValue) -> str | None:
    return None if value is None else str(value)


__all__ = [
    "EndpointSnapshot",
    "InstanceEndpointLike",
    "InstanceSnapshot",
    "RoleInstanceLike",
    "power_state_text",
]
