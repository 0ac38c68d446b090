"""Schemas for scan settings and probe results."""

from __future__ import annotations

import ipaddress
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    field_validator,
    model_validator,
)

from vlanscanner.core.config import VLAN_ID_MAX, VLAN_ID_MIN, Settings

# Linux interface names: at most 15 bytes; kept to characters safe in shell text
IFNAME_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9_.-]{0,14}$"


class ScanSettings(BaseModel):
    """Immutable parameters of one scan run."""

    model_config = ConfigDict(frozen=True)

    interface: str = Field(
        ..., pattern=IFNAME_PATTERN, description="Base interface name (e.g. eth1)"
    )
    wait_seconds: int = Field(..., gt=0, description="DHCP wait per VLAN in seconds")
    range_start: int = Field(..., ge=VLAN_ID_MIN, le=VLAN_ID_MAX)
    range_end: int = Field(..., ge=VLAN_ID_MIN, le=VLAN_ID_MAX)

    @model_validator(mode="after")
    def _check_range(self) -> ScanSettings:
        if self.range_start > self.range_end:
            raise ValueError(
                f"range start ({self.range_start}) must not exceed range end ({self.range_end})"
            )
        return self

    @classmethod
    def from_settings(cls, settings: Settings, **overrides: Any) -> ScanSettings:
        """Build from configured defaults; ``None`` overrides are ignored."""
        values: dict[str, Any] = {
            "interface": settings.interface,
            "wait_seconds": settings.dhcp_wait_time,
            "range_start": settings.vlan_range_start,
            "range_end": settings.vlan_range_end,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    @property
    def vlan_ids(self) -> range:
        return range(self.range_start, self.range_end + 1)

    @property
    def vlan_count(self) -> int:
        return len(self.vlan_ids)


class ProbeOutcome(BaseModel):
    """A VLAN that answered with a usable address."""

    model_config = ConfigDict(frozen=True)

    vlan_id: int = Field(..., ge=VLAN_ID_MIN, le=VLAN_ID_MAX)
    ip_address: str | None = None

    @field_validator("ip_address")
    @classmethod
    def _check_address(cls, value: str | None) -> str | None:
        if value is None:
            return None
        if "/" not in value:
            raise ValueError(f"{value!r} has no prefix length")
        iface = ipaddress.IPv4Interface(value)
        if iface.is_link_local:
            raise ValueError(f"{value!r} is a link-local address")
        return str(iface)


# Report file contents: ordered list of outcomes
ScanReport = TypeAdapter(list[ProbeOutcome])
