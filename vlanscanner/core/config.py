"""Application configuration via Pydantic BaseSettings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VLAN_ID_MIN = 1
VLAN_ID_MAX = 4094


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VLANSCAN_",
        case_sensitive=False,
        extra="ignore",
    )

    # Probing
    interface: str = Field(default="eth0", description="Base interface to tag VLANs on")
    dhcp_wait_time: int = Field(
        default=3,
        gt=0,
        description="Seconds to wait for a DHCP lease on each VLAN sub-interface",
    )
    vlan_range_start: int = Field(default=VLAN_ID_MIN, ge=VLAN_ID_MIN, le=VLAN_ID_MAX)
    vlan_range_end: int = Field(default=VLAN_ID_MAX, ge=VLAN_ID_MIN, le=VLAN_ID_MAX)

    # Host
    shell: str = Field(default="sh", description="Shell used to run network commands")

    # Output
    output_dir: Path = Field(default=Path("."), description="Directory for report files")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    log_json: bool = Field(default=False, description="Emit JSON log lines instead of console output")

    @model_validator(mode="after")
    def _check_range(self) -> "Settings":
        if self.vlan_range_start > self.vlan_range_end:
            raise ValueError(
                f"vlan_range_start ({self.vlan_range_start}) must not exceed "
                f"vlan_range_end ({self.vlan_range_end})"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
