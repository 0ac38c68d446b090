"""Tests for core/config.py and ScanSettings."""

import pytest
from pydantic import ValidationError

from vlanscanner.core.config import Settings
from vlanscanner.schemas.scan import ProbeOutcome, ScanSettings


def test_default_settings(monkeypatch):
    for var in ("VLANSCAN_INTERFACE", "VLANSCAN_DHCP_WAIT_TIME",
                "VLANSCAN_VLAN_RANGE_START", "VLANSCAN_VLAN_RANGE_END"):
        monkeypatch.delenv(var, raising=False)
    s = Settings(_env_file=None)
    assert s.interface == "eth0"
    assert s.dhcp_wait_time == 3
    assert s.vlan_range_start == 1
    assert s.vlan_range_end == 4094
    assert s.log_level == "INFO"


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("VLANSCAN_INTERFACE", "enp3s0")
    monkeypatch.setenv("VLANSCAN_DHCP_WAIT_TIME", "7")
    s = Settings(_env_file=None)
    assert s.interface == "enp3s0"
    assert s.dhcp_wait_time == 7


def test_settings_reject_inverted_range():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, vlan_range_start=300, vlan_range_end=200)


def test_scan_settings_overrides_skip_none():
    base = Settings(_env_file=None, interface="eth1", dhcp_wait_time=3)
    s = ScanSettings.from_settings(base, interface=None, wait_seconds=5, range_start=200, range_end=210)
    assert s.interface == "eth1"
    assert s.wait_seconds == 5
    assert list(s.vlan_ids) == list(range(200, 211))
    assert s.vlan_count == 11


def test_scan_settings_honours_range_end():
    base = Settings(_env_file=None, vlan_range_start=10, vlan_range_end=12)
    s = ScanSettings.from_settings(base)
    assert (s.range_start, s.range_end) == (10, 12)


@pytest.mark.parametrize(
    "overrides",
    [
        {"range_start": 0},
        {"range_end": 4095},
        {"range_start": 20, "range_end": 10},
        {"wait_seconds": 0},
        {"interface": ""},
    ],
)
def test_scan_settings_validation(overrides):
    values = {"interface": "eth1", "wait_seconds": 1, "range_start": 1, "range_end": 10}
    values.update(overrides)
    with pytest.raises(ValidationError):
        ScanSettings(**values)


def test_scan_settings_frozen():
    s = ScanSettings(interface="eth1", wait_seconds=1, range_start=1, range_end=2)
    with pytest.raises(ValidationError):
        s.interface = "eth2"


@pytest.mark.parametrize(
    "interface",
    ["eth1; reboot", "eth1 eth2", "eth$(id)", "a/b", "-eth1", "abcdefghijklmnop"],
)
def test_scan_settings_reject_unsafe_interface(interface):
    with pytest.raises(ValidationError):
        ScanSettings(interface=interface, wait_seconds=1, range_start=1, range_end=2)


@pytest.mark.parametrize("interface", ["eth0", "enp3s0", "wlan0", "br-lan", "bond0.100", "eth_1"])
def test_scan_settings_accept_interface_names(interface):
    s = ScanSettings(interface=interface, wait_seconds=1, range_start=1, range_end=2)
    assert s.interface == interface


def test_probe_outcome_keeps_valid_address():
    assert ProbeOutcome(vlan_id=5, ip_address="10.0.0.5/24").ip_address == "10.0.0.5/24"


@pytest.mark.parametrize("address", ["not-an-ip", "10.0.0.5", "10.0.0.5/33", "169.254.1.2/16"])
def test_probe_outcome_rejects_bad_address(address):
    with pytest.raises(ValidationError):
        ProbeOutcome(vlan_id=5, ip_address=address)
