"""pytest fixtures shared across all tests."""

from __future__ import annotations

from datetime import datetime

import pytest

from vlanscanner.core.executor import CommandExecutor, CommandResult
from vlanscanner.core.report import ReportSink

# Sample `ip addr show` outputs
IP_ADDR_DHCP = """\
5: eth1.200@eth1: <BROADCAST,MULTICAST,UP,LOWER_UP> mtu 1500 qdisc noqueue state UP
    link/ether 52:54:00:12:34:56 brd ff:ff:ff:ff:ff:ff
    inet 10.0.0.5/24 brd 10.0.0.255 scope global dynamic eth1.200
       valid_lft 86396sec preferred_lft 86396sec
    inet6 fe80::5054:ff:fe12:3456/64 scope link
       valid_lft forever preferred_lft forever
"""

IP_ADDR_LINK_LOCAL = """\
6: eth1.201@eth1: <BROADCAST,MULTICAST,UP,LOWER_UP> mtu 1500 qdisc noqueue state UP
    link/ether 52:54:00:12:34:56 brd ff:ff:ff:ff:ff:ff
    inet 169.254.9.9/16 brd 169.254.255.255 scope link eth1.201
"""

IP_ADDR_NO_INET = """\
7: eth1.202@eth1: <BROADCAST,MULTICAST,UP,LOWER_UP> mtu 1500 qdisc noqueue state UP
    link/ether 52:54:00:12:34:56 brd ff:ff:ff:ff:ff:ff
    inet6 fe80::5054:ff:fe12:3456/64 scope link
"""


class FakeExecutor(CommandExecutor):
    """Replays scripted results instead of touching the host network.

    Unscripted commands succeed with empty output.
    """

    def __init__(self, responses: dict[str, CommandResult | str] | None = None) -> None:
        super().__init__(shell="sh")
        self.responses = responses or {}
        self.calls: list[str] = []

    def run(self, command: str) -> CommandResult:
        self.calls.append(command)
        response = self.responses.get(command, "")
        if isinstance(response, CommandResult):
            return response
        return CommandResult(command=command, returncode=0, stdout=response, stderr="")


def failed(command: str, stderr: str = "RTNETLINK answers: File exists", code: int = 2) -> CommandResult:
    return CommandResult(command=command, returncode=code, stdout="", stderr=stderr)


@pytest.fixture
def fake_executor():
    return FakeExecutor()


@pytest.fixture
def fixed_clock():
    return lambda: datetime(2024, 5, 17, 9, 30, 15)


@pytest.fixture
def sink(tmp_path, fixed_clock):
    return ReportSink(tmp_path, clock=fixed_clock)
