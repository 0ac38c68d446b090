"""Single-VLAN probe: create sub-interface, bring it up, wait, read its address."""

from __future__ import annotations

import time
from collections.abc import Callable

from vlanscanner.core.executor import CommandExecutor, CommandResult
from vlanscanner.core.logging import get_logger
from vlanscanner.modules.address import AddressExtractor
from vlanscanner.schemas.scan import ProbeOutcome

logger = get_logger(__name__)


def sub_interface_name(interface: str, vlan_id: int) -> str:
    return f"{interface}.{vlan_id}"


class VlanProber:
    """Drives one VLAN through its lifecycle.

    Creation and activation are best effort: a failing command is logged and
    the remaining steps still run against whatever interface state exists.
    Created sub-interfaces are left in place.
    """

    def __init__(
        self,
        executor: CommandExecutor,
        extractor: AddressExtractor | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self.executor = executor
        self.extractor = extractor or AddressExtractor(executor)
        self._sleep = sleep or time.sleep

    def probe(self, interface: str, vlan_id: int, wait_seconds: int) -> ProbeOutcome | None:
        vlan_iface = sub_interface_name(interface, vlan_id)
        log = logger.bind(vlan_id=vlan_id, interface=vlan_iface)
        log.info("Checking VLAN")

        self._step(
            log,
            "create",
            f"ip link add link {interface} name {vlan_iface} type vlan id {vlan_id}",
        )
        self._step(log, "link_up", f"ip link set up {vlan_iface}")

        # DHCP lease window
        log.info("Waiting for DHCP", seconds=wait_seconds)
        self._sleep(wait_seconds)

        address = self.extractor.extract(vlan_iface)
        if address is None:
            log.info("No IP address")
            return None

        log.info("VLAN has IP address", ip_address=str(address))
        return ProbeOutcome(vlan_id=vlan_id, ip_address=str(address))

    def _step(self, log, step: str, command: str) -> CommandResult:
        result = self.executor.run(command)
        if result.ok:
            log.info("Step succeeded", step=step, command=command, output=result.output.strip())
        else:
            log.warning(
                "Step failed",
                step=step,
                command=command,
                returncode=result.returncode,
                error=result.output.strip(),
            )
        return result
