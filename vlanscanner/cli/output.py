"""Rich output helpers — result tables and error display."""

from __future__ import annotations

import ipaddress
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from vlanscanner.schemas.scan import ProbeOutcome

console = Console()


def usable_hosts(network: ipaddress.IPv4Network) -> int:
    # /31 and /32 have no network or broadcast address to subtract
    if network.prefixlen >= 31:
        return network.num_addresses
    return network.num_addresses - 2


def outcomes_table(outcomes: Sequence[ProbeOutcome], title: str = "VLANs with IP") -> Table:
    table = Table(
        title=f"{title} ({len(outcomes)})",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("VLAN", justify="right", style="bold")
    table.add_column("IP address", no_wrap=True)
    table.add_column("Network", style="dim")
    table.add_column("Netmask", style="dim")
    table.add_column("Usable hosts", justify="right")

    for o in outcomes:
        if not o.ip_address:
            table.add_row(str(o.vlan_id), "—", "—", "—", "—")
            continue
        iface = ipaddress.IPv4Interface(o.ip_address)
        table.add_row(
            str(o.vlan_id),
            o.ip_address,
            str(iface.network),
            str(iface.netmask),
            str(usable_hosts(iface.network)),
        )
    return table


def print_error(message: str) -> None:
    console.print(f"[red]Error:[/red] {escape(message)}")
