"""CLI command that runs a VLAN scan on the local host."""

from __future__ import annotations

from pathlib import Path

import click
from pydantic import ValidationError

from vlanscanner.cli.output import console, outcomes_table, print_error
from vlanscanner.core.config import get_settings
from vlanscanner.core.exceptions import VlanScannerError
from vlanscanner.core.executor import CommandExecutor
from vlanscanner.core.logging import configure_logging
from vlanscanner.core.report import ReportSink
from vlanscanner.core.scanner import ScanOrchestrator
from vlanscanner.modules.prober import VlanProber
from vlanscanner.schemas.scan import ScanSettings


def parse_range(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> tuple[int, int] | None:
    """Turn ``"200-210"`` into ``(200, 210)``."""
    if value is None:
        return None
    start, sep, end = value.partition("-")
    if not sep:
        raise click.BadParameter("expected START-END (e.g. 200-210)")
    try:
        return int(start), int(end)
    except ValueError:
        raise click.BadParameter(f"{value!r} is not a numeric START-END range")


@click.command("scan")
@click.option("-i", "--interface", default=None, help="Interface name (e.g. eth1)")
@click.option(
    "-w",
    "--wait",
    type=click.IntRange(min=1),
    default=None,
    help="Seconds to wait for DHCP on each VLAN",
)
@click.option(
    "-r",
    "--range",
    "vlan_range",
    callback=parse_range,
    default=None,
    help="VLAN ID range, e.g. 200-210",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for the JSON report",
)
@click.option("--log-json", is_flag=True, default=None, help="Emit JSON log lines")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
)
def scan_cmd(
    interface: str | None,
    wait: int | None,
    vlan_range: tuple[int, int] | None,
    output_dir: Path | None,
    log_json: bool | None,
    log_level: str | None,
) -> None:
    """Probe a VLAN ID range for DHCP-assigned addresses.

    Needs root: each VLAN gets a sub-interface (e.g. eth1.200) which is left
    on the host afterwards.

    Example:

        vlanscan scan -i eth1 -r 200-210 -w 5
    """
    range_start, range_end = vlan_range if vlan_range else (None, None)
    try:
        settings = get_settings()
        scan_settings = ScanSettings.from_settings(
            settings,
            interface=interface,
            wait_seconds=wait,
            range_start=range_start,
            range_end=range_end,
        )
    except ValidationError as e:
        for err in e.errors():
            loc = ".".join(str(part) for part in err["loc"]) or "settings"
            print_error(f"{loc}: {err['msg']}")
        raise SystemExit(2)

    configure_logging(log_level=log_level, log_json=log_json)

    console.print(
        f"[bold cyan]Scanning VLANs[/bold cyan] {scan_settings.range_start}-"
        f"{scan_settings.range_end} on [bold]{scan_settings.interface}[/bold] "
        f"(wait {scan_settings.wait_seconds}s)"
    )

    executor = CommandExecutor(shell=settings.shell)
    orchestrator = ScanOrchestrator(
        VlanProber(executor),
        ReportSink(output_dir or settings.output_dir),
    )
    try:
        outcomes = orchestrator.scan(scan_settings)
    except VlanScannerError as e:
        print_error(str(e))
        raise SystemExit(1)

    console.print(outcomes_table(outcomes))
    console.print(f"[dim]Report written to {orchestrator.report_path}[/dim]")
