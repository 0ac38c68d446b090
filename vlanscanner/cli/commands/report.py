"""CLI command for viewing a saved scan report."""

from __future__ import annotations

from pathlib import Path

import click

from vlanscanner.cli.output import console, outcomes_table, print_error
from vlanscanner.core.exceptions import ReportReadError
from vlanscanner.core.report import load_report


@click.command("report")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
def report_cmd(path: Path) -> None:
    """Show the contents of a vlan_ips_*.json report."""
    try:
        outcomes = load_report(path)
    except ReportReadError as e:
        print_error(str(e))
        raise SystemExit(1)

    console.print(outcomes_table(outcomes, title=path.name))
