"""VLAN Scanner CLI entry point — `vlanscan` command group."""

from __future__ import annotations

import click

from vlanscanner.cli.commands.report import report_cmd
from vlanscanner.cli.commands.scan import scan_cmd


@click.group()
@click.version_option(package_name="vlanscanner")
def cli() -> None:
    """VLAN Scanner — find VLANs that hand out DHCP addresses.

    \b
    Quick start:
      vlanscan scan -i eth1 -r 200-210 -w 3
      vlanscan report vlan_ips_2024-01-01_12-00-00.json

    Defaults can be set with VLANSCAN_* environment variables or a .env file.
    """


# Register sub-commands
cli.add_command(scan_cmd)
cli.add_command(report_cmd)


if __name__ == "__main__":
    cli()
