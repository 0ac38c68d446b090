"""Address extraction from `ip addr show` output."""

from __future__ import annotations

import ipaddress
import re

from vlanscanner.core.executor import CommandExecutor
from vlanscanner.core.logging import get_logger

logger = get_logger(__name__)

# Matches "inet 192.168.1.1/24"; IPv6 "inet6" lines never match.
_INET_RE = re.compile(r"inet (\d+\.\d+\.\d+\.\d+/\d+)")
_LINK_LOCAL_PREFIX = "169."


def parse_address(text: str) -> ipaddress.IPv4Interface | None:
    """Return the first ``inet`` address in *text*, or None.

    Link-local and unparseable matches count as no address.
    """
    match = _INET_RE.search(text)
    if match is None:
        return None

    candidate = match.group(1)
    if candidate.startswith(_LINK_LOCAL_PREFIX):
        logger.debug("Ignoring link-local address", address=candidate)
        return None

    try:
        return ipaddress.IPv4Interface(candidate)
    except ValueError:
        logger.warning("Unparseable inet address", address=candidate)
        return None


class AddressExtractor:
    def __init__(self, executor: CommandExecutor) -> None:
        self.executor = executor

    def extract(self, interface: str) -> ipaddress.IPv4Interface | None:
        result = self.executor.run(f"ip addr show {interface}")
        if not result.ok:
            logger.info("Address query failed", interface=interface, error=result.output.strip())
            return None

        logger.debug("Address query output", interface=interface, output=result.output)
        return parse_address(result.output)
