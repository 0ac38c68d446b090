"""Scan orchestrator — probes every VLAN ID in the configured range."""

from __future__ import annotations

import time
from pathlib import Path

from vlanscanner.core.logging import get_logger
from vlanscanner.core.report import ReportSink
from vlanscanner.modules.prober import VlanProber
from vlanscanner.schemas.scan import ProbeOutcome, ScanSettings

logger = get_logger(__name__)


class ScanOrchestrator:
    """Runs the prober over ``settings.vlan_ids`` and writes the report.

    Probes run strictly one after another in ascending VLAN order; the full
    range is always scanned.
    """

    def __init__(self, prober: VlanProber, sink: ReportSink) -> None:
        self.prober = prober
        self.sink = sink
        self.report_path: Path | None = None

    def scan(self, settings: ScanSettings) -> list[ProbeOutcome]:
        logger.info(
            "Starting VLAN scan",
            interface=settings.interface,
            range_start=settings.range_start,
            range_end=settings.range_end,
            wait_seconds=settings.wait_seconds,
            estimated_seconds=settings.vlan_count * settings.wait_seconds,
        )
        started = time.monotonic()

        outcomes: list[ProbeOutcome] = []
        for vlan_id in settings.vlan_ids:
            outcome = self.prober.probe(settings.interface, vlan_id, settings.wait_seconds)
            if outcome is not None:
                outcomes.append(outcome)

        self.report_path = self.sink.write(outcomes)
        logger.info(
            "Finished checking all VLANs",
            checked=settings.vlan_count,
            with_ip=len(outcomes),
            duration_s=round(time.monotonic() - started, 1),
        )
        return outcomes
