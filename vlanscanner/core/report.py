"""Report sink — persists scan outcomes as a timestamped JSON file."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime
from pathlib import Path

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from vlanscanner.core.exceptions import ReportReadError, ReportWriteError
from vlanscanner.core.logging import get_logger
from vlanscanner.schemas.scan import ProbeOutcome, ScanReport

logger = get_logger(__name__)

REPORT_PREFIX = "vlan_ips_"
TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"


def report_filename(when: datetime) -> str:
    return f"{REPORT_PREFIX}{when.strftime(TIMESTAMP_FORMAT)}.json"


class ReportSink:
    """Writes one report file per run into ``output_dir``."""

    def __init__(
        self,
        output_dir: Path = Path("."),
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.output_dir = Path(output_dir)
        self._clock = clock

    def write(self, outcomes: Sequence[ProbeOutcome]) -> Path:
        path = self.output_dir / report_filename(self._clock())
        try:
            payload = ScanReport.dump_json(list(outcomes), indent=2)
        except PydanticSerializationError as exc:
            raise ReportWriteError(path, str(exc)) from exc

        try:
            path.write_bytes(payload)
        except OSError as exc:
            raise ReportWriteError(path, str(exc)) from exc

        logger.info("Report written", path=str(path), vlans=len(outcomes))
        return path


def load_report(path: Path) -> list[ProbeOutcome]:
    """Read back a report file written by :class:`ReportSink`."""
    try:
        return ScanReport.validate_json(Path(path).read_bytes())
    except (OSError, ValidationError) as exc:
        raise ReportReadError(Path(path), str(exc)) from exc
