# Requires Python 3.12+
from __future__ import annotations

import csv
import io
import logging
from collections.abc import Sequence
from pathlib import Path

from loan_prepayment.amortization import PeriodRecord

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

CSV_HEADER = ["Period", "Interest", "CumulativeInterest", "Balance"]
DEFAULT_CSV_NAME = "amortization.csv"


def _format_amount(value: float) -> str:
    # 500.0 -> "500", 12.50 -> "12.5"
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def schedule_rows(schedule: Sequence[PeriodRecord]) -> list[list[str]]:
    """Header row followed by one row per record, in schedule order."""
    rows = [list(CSV_HEADER)]
    for record in schedule:
        rows.append([
            str(record.period_index),
            _format_amount(record.interest_accrued),
            _format_amount(record.cumulative_interest),
            _format_amount(record.ending_balance),
        ])
    return rows


def schedule_to_csv(schedule: Sequence[PeriodRecord]) -> str:
    """Serialize a schedule as comma-separated text (no trailing newline)."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerows(schedule_rows(schedule))
    return buffer.getvalue().rstrip("\n")


def write_schedule_csv(schedule: Sequence[PeriodRecord], path: str | Path = DEFAULT_CSV_NAME) -> Path:
    """Write the CSV export to `path` and return the resolved path."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with open(out, "w", encoding="utf-8", newline="") as f:
        f.write(schedule_to_csv(schedule))
    logger.info("wrote %d schedule rows to %s", len(schedule), out)
    return out
