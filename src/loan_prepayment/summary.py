# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from loan_prepayment.amortization import PaymentFrequency, PeriodRecord

__version__ = "0.1.0"


# =============================================================================
# Derived outputs
# =============================================================================
#
# Everything here is computed from an already-projected schedule. Nothing in
# this module re-runs the projection.
# =============================================================================

@dataclass
class ScheduleArrays:
    """
    Column view of a schedule for plotting and vector math.

    All arrays share the same length (number of periods); index i holds
    period i + 1.
    """
    period: np.ndarray
    interest: np.ndarray
    cumulative_interest: np.ndarray
    balance: np.ndarray


@dataclass
class ScheduleSummary:
    """Headline figures for a projected schedule."""
    payoff_periods: int
    total_interest: float
    payoff_years: float
    payoff_text: str
    paid_off: bool


def schedule_arrays(schedule: Sequence[PeriodRecord]) -> ScheduleArrays:
    """Split a schedule into numpy columns (balance vs period for charts)."""
    return ScheduleArrays(
        period=np.array([r.period_index for r in schedule], dtype=int),
        interest=np.array([r.interest_accrued for r in schedule], dtype=float),
        cumulative_interest=np.array([r.cumulative_interest for r in schedule], dtype=float),
        balance=np.array([r.ending_balance for r in schedule], dtype=float),
    )


def payoff_periods(schedule: Sequence[PeriodRecord]) -> int:
    return len(schedule)


def total_interest(schedule: Sequence[PeriodRecord]) -> float:
    """Sum of per-period interest, rounded to 2 decimals."""
    return round(sum(record.interest_accrued for record in schedule), 2)


def payoff_years(schedule: Sequence[PeriodRecord], frequency: PaymentFrequency | str | int) -> float:
    """Schedule length in years, to one decimal."""
    freq = PaymentFrequency.coerce(frequency)
    return round(len(schedule) / freq.payments_per_year, 1)


def payoff_time_text(schedule: Sequence[PeriodRecord], frequency: PaymentFrequency | str | int) -> str:
    """
    Human-readable payoff duration.

    Examples:
        "0"                            empty schedule
        "180 months (15.0 years)"      monthly
        "25 years"                     yearly
    """
    freq = PaymentFrequency.coerce(frequency)
    periods = len(schedule)
    if periods == 0:
        return "0"
    if freq is PaymentFrequency.YEARLY:
        return f"{periods} years"
    years = periods / freq.payments_per_year
    return f"{periods} {freq.period_name} ({years:.1f} years)"


def is_paid_off(schedule: Sequence[PeriodRecord]) -> bool:
    """False when the last record still carries a balance (cutoff reached)."""
    if not schedule:
        return True
    return schedule[-1].ending_balance <= 0


def summarize(schedule: Sequence[PeriodRecord], frequency: PaymentFrequency | str | int) -> ScheduleSummary:
    return ScheduleSummary(
        payoff_periods=payoff_periods(schedule),
        total_interest=total_interest(schedule),
        payoff_years=payoff_years(schedule, frequency),
        payoff_text=payoff_time_text(schedule, frequency),
        paid_off=is_paid_off(schedule),
    )
