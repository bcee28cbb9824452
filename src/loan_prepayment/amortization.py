# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from enum import Enum

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

# Hard stop for the projection. Bounds the loop when payments never amortize.
PERIOD_CAP = 500


class InsufficientPaymentWarning(UserWarning):
    """Per-period payment does not cover the first period's interest."""


# =============================================================================
# Payment frequency
# =============================================================================

class PaymentFrequency(Enum):
    """Billing frequency; the value is the number of payments per year."""
    WEEKLY = 52
    BIWEEKLY = 26
    MONTHLY = 12
    SEMIANNUAL = 2
    YEARLY = 1

    @property
    def payments_per_year(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def period_name(self) -> str:
        """Plural name of one period, used in payoff text."""
        return _PERIOD_NAMES[self]

    @classmethod
    def from_label(cls, label: str) -> PaymentFrequency:
        key = label.strip().lower()
        for freq, name in _LABELS.items():
            if name == key or freq.name.lower() == key:
                return freq
        raise ValueError(f"unknown payment frequency {label!r}, expected one of {sorted(_LABELS.values())}")

    @classmethod
    def coerce(cls, value: PaymentFrequency | str | int) -> PaymentFrequency:
        """Accept an enum member, a UI label or a payments-per-year count."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_label(value)
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            raise ValueError(f"unsupported payments per year: {value!r}") from None


_LABELS = {
    PaymentFrequency.WEEKLY: "weekly",
    PaymentFrequency.BIWEEKLY: "biweekly",
    PaymentFrequency.MONTHLY: "monthly",
    PaymentFrequency.SEMIANNUAL: "6-months",
    PaymentFrequency.YEARLY: "yearly",
}

_PERIOD_NAMES = {
    PaymentFrequency.WEEKLY: "weeks",
    PaymentFrequency.BIWEEKLY: "bi-weekly periods",
    PaymentFrequency.MONTHLY: "months",
    PaymentFrequency.SEMIANNUAL: "half-year periods",
    PaymentFrequency.YEARLY: "years",
}


# =============================================================================
# Inputs and outputs
# =============================================================================

@dataclass(frozen=True)
class LoanParameters:
    """
    Inputs to one schedule projection.

    Payment convention:
        regular_payment and recurring_prepayment are both PER-PERIOD amounts at
        `frequency`. Callers holding monthly figures (an EMI plus a monthly
        top-up) convert both at once with LoanParameters.from_monthly().

    Rates are stored as percentage (e.g. 8.2 for 8.2% p.a.).
    """
    remaining_principal: float
    one_time_prepayment: float = 0.0
    regular_payment: float = 0.0
    annual_interest_rate: float = 0.0
    recurring_prepayment: float = 0.0
    frequency: PaymentFrequency = PaymentFrequency.MONTHLY

    def __post_init__(self) -> None:
        object.__setattr__(self, "frequency", PaymentFrequency.coerce(self.frequency))
        for name in ("remaining_principal", "one_time_prepayment", "regular_payment",
                     "annual_interest_rate", "recurring_prepayment"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    @classmethod
    def from_monthly(
        cls,
        remaining_principal: float,
        monthly_payment: float,
        annual_interest_rate: float,
        frequency: PaymentFrequency | str | int = PaymentFrequency.MONTHLY,
        one_time_prepayment: float = 0.0,
        monthly_recurring_prepayment: float = 0.0,
    ) -> LoanParameters:
        """
        Build parameters from monthly-denominated payment figures.

        Both the installment and the recurring prepayment are scaled by
        12 / payments_per_year, so the yearly outlay is the same whatever
        frequency is selected.
        """
        freq = PaymentFrequency.coerce(frequency)
        scale = 12 / freq.payments_per_year
        return cls(
            remaining_principal=remaining_principal,
            one_time_prepayment=one_time_prepayment,
            regular_payment=monthly_payment * scale,
            annual_interest_rate=annual_interest_rate,
            recurring_prepayment=monthly_recurring_prepayment * scale,
            frequency=freq,
        )

    @property
    def payments_per_year(self) -> int:
        return self.frequency.payments_per_year

    @property
    def starting_balance(self) -> float:
        """Balance after the one-time prepayment, never negative."""
        return max(0.0, self.remaining_principal - self.one_time_prepayment)

    @property
    def rate_per_period(self) -> float:
        return self.annual_interest_rate / 100 / self.payments_per_year

    @property
    def payment_per_period(self) -> float:
        return self.regular_payment + self.recurring_prepayment

    @property
    def annual_payment(self) -> float:
        return self.payment_per_period * self.payments_per_year


@dataclass(frozen=True)
class PeriodRecord:
    """
    One row of the amortization schedule.

    Monetary fields are rounded to 2 decimals when the record is emitted;
    ending_balance is floored at zero before rounding.
    """
    period_index: int
    interest_accrued: float
    cumulative_interest: float
    ending_balance: float
    payment: float = 0.0
    principal_paid: float = 0.0


# =============================================================================
# Insufficient payment advisory
# =============================================================================

def is_payment_insufficient(params: LoanParameters) -> bool:
    """True if the per-period payment is below the first period's interest."""
    first_interest = params.starting_balance * params.rate_per_period
    return params.payment_per_period < first_interest


def check_payment(params: LoanParameters) -> str | None:
    """Return the advisory message for an insufficient payment, else None."""
    if not is_payment_insufficient(params):
        return None
    first_interest = params.starting_balance * params.rate_per_period
    return (
        f"payment of {params.payment_per_period:.2f} per period does not cover "
        f"the first period's interest of {first_interest:.2f}; balance will grow"
    )


# =============================================================================
# Schedule projection
# =============================================================================

def compute_schedule(params: LoanParameters) -> list[PeriodRecord]:
    """
    Project the loan period by period until payoff or PERIOD_CAP.

    For period k:
        INTEREST(k)  = BAL(k-1) × r
        PAYMENT(k)   = min(regular + recurring, BAL(k-1) + INTEREST(k))
        PRINCIPAL(k) = PAYMENT(k) - INTEREST(k)
        BAL(k)       = BAL(k-1) - PRINCIPAL(k)

    Where r = annual_interest_rate / 100 / payments_per_year and
    BAL(0) = max(0, remaining_principal - one_time_prepayment).

    The running balance and cumulative interest are kept unrounded; rounding
    to 2 decimals happens only on the emitted records.

    If the payment does not cover the first period's interest an
    InsufficientPaymentWarning is issued and the projection still runs to the
    cutoff. A schedule that stops at PERIOD_CAP with a positive balance is
    otherwise indistinguishable from a long payoff; see summary.is_paid_off().

    Args:
        params: Loan parameters with per-period payment amounts

    Returns:
        Ordered list of PeriodRecord; empty if the starting balance is zero
    """
    balance = params.starting_balance
    rate = params.rate_per_period
    scheduled_payment = params.payment_per_period

    message = check_payment(params)
    if message is not None:
        warnings.warn(message, InsufficientPaymentWarning, stacklevel=2)

    records: list[PeriodRecord] = []
    period = 0
    cumulative_interest = 0.0

    while balance > 0 and period < PERIOD_CAP:
        period += 1
        interest = balance * rate
        payment = scheduled_payment
        final_period = payment >= balance + interest
        if final_period:
            payment = balance + interest
        principal_paid = payment - interest
        balance -= principal_paid
        if final_period:
            # (balance + interest) - interest can leave float residue
            balance = 0.0
        cumulative_interest += interest
        records.append(PeriodRecord(
            period_index=period,
            interest_accrued=round(interest, 2),
            cumulative_interest=round(cumulative_interest, 2),
            ending_balance=round(max(0.0, balance), 2),
            payment=round(payment, 2),
            principal_paid=round(principal_paid, 2),
        ))
        if balance <= 0:
            break

    if balance > 0 and period >= PERIOD_CAP:
        logger.debug("schedule stopped at %d periods with balance %.2f outstanding", PERIOD_CAP, balance)
    else:
        logger.debug("schedule paid off in %d periods", period)
    return records
