# Requires Python 3.12+
"""
Loan Prepayment Simulator — amortization projections under prepayment policies.

The engine (amortization.compute_schedule) is a pure function of
LoanParameters; everything else in the package either feeds it inputs or
consumes its PeriodRecord rows.
"""

from __future__ import annotations

__version__ = "0.1.0"

# Schedule engine
from loan_prepayment.amortization import (
    PERIOD_CAP,
    InsufficientPaymentWarning,
    PaymentFrequency,
    LoanParameters,
    PeriodRecord,
    is_payment_insufficient,
    check_payment,
    compute_schedule,
)

# Closed-form installments
from loan_prepayment.installments import (
    annuity_factor,
    compute_emi,
)

# Derived outputs
from loan_prepayment.summary import (
    ScheduleArrays,
    ScheduleSummary,
    schedule_arrays,
    payoff_periods,
    total_interest,
    payoff_years,
    payoff_time_text,
    is_paid_off,
    summarize,
)

# Export and stored inputs
from loan_prepayment.export import (
    CSV_HEADER,
    schedule_to_csv,
    write_schedule_csv,
)
from loan_prepayment.inputs import (
    CalculatorInputs,
    load_inputs,
    save_inputs,
)

__all__ = [
    "__version__",
    # Schedule engine
    "PERIOD_CAP",
    "InsufficientPaymentWarning",
    "PaymentFrequency",
    "LoanParameters",
    "PeriodRecord",
    "is_payment_insufficient",
    "check_payment",
    "compute_schedule",
    # Installments
    "annuity_factor",
    "compute_emi",
    # Derived outputs
    "ScheduleArrays",
    "ScheduleSummary",
    "schedule_arrays",
    "payoff_periods",
    "total_interest",
    "payoff_years",
    "payoff_time_text",
    "is_paid_off",
    "summarize",
    # Export and stored inputs
    "CSV_HEADER",
    "schedule_to_csv",
    "write_schedule_csv",
    "CalculatorInputs",
    "load_inputs",
    "save_inputs",
]
