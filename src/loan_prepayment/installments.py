# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

__version__ = "0.1.0"


# =============================================================================
# Equated installments (closed-form annuity)
# =============================================================================
#
# The helpers in this module are independent of the iterative schedule in
# amortization.py. They answer the inverse question: what level monthly
# installment pays a given principal off over a target tenure?
#
#   AF(r, n) = r × (1 + r)^n / [(1 + r)^n - 1]
#   EMI      = P × AF(r, n)
#
# Compounding is always monthly here, whatever frequency the schedule itself
# is run at.
# =============================================================================

def annuity_factor(rate_per_period: float, num_periods: float) -> float:
    """
    Level payment per unit of principal that amortizes a loan to zero.

    Formula:
        AF(r, n) = r × (1 + r)^n / [(1 + r)^n - 1]

    With r = 0 the payment degenerates to straight-line repayment, 1 / n.

    Args:
        rate_per_period: Periodic interest rate as decimal (e.g. 0.0075 for 0.75%)
        num_periods: Number of level payments (n)

    Returns:
        Payment per unit of principal

    Raises:
        ValueError: If num_periods is not positive
        ValueError: If rate_per_period is negative
    """
    if num_periods <= 0:
        raise ValueError(f"num_periods must be positive, got {num_periods}")
    if rate_per_period < 0:
        raise ValueError(f"rate_per_period must be non-negative, got {rate_per_period}")
    if rate_per_period == 0.0:
        return 1.0 / num_periods
    growth = (1 + rate_per_period) ** num_periods
    return rate_per_period * growth / (growth - 1)


def compute_emi(principal: float, annual_interest_rate: float, years: float) -> float:
    """
    Calculate the equated monthly installment for a target payoff tenure.

    Args:
        principal: Amount to be repaid
        annual_interest_rate: Annual rate as percentage (e.g. 9.0 for 9%)
        years: Target tenure in years

    Returns:
        Monthly installment rounded to 2 decimal places; 0.0 for a zero tenure

    Raises:
        ValueError: If any argument is negative

    Example:
        >>> compute_emi(1_200_000, 9.0, 20)
        10796.71
    """
    if principal < 0:
        raise ValueError(f"principal must be non-negative, got {principal}")
    if annual_interest_rate < 0:
        raise ValueError(f"annual_interest_rate must be non-negative, got {annual_interest_rate}")
    if years < 0:
        raise ValueError(f"years must be non-negative, got {years}")

    monthly_rate = annual_interest_rate / 100 / 12
    n = years * 12
    if n == 0:
        return 0.0
    if monthly_rate == 0.0:
        return round(principal / n, 2)
    # n may be fractional for tenures like 2.5 years; the closed form still holds
    return round(principal * annuity_factor(monthly_rate, n), 2)
