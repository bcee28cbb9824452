# Requires Python 3.12+
"""
Persisted calculator inputs.

The form-driven front end keeps its fields between sessions. This module is
that state: a plain dataclass, a JSON file to keep it in, the form's bounds,
and the conversion into the immutable LoanParameters handed to the engine on
every recomputation. The engine itself never reads or writes this file.

Payment units:
    emi         monthly installment
    prepayment  monthly recurring top-up
Both are converted to per-period amounts together by
LoanParameters.from_monthly().
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path

from loan_prepayment.amortization import LoanParameters, PaymentFrequency
from loan_prepayment.installments import compute_emi

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

DEFAULT_INPUTS_PATH = Path.home() / ".loan_prepayment" / "inputs.json"

MAX_ANNUAL_RATE = 100.0
MAX_TENURE_YEARS = 50


@dataclass
class CalculatorInputs:
    """Form fields of the simulator, with their first-run defaults."""
    original: float = 3_200_000.0        # Original loan amount (display only)
    remaining: float = 2_945_000.0       # Outstanding principal before one-time payment
    emi: float = 33_600.0                # Monthly installment
    annual_rate: float = 8.2             # % p.a.
    prepayment: float = 0.0              # Monthly recurring prepayment
    one_time: float = 0.0                # Lump sum applied at period 0
    frequency: str = "monthly"           # PaymentFrequency label
    tenure: int = 0                      # Years; 0 = EMI entered by hand

    def clamped(self) -> CalculatorInputs:
        """Apply the form's bounds to every field."""
        remaining = max(0.0, self.remaining)
        return replace(
            self,
            original=max(0.0, self.original),
            remaining=remaining,
            emi=max(0.0, self.emi),
            annual_rate=min(MAX_ANNUAL_RATE, max(0.0, self.annual_rate)),
            prepayment=min(remaining, max(0.0, self.prepayment)),
            one_time=min(remaining, max(0.0, self.one_time)),
            frequency=PaymentFrequency.coerce(self.frequency).label,
            tenure=min(MAX_TENURE_YEARS, max(0, int(self.tenure))),
        )

    def with_tenure(self, years: int) -> CalculatorInputs:
        """
        Set the tenure and derive the EMI that pays the loan off over it.

        The tenure and the other fields are clamped to the form bounds first, so
        the EMI always matches the stored tenure.
        """
        inputs = replace(self, tenure=years).clamped()
        principal = max(0.0, inputs.remaining - inputs.one_time)
        return replace(inputs, emi=compute_emi(principal, inputs.annual_rate, inputs.tenure))

    def to_loan_parameters(self) -> LoanParameters:
        inputs = self.clamped()
        return LoanParameters.from_monthly(
            remaining_principal=inputs.remaining,
            monthly_payment=inputs.emi,
            annual_interest_rate=inputs.annual_rate,
            frequency=inputs.frequency,
            one_time_prepayment=inputs.one_time,
            monthly_recurring_prepayment=inputs.prepayment,
        )


def _coerce_field(name: str, value: object, default: object) -> object:
    if isinstance(default, str):
        if not isinstance(value, str):
            raise TypeError(f"{name} must be a string")
        PaymentFrequency.from_label(value)
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number")
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite")
    return type(default)(value)


def inputs_from_dict(data: dict) -> CalculatorInputs:
    """
    Build inputs from a decoded JSON object.

    Missing or invalid fields keep their defaults; unknown keys are ignored.
    """
    defaults = CalculatorInputs()
    values = {}
    for f in fields(CalculatorInputs):
        if f.name not in data:
            continue
        default = getattr(defaults, f.name)
        try:
            values[f.name] = _coerce_field(f.name, data[f.name], default)
        except (TypeError, ValueError, OverflowError) as e:
            logger.warning("ignoring stored %s=%r: %s", f.name, data[f.name], e)
    return replace(defaults, **values)


def load_inputs(path: str | Path = DEFAULT_INPUTS_PATH) -> CalculatorInputs:
    """Read stored inputs, falling back to defaults when the file is unusable."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.debug("no stored inputs at %s, using defaults", path)
        return CalculatorInputs()
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("could not read stored inputs from %s: %s", path, e)
        return CalculatorInputs()
    if not isinstance(data, dict):
        logger.warning("stored inputs in %s are not an object, using defaults", path)
        return CalculatorInputs()
    return inputs_from_dict(data)


def save_inputs(inputs: CalculatorInputs, path: str | Path = DEFAULT_INPUTS_PATH) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(asdict(inputs), f, indent=2)
    return path
