# Requires Python 3.12+
from __future__ import annotations

import argparse
import logging
import warnings
from dataclasses import replace
from pathlib import Path

from loan_prepayment.amortization import PaymentFrequency, check_payment, compute_schedule
from loan_prepayment.export import write_schedule_csv
from loan_prepayment.inputs import DEFAULT_INPUTS_PATH, MAX_TENURE_YEARS, load_inputs, save_inputs
from loan_prepayment.summary import summarize


def _frequency(val: str) -> str:
    try:
        return PaymentFrequency.coerce(int(val) if val.isdigit() else val).label
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _tenure(val: str) -> int:
    try:
        years = int(val)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid tenure: {val!r}") from None
    if not 0 <= years <= MAX_TENURE_YEARS:
        raise argparse.ArgumentTypeError(f"tenure must be between 0 and {MAX_TENURE_YEARS} years, got {years}")
    return years


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="loan-prepayment", description="Loan payoff simulator")
    p.add_argument("--inputs", type=Path, default=DEFAULT_INPUTS_PATH, help="Stored inputs file (JSON)")
    p.add_argument("--save", action="store_true", help="Write the effective inputs back to --inputs")
    p.add_argument("--remaining", type=float, default=None, help="Remaining principal")
    p.add_argument("--one-time", type=float, default=None, help="One-time prepayment applied now")
    p.add_argument("--emi", type=float, default=None, help="Monthly installment")
    p.add_argument("--rate", type=float, default=None, help="Annual interest rate (%%)")
    p.add_argument("--prepayment", type=float, default=None, help="Monthly recurring prepayment")
    p.add_argument(
        "--frequency",
        type=_frequency,
        default=None,
        help="weekly, biweekly, monthly, 6-months, yearly (or payments per year)",
    )
    p.add_argument("--tenure", type=_tenure, default=None, help="Derive the EMI from a payoff tenure in years")
    p.add_argument("--table", action="store_true", help="Print every schedule row")
    p.add_argument("--csv", type=Path, default=None, help="Export the schedule as CSV")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    inputs = load_inputs(args.inputs)
    overrides = {
        "remaining": args.remaining,
        "one_time": args.one_time,
        "emi": args.emi,
        "annual_rate": args.rate,
        "prepayment": args.prepayment,
        "frequency": args.frequency,
    }
    inputs = replace(inputs, **{k: v for k, v in overrides.items() if v is not None})
    if args.tenure is not None:
        inputs = inputs.with_tenure(args.tenure)
    inputs = inputs.clamped()

    params = inputs.to_loan_parameters()
    notice = check_payment(params)
    # The notice is printed below; the warning itself would only repeat it.
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        schedule = compute_schedule(params)
    summary = summarize(schedule, params.frequency)

    if args.table:
        print(f"{'Period':>6}  {'Interest':>14}  {'Cumulative':>16}  {'Balance':>16}")
        for r in schedule:
            print(f"{r.period_index:>6}  {r.interest_accrued:>14,.2f}  "
                  f"{r.cumulative_interest:>16,.2f}  {r.ending_balance:>16,.2f}")

    print(f"Payoff time: {summary.payoff_text}")
    print(f"Total interest paid: {summary.total_interest:,.2f}")
    if notice is not None:
        print(f"Warning: {notice}")
    if not summary.paid_off:
        print(f"Balance still outstanding after {summary.payoff_periods} periods: "
              f"{schedule[-1].ending_balance:,.2f}")

    if args.csv is not None:
        out = write_schedule_csv(schedule, args.csv)
        print(f"Schedule written to {out}")
    if args.save:
        save_inputs(inputs, args.inputs)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
