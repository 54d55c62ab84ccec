# smartmoney/optimization.py
from typing import List
from .schemas import Debt, PayoffReport, Strategy

MAX_MONTHS = 600  # 50 years
BALANCE_EPSILON = 0.01
STRATEGIES = ("avalanche", "snowball")


def _clone_debts(debts: List[Debt]) -> List[Debt]:
    return [Debt(**d.model_dump()) for d in debts]


def _is_all_cleared(debts: List[Debt]) -> bool:
    return all(d.balance <= BALANCE_EPSILON for d in debts)


def _pick_target(active: List[Debt], strategy: Strategy) -> Debt:
    # sorted() is stable, so ties keep input order
    if strategy == "avalanche":
        return sorted(active, key=lambda x: -x.monthly_rate)[0]
    return sorted(active, key=lambda x: x.balance)[0]


def _pay_minimums(debts: List[Debt]) -> float:
    paid = 0.0
    for d in debts:
        if d.balance <= 0:
            continue
        interest = d.balance * d.monthly_rate
        paid += d.min_payment
        d.balance = max(0.0, d.balance + interest - d.min_payment)
    return paid


def simulate(debts: List[Debt], extra_payment: float, strategy: Strategy = "avalanche") -> PayoffReport:
    """
    Month-by-month payoff of already-eligible debts.

    Every open debt accrues interest and gets its minimum; the extra budget then
    goes to one target debt (highest rate for avalanche, smallest balance for
    snowball). When the target closes, its minimum joins the extra budget for
    the following months. Stops when all balances are cleared or at MAX_MONTHS.
    """
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown strategy '{strategy}'; expected one of {STRATEGIES}.")

    ds = _clone_debts(debts)
    total_min = sum(d.min_payment for d in ds)
    monthly_payment = total_min + extra_payment

    months = 0
    total_paid = 0.0
    current_extra = extra_payment

    while months < MAX_MONTHS and not _is_all_cleared(ds):
        months += 1
        total_paid += _pay_minimums(ds)

        active = [d for d in ds if d.balance > 0]
        if not active:
            continue
        target = _pick_target(active, strategy)
        applied = min(current_extra, target.balance)
        target.balance -= applied
        total_paid += applied

        if target.balance <= BALANCE_EPSILON:
            target.balance = 0.0
            current_extra += target.min_payment

    total_original = sum(d.balance for d in debts)
    return PayoffReport(
        strategy=strategy,
        extra_payment=extra_payment,
        months=months,
        years=months // 12,
        remaining_months=months % 12,
        total_paid=total_paid,
        total_interest=total_paid - total_original,
        monthly_payment=monthly_payment,
    )
