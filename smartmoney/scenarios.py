# smartmoney/scenarios.py
import logging
from typing import Any, List, Optional
from .schemas import Debt, FinancialSnapshot, PlanReport, ScenarioResult
from .optimization import simulate
from .utils import round_half_up, to_number

logger = logging.getLogger(__name__)

DEFAULT_EXTRA_SHARE = 0.02       # of total debt, when the user leaves the field blank
FALLBACK_EXTRA_SHARE = 0.03      # of total debt, when cash-flow data can't support a figure
NO_SNAPSHOT_EXTRA_SHARE = 0.05   # of total debt, when no snapshot was supplied at all
MIN_ACTIONABLE_EXTRA = 100
ROUND_TO = 50


def eligible_debts(debts: List[Debt]) -> List[Debt]:
    return [d for d in debts if d.is_eligible]


def resolve_extra_payment(extra_payment_input: Any, total_debt: float) -> float:
    extra = to_number(extra_payment_input)
    if extra is None:
        return float(round_half_up(total_debt * DEFAULT_EXTRA_SHARE))
    return max(0.0, extra)


def _savings_fraction(months_of_savings: float) -> float:
    if months_of_savings >= 6:
        return 0.7
    if months_of_savings >= 3:
        return 0.5
    return 0.3


def recommend_payment(snapshot: FinancialSnapshot, total_debt: float, total_min_payment: float) -> int:
    """
    Suggest a monthly extra payment from the user's surplus after expenses and
    minimums. A bigger savings cushion frees a bigger share of the surplus.
    Without income/expense data, or when the result is under 100, fall back
    to 3% of total debt. Otherwise round to the nearest 50.
    """
    income = snapshot.monthly_income
    expenses = snapshot.monthly_expenses
    fallback = round_half_up(total_debt * FALLBACK_EXTRA_SHARE)

    if income == 0 or expenses == 0:
        return fallback

    surplus = income - expenses - total_min_payment
    months_of_savings = snapshot.savings / expenses
    fraction = _savings_fraction(months_of_savings)

    recommended = max(0, round_half_up(surplus * fraction))
    if recommended < MIN_ACTIONABLE_EXTRA:
        logger.debug("Recommended extra %s below %s; using fallback %s", recommended, MIN_ACTIONABLE_EXTRA, fallback)
        return fallback
    return round_half_up(recommended / ROUND_TO) * ROUND_TO


def _run_scenario(name: str, debts: List[Debt], extra: float) -> ScenarioResult:
    return ScenarioResult(
        name=name,
        extra_payment=extra,
        avalanche=simulate(debts, extra, "avalanche"),
        snowball=simulate(debts, extra, "snowball"),
    )


def plan_payoff(debts: List[Debt], extra_payment_input: Any = None,
                snapshot: Optional[FinancialSnapshot] = None) -> Optional[PlanReport]:
    valid = eligible_debts(debts)
    if not valid:
        return None

    total_debt = sum(d.balance for d in valid)
    total_min_payment = sum(d.min_payment for d in valid)

    extra = resolve_extra_payment(extra_payment_input, total_debt)
    if snapshot is not None:
        recommended = float(recommend_payment(snapshot, total_debt, total_min_payment))
    else:
        recommended = float(round_half_up(total_debt * NO_SNAPSHOT_EXTRA_SHARE))

    logger.debug("Planning %d debts: total=%.2f current_extra=%.2f recommended=%.2f",
                 len(valid), total_debt, extra, recommended)

    return PlanReport(
        total_debt=total_debt,
        total_min_payment=total_min_payment,
        recommended_extra=recommended,
        scenarios=[_run_scenario("Current", valid, extra)],
        recommended=_run_scenario("Recommended", valid, recommended),
        debts=valid,
    )
