# smartmoney/health.py
from typing import List, Optional
from .schemas import FinancialSnapshot, HealthReport, SubScore
from .utils import round_half_up

SAVINGS_MAX = 40
DEBT_MAX = 30
EMERGENCY_MAX = 30


def _savings_rate_score(rate: float) -> int:
    if rate >= 20:
        return 40
    if rate >= 15:
        return 35
    if rate >= 10:
        return 25
    if rate >= 5:
        return 15
    if rate > 0:
        return 5
    return 0


def _debt_ratio_score(ratio: float) -> int:
    if ratio == 0:
        return 30
    if ratio < 10:
        return 25
    if ratio < 20:
        return 20
    if ratio < 36:
        return 10
    return 0


def _emergency_fund_score(months: float) -> int:
    if months >= 6:
        return 30
    if months >= 3:
        return 20
    if months >= 1:
        return 10
    if months > 0:
        return 5
    return 0


def score_health(snapshot: FinancialSnapshot) -> Optional[HealthReport]:
    """Composite 0-100 score; None when there is no income to score against."""
    income = snapshot.monthly_income
    expenses = snapshot.monthly_expenses
    if income == 0:
        return None

    savings_rate = (income - expenses) / income * 100
    annual_income = income * 12
    debt_ratio = snapshot.debts / annual_income * 100 if annual_income > 0 else 0.0
    months_of_expenses = snapshot.savings / expenses if expenses > 0 else 0.0

    s = _savings_rate_score(savings_rate)
    d = _debt_ratio_score(debt_ratio)
    e = _emergency_fund_score(months_of_expenses)

    return HealthReport(
        total=round_half_up(s + d + e),
        savings_rate=SubScore(value=savings_rate, score=s, max=SAVINGS_MAX),
        debt_ratio=SubScore(value=debt_ratio, score=d, max=DEBT_MAX),
        emergency_fund=SubScore(value=months_of_expenses, score=e, max=EMERGENCY_MAX),
    )


def rate_score(score: float) -> str:
    if score >= 80:
        return "Excellent"
    if score >= 60:
        return "Good"
    if score >= 40:
        return "Fair"
    return "Needs Improvement"


def improvement_tips(report: HealthReport) -> List[str]:
    tips: List[str] = []
    if report.savings_rate.score < 30:
        tips.append(f"Increase your savings rate: Currently saving {report.savings_rate.value:.1f}%, aim for 15-20%")
    if report.debt_ratio.score < 20 and report.debt_ratio.value > 0:
        tips.append(f"Reduce debt: Current debt is {report.debt_ratio.value:.1f}% of annual income, target below 20%")
    if report.emergency_fund.score < 20:
        tips.append(f"Build emergency fund: Currently {report.emergency_fund.value:.1f} months of expenses, target 6 months")
    if not tips:
        tips.append("Great work! Keep maintaining these healthy financial habits.")
    return tips
