# smartmoney/__init__.py
from .schemas import Debt, FinancialSnapshot, PayoffReport, PlanReport, HealthReport
from .optimization import simulate
from .scenarios import plan_payoff, recommend_payment
from .health import score_health, rate_score, improvement_tips
