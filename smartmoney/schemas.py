# smartmoney/schemas.py
from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List, Literal

from .utils import to_number

Strategy = Literal["avalanche", "snowball"]


class CamelModel(BaseModel):
    # the UI posts camelCase keys; python callers use snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Debt(CamelModel):
    """
    One liability entered in the payoff calculator.
    interest_rate is the annual percentage (e.g. 19.99). Numeric fields accept
    numbers or numeric strings; blank/unparseable input is stored as None so
    the planner can drop the debt as ineligible.
    """
    name: str = ""
    balance: Optional[float] = None
    interest_rate: Optional[float] = None
    min_payment: Optional[float] = None

    @field_validator("balance", "interest_rate", "min_payment", mode="before")
    @classmethod
    def _parse_number(cls, v):
        return to_number(v)

    @field_validator("name", mode="before")
    @classmethod
    def _parse_name(cls, v):
        return "" if v is None else str(v).strip()

    @property
    def monthly_rate(self) -> float:
        return (self.interest_rate or 0.0) / 100.0 / 12.0

    @property
    def is_eligible(self) -> bool:
        if self.balance is None or self.interest_rate is None or self.min_payment is None:
            return False
        return self.balance > 0 and self.interest_rate >= 0 and self.min_payment > 0


class FinancialSnapshot(CamelModel):
    monthly_income: float = 0.0
    monthly_expenses: float = 0.0
    savings: float = 0.0
    debts: float = 0.0  # aggregate figure, not the itemised Debt list
    goals: str = ""

    @field_validator("monthly_income", "monthly_expenses", "savings", "debts", mode="before")
    @classmethod
    def _default_zero(cls, v):
        x = to_number(v)
        return 0.0 if x is None else x

    @field_validator("goals", mode="before")
    @classmethod
    def _parse_goals(cls, v):
        return "" if v is None else str(v)


# ---------- Payoff reporting ----------

class PayoffReport(CamelModel):
    strategy: Strategy
    extra_payment: float
    months: int
    years: int
    remaining_months: int
    total_paid: float
    total_interest: float
    monthly_payment: float


class ScenarioResult(CamelModel):
    name: str
    extra_payment: float
    avalanche: PayoffReport
    snowball: PayoffReport

    @computed_field
    @property
    def interest_saved(self) -> float:
        """Interest avoided by choosing avalanche over snowball."""
        return self.snowball.total_interest - self.avalanche.total_interest

    @computed_field
    @property
    def months_saved(self) -> int:
        return self.snowball.months - self.avalanche.months


class PlanReport(CamelModel):
    total_debt: float
    total_min_payment: float
    recommended_extra: float
    scenarios: List[ScenarioResult]
    recommended: ScenarioResult
    debts: List[Debt]

    @property
    def current(self) -> ScenarioResult:
        return self.scenarios[0]


# ---------- Health score ----------

class SubScore(CamelModel):
    value: float
    score: int
    max: int


class HealthReport(CamelModel):
    total: int
    savings_rate: SubScore
    debt_ratio: SubScore
    emergency_fund: SubScore

    @computed_field
    @property
    def rating(self) -> str:
        # local import: health imports this module
        from .health import rate_score
        return rate_score(self.total)


# ---------- Chat contract ----------

class ChatTurn(BaseModel):
    role: str
    content: str


class ChatRequest(CamelModel):
    financial_data: FinancialSnapshot = Field(default_factory=FinancialSnapshot)
    message: str
    history: List[ChatTurn] = []


class ChatResponse(BaseModel):
    success: bool
    response: Optional[str] = None
    error: Optional[str] = None
