# smartmoney/api.py
import logging
import time
from typing import Any, List, Optional
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from langchain_groq import ChatGroq

from . import config
from .schemas import ChatRequest, Debt, FinancialSnapshot, CamelModel
from .scenarios import plan_payoff
from .health import score_health, improvement_tips
from .plan_utils import comparison_records
from .chat_tools import answer_chat

logger = logging.getLogger(__name__)

# ======================================
# App + CORS
# ======================================
app = FastAPI(
    title="SmartMoney",
    description="Personal finance advisor: health score, debt payoff planning and AI chat",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ======================================
# Models
# ======================================
class PlanRequest(CamelModel):
    debts: List[Debt] = []
    extra_payment: Optional[Any] = None  # raw form value; blank means "use the default"
    financial_data: Optional[FinancialSnapshot] = None


# ======================================
# Defaults
# ======================================
DEFAULT_DEBTS = [
    {"name": "Credit Card", "balance": 5000, "interestRate": 22.99, "minPayment": 150},
    {"name": "Car Loan", "balance": 12000, "interestRate": 6.5, "minPayment": 300},
    {"name": "Student Loan", "balance": 18000, "interestRate": 4.5, "minPayment": 200},
]


# ======================================
# Helpers
# ======================================
def get_llm():
    """Return ChatGroq LLM if GROQ_API_KEY exists, else None (so endpoints can still work)."""
    if not config.GROQ_API_KEY:
        return None
    return ChatGroq(
        model=config.LLM_MODEL,
        groq_api_key=config.GROQ_API_KEY,
        temperature=config.LLM_TEMPERATURE,
    )


# ======================================
# Routes
# ======================================
@app.get("/api/health")
async def health_check():
    return {
        "status": "healthy",
        "message": "SmartMoney API is running!",
        "timestamp": time.time(),
        "llm_configured": bool(config.GROQ_API_KEY),
    }


@app.post("/api/health-score")
async def health_score(snapshot: FinancialSnapshot):
    report = score_health(snapshot)
    if report is None:
        logger.info("Health score skipped: no monthly income")
        return {"success": True, "report": None, "rating": None, "tips": []}
    return {
        "success": True,
        "report": report.model_dump(by_alias=True),
        "rating": report.rating,
        "tips": improvement_tips(report),
    }


@app.post("/api/payoff/plan")
async def payoff_plan(request: PlanRequest):
    plan = plan_payoff(request.debts, request.extra_payment, request.financial_data)
    if plan is None:
        logger.info("Payoff plan skipped: none of %d debts eligible", len(request.debts))
        return {"success": True, "plan": None, "comparison": []}
    logger.info("Payoff plan for %d debts, recommended extra %.0f", len(plan.debts), plan.recommended_extra)
    return {
        "success": True,
        "plan": plan.model_dump(by_alias=True),
        "comparison": comparison_records(plan),
    }


@app.post("/api/chat")
async def chat(request: ChatRequest, llm=Depends(get_llm)):
    result = answer_chat(request, llm)
    if not result.success:
        logger.warning("Chat request failed: %s", result.error)
    return result.model_dump(exclude_none=True)


@app.get("/api/defaults/debts")
async def get_default_debts():
    return {"debts": DEFAULT_DEBTS}


def main():
    import uvicorn
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)


if __name__ == "__main__":
    main()
