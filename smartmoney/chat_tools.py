# smartmoney/chat_tools.py
import logging
from typing import Dict, List, Optional, Tuple
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from .schemas import ChatRequest, ChatResponse, ChatTurn, FinancialSnapshot
from .health import score_health, improvement_tips
from .prompts import SYSTEM_PROMPT_ADVISOR
from .utils import money

logger = logging.getLogger(__name__)

# ---------- Context ----------

def build_financial_context(snapshot: FinancialSnapshot) -> str:
    lines = [
        "User Financial Profile:",
        f"- Monthly Income: {money(snapshot.monthly_income)}",
        f"- Monthly Expenses: {money(snapshot.monthly_expenses)}",
        f"- Savings: {money(snapshot.savings)}",
        f"- Total Debt: {money(snapshot.debts)}",
    ]
    if snapshot.goals.strip():
        lines.append(f"- Goals: {snapshot.goals.strip()}")
    report = score_health(snapshot)
    if report is not None:
        lines.append(f"- Financial Health Score: {report.total}/100 ({report.rating})")
    return "\n".join(lines)


def history_to_messages(history: List[ChatTurn]) -> List[BaseMessage]:
    messages: List[BaseMessage] = []
    for turn in history:
        role = turn.role.strip().lower()
        if role == "user":
            messages.append(HumanMessage(content=turn.content))
        elif role == "assistant":
            messages.append(AIMessage(content=turn.content))
    return messages

# ---------- Slash commands ----------

def parse_slash_command(text: str) -> Tuple[str, Dict[str, str]]:
    """
    Very small parser for messages like:
    /score
    /score detail=true   (adds the sub-score breakdown)
    /ask question="should I pay off my card first"   (sends only the question)
    """
    if not text.startswith("/"):
        return "", {}
    parts = text.strip().split()
    cmd = parts[0][1:].lower()
    kv: Dict[str, str] = {}
    rest = text.strip()[len(parts[0]):].strip()
    # split by spaces but keep quoted segments together
    buf = ""
    in_quotes = False
    for ch in rest:
        if ch == '"':
            in_quotes = not in_quotes
            buf += ch
        elif ch == " " and not in_quotes:
            buf += "\n"
        else:
            buf += ch
    for token in [t for t in buf.split("\n") if t.strip()]:
        if "=" in token:
            k, v = token.split("=", 1)
            kv[k.strip().lower()] = v.strip().strip('"')
    return cmd, kv


def score_reply(snapshot: FinancialSnapshot, detail: bool = False) -> str:
    report = score_health(snapshot)
    if report is None:
        return "I need your monthly income to calculate a Financial Health Score."
    lines = [f"**Financial Health Score: {report.total}/100 ({report.rating})**"]
    if detail:
        lines.extend([
            f"- Savings rate: {report.savings_rate.value:.1f}% ({report.savings_rate.score}/{report.savings_rate.max})",
            f"- Debt to income: {report.debt_ratio.value:.1f}% ({report.debt_ratio.score}/{report.debt_ratio.max})",
            f"- Emergency fund: {report.emergency_fund.value:.1f} months ({report.emergency_fund.score}/{report.emergency_fund.max})",
        ])
    lines.extend(["", "**Tips:**"])
    lines.extend(f"- {tip}" for tip in improvement_tips(report))
    return "\n".join(lines)


def _is_true(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")

# ---------- Chat ----------

def answer_chat(request: ChatRequest, llm: Optional[object]) -> ChatResponse:
    message = request.message.strip()
    if not message:
        return ChatResponse(success=False, error="Message is empty.")

    cmd, kv = parse_slash_command(message)
    if cmd == "score":
        detail = _is_true(kv.get("detail", ""))
        return ChatResponse(success=True, response=score_reply(request.financial_data, detail=detail))
    if cmd == "ask":
        message = (kv.get("question") or kv.get("q", "")).strip()
        if not message:
            return ChatResponse(success=False, error='Please provide a question. Use: /ask question="your question"')

    if llm is None:
        return ChatResponse(success=False, error="LLM not configured (set GROQ_API_KEY).")

    messages: List[BaseMessage] = [SystemMessage(content=SYSTEM_PROMPT_ADVISOR)]
    messages.append(SystemMessage(content=build_financial_context(request.financial_data)))
    messages.extend(history_to_messages(request.history))
    messages.append(HumanMessage(content=message))

    try:
        resp = llm.invoke(messages)
    except Exception as e:
        logger.error("Chat completion failed: %s", e)
        return ChatResponse(success=False, error=f"AI Assistant Error: {e}")
    content = resp.content if hasattr(resp, "content") else str(resp)
    return ChatResponse(success=True, response=content)
