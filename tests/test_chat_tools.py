#tests/test_chat_tools.py
from types import SimpleNamespace
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage
from smartmoney.schemas import ChatRequest, ChatTurn, FinancialSnapshot
from smartmoney.chat_tools import (
    answer_chat,
    build_financial_context,
    history_to_messages,
    parse_slash_command,
)


class FakeLLM:
    def __init__(self, reply="Pay the credit card first."):
        self.reply = reply
        self.calls = []

    def invoke(self, messages):
        self.calls.append(messages)
        return SimpleNamespace(content=self.reply)


class BrokenLLM:
    def invoke(self, messages):
        raise RuntimeError("rate limited")


def sample_request(message="How should I pay off my debt?"):
    return ChatRequest.model_validate({
        "financialData": {"monthlyIncome": "5000", "monthlyExpenses": "3500",
                          "savings": "10000", "debts": "5000", "goals": "Buy a house"},
        "message": message,
        "history": [
            {"role": "assistant", "content": "Hello! I'm your AI financial advisor."},
            {"role": "user", "content": "Hi"},
        ],
    })


def test_parse_slash_command():
    assert parse_slash_command("hello") == ("", {})
    assert parse_slash_command("/score") == ("score", {})
    cmd, kv = parse_slash_command('/ask question="snowball or avalanche" detail=true')
    assert cmd == "ask"
    assert kv == {"question": "snowball or avalanche", "detail": "true"}


def test_history_to_messages_maps_roles():
    msgs = history_to_messages([
        ChatTurn(role="user", content="a"),
        ChatTurn(role="assistant", content="b"),
        ChatTurn(role="system", content="ignored"),
    ])
    assert [type(m) for m in msgs] == [HumanMessage, AIMessage]


def test_context_includes_profile_and_score():
    snap = FinancialSnapshot(monthly_income=5000, monthly_expenses=3500, savings=10000, debts=5000, goals="Retire early")
    context = build_financial_context(snap)
    assert "Monthly Income: $5,000" in context
    assert "Goals: Retire early" in context
    assert "Financial Health Score: 75/100 (Good)" in context


def test_context_without_income_has_no_score():
    assert "Health Score" not in build_financial_context(FinancialSnapshot())


def test_answer_chat_sends_context_history_and_question():
    llm = FakeLLM()
    result = answer_chat(sample_request(), llm)
    assert result.success is True
    assert result.response == "Pay the credit card first."

    messages = llm.calls[0]
    assert isinstance(messages[0], SystemMessage)
    assert "Buy a house" in messages[1].content
    assert isinstance(messages[2], AIMessage)
    assert isinstance(messages[3], HumanMessage) and messages[3].content == "Hi"
    assert messages[-1].content == "How should I pay off my debt?"


def test_answer_chat_without_llm_reports_error():
    result = answer_chat(sample_request(), None)
    assert result.success is False
    assert "GROQ_API_KEY" in result.error


def test_answer_chat_llm_failure_is_reported():
    result = answer_chat(sample_request(), BrokenLLM())
    assert result.success is False
    assert "rate limited" in result.error


def test_score_command_answers_locally():
    result = answer_chat(sample_request("/score"), None)
    assert result.success is True
    assert "75/100 (Good)" in result.response
    assert "Build emergency fund" in result.response


def test_empty_message_rejected():
    result = answer_chat(sample_request("   "), FakeLLM())
    assert result.success is False


def test_score_detail_adds_breakdown():
    short = answer_chat(sample_request("/score"), None).response
    detailed = answer_chat(sample_request("/score detail=true"), None).response
    assert "Savings rate" not in short
    assert "- Savings rate: 30.0% (40/40)" in detailed
    assert "- Emergency fund: 2.9 months (10/30)" in detailed


def test_ask_command_forwards_only_the_question():
    llm = FakeLLM()
    result = answer_chat(sample_request('/ask question="snowball or avalanche"'), llm)
    assert result.success is True
    assert llm.calls[0][-1].content == "snowball or avalanche"


def test_ask_command_without_question():
    llm = FakeLLM()
    result = answer_chat(sample_request("/ask"), llm)
    assert result.success is False
    assert "/ask question=" in result.error
    assert llm.calls == []
