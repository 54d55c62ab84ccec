# smartmoney/plan_utils.py
from typing import Any, Dict, List
import pandas as pd
from .schemas import PlanReport
from .utils import format_duration

PLAN_COLUMNS = ["scenario", "strategy", "extra_payment", "monthly_payment", "months",
                "duration", "total_paid", "total_interest"]


def plan_to_dataframe(plan: PlanReport) -> pd.DataFrame:
    """One row per (scenario, strategy) run in the plan."""
    rows = []
    for scenario in [*plan.scenarios, plan.recommended]:
        for report in (scenario.avalanche, scenario.snowball):
            rows.append({
                "scenario": scenario.name,
                "strategy": report.strategy,
                "extra_payment": report.extra_payment,
                "monthly_payment": report.monthly_payment,
                "months": report.months,
                "duration": format_duration(report.months),
                "total_paid": report.total_paid,
                "total_interest": report.total_interest,
            })
    return pd.DataFrame(rows, columns=PLAN_COLUMNS)


def comparison_records(plan: PlanReport) -> List[Dict[str, Any]]:
    df = plan_to_dataframe(plan)
    records = []
    for row in df.to_dict("records"):
        records.append({
            "scenario": str(row["scenario"]),
            "strategy": str(row["strategy"]),
            "extra_payment": float(row["extra_payment"]),
            "monthly_payment": float(row["monthly_payment"]),
            "months": int(row["months"]),
            "duration": str(row["duration"]),
            "total_paid": float(row["total_paid"]),
            "total_interest": float(row["total_interest"]),
        })
    return records
