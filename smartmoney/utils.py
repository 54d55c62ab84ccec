# smartmoney/utils.py
import math
from typing import Any, Optional


def to_number(value: Any) -> Optional[float]:
    """Parse form input into a float; blank or unparseable input is None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        x = float(value)
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            x = float(text)
        except ValueError:
            return None
    if math.isnan(x) or math.isinf(x):
        return None
    return x


def round_half_up(x: float) -> int:
    # matches the UI's Math.round (ties go up, not to even)
    return int(math.floor(x + 0.5))


def money(x: float) -> str:
    try:
        return f"${x:,.0f}"
    except Exception:
        return f"${x}"


def format_duration(months: int) -> str:
    years, rem = divmod(int(months), 12)
    parts = []
    if years > 0:
        parts.append(f"{years} year{'s' if years > 1 else ''}")
    if rem > 0:
        parts.append(f"{rem} month{'s' if rem > 1 else ''}")
    if not parts:
        return "0 months"
    return ", ".join(parts)
