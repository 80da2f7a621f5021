import logging
import math
from decimal import Decimal, InvalidOperation
from typing import Any, List, Optional

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties going up (35.5 -> 36, 84.5 -> 85).

    Unlike round(), which rounds ties to even. Inputs are non-negative scores.
    """
    return int(math.floor(value + 0.5))


def clamp_score(value: float, low: int = 0, high: int = 100) -> int:
    """Round and clamp a score into [low, high]."""
    return max(low, min(high, round_half_up(value)))


def safe_number(value: Optional[Any], default: Optional[float] = None) -> Optional[float]:
    """
    Safely convert value to float.

    Accepts int, float, Decimal and numeric strings. Booleans, NaN and
    anything unparseable give the default.
    """
    if value is None or isinstance(value, bool):
        return default

    if isinstance(value, Decimal):
        value = float(value)

    try:
        number = float(value)
    except (ValueError, TypeError, InvalidOperation):
        return default

    if math.isnan(number) or math.isinf(number):
        return default
    return number


def safe_int(value: Optional[Any], default: Optional[int] = None) -> Optional[int]:
    """Safely convert value to int (truncating toward zero)."""
    number = safe_number(value)
    if number is None:
        return default
    return int(number)


def safe_str(value: Optional[Any]) -> Optional[str]:
    """Return a stripped string, or None for non-strings and blanks."""
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def safe_str_list(value: Optional[Any]) -> List[str]:
    """
    Coerce a skill-like list into a list of non-blank strings.

    A non-list (dict, string, number, None) yields an empty list; non-string
    or blank entries are dropped.
    """
    if not isinstance(value, (list, tuple)):
        if value is not None:
            logger.debug(f"Expected a list, got {type(value).__name__}; treating as empty")
        return []

    items = []
    for item in value:
        text = safe_str(item)
        if text is not None:
            items.append(text)
    return items


def format_number(value: float) -> str:
    """Render 3.0 as '3' and 3.5 as '3.5' for human-readable messages."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)
