"""Shared utilities: the "N/A" sentinel and value formatting."""
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

NOT_AVAILABLE = "N/A"
DECIMALS = 2


def or_na(value: Any) -> Any:
    """Return value, or the "N/A" sentinel when it is None or empty."""
    if value is None or value == "" or value == [] or value == {}:
        return NOT_AVAILABLE
    return value


def format_rate(x: float) -> str:
    """Format a rate as a fixed two-decimal string, rounding ties up."""
    quantum = Decimal(1).scaleb(-DECIMALS)
    return str(Decimal(float(x)).quantize(quantum, rounding=ROUND_HALF_UP))


def parse_iso_datetime(raw: str | None) -> datetime | None:
    """Parse an ISO-8601 timestamp (with optional trailing Z); None if invalid."""
    if not raw:
        return None
    try:
        return datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        return None


def format_long_date(raw: str | None) -> str:
    """Format an ISO timestamp as a long US date, e.g. "March 5, 1990"."""
    parsed = parse_iso_datetime(raw)
    if parsed is None:
        return NOT_AVAILABLE
    return f"{parsed.strftime('%B')} {parsed.day}, {parsed.year}"
