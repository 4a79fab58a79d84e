"""
Monetary Extractor

Finds currency expressions ("$2.5 billion", "$1,250,000", "750 thousand
dollars"), normalizes magnitude words to absolute dollars and records each
occurrence with its surrounding context window.
"""

from __future__ import annotations

import logging
import re

from porkscan.context import DEFAULT_CONTEXT_RADIUS, context_window
from porkscan.models import MonetaryAmount

logger = logging.getLogger(__name__)


MAGNITUDES: dict[str, float] = {
    "thousand": 1_000,
    "million": 1_000_000,
    "mil": 1_000_000,
    "billion": 1_000_000_000,
    "bil": 1_000_000_000,
}

# The figure must end where its digit groups end: "1,0000" is not "1,000"
_NUMBER = r"(?P<number>(?:\d{1,3}(?:,\d{3})+|\d+)(?!,?\d)(?:\.\d+)?)"
_MAGNITUDE = r"(?:\s*(?P<magnitude>thousand|million|billion|mil|bil)\b)?"

# "$50 million", "$1,250,000.00", "$3.2 bil"
DOLLAR_SIGN_PATTERN = re.compile(r"\$\s?" + _NUMBER + _MAGNITUDE, re.IGNORECASE)

# "50 million dollars", "750 thousand dollars". The lookbehind keeps this
# from restarting inside a figure already led by "$".
DOLLARS_SUFFIX_PATTERN = re.compile(
    r"(?<![\w$.,])" + _NUMBER + _MAGNITUDE + r"\s+dollars\b",
    re.IGNORECASE,
)

CURRENCY_PATTERNS: tuple[re.Pattern, ...] = (
    DOLLAR_SIGN_PATTERN,
    DOLLARS_SUFFIX_PATTERN,
)


def _parse_value(number: str, magnitude: str | None) -> float | None:
    """Parse a matched numeral. None if it cannot be read as a number."""
    try:
        value = float(number.replace(",", ""))
    except ValueError:
        return None
    if magnitude:
        value *= MAGNITUDES[magnitude.lower()]
    return value


def extract_amounts(
    text: str,
    radius: int = DEFAULT_CONTEXT_RADIUS,
) -> list[MonetaryAmount]:
    """
    Extract every currency expression in the text, in document order.

    Each expression runs globally and independently; the same figure is not
    deduplicated if two expressions could both claim it.

    Args:
        text: The text to scan.
        radius: Context window radius around each match start.

    Returns:
        List of MonetaryAmount, sorted by offset.
    """
    found: list[MonetaryAmount] = []
    for pattern in CURRENCY_PATTERNS:
        for match in pattern.finditer(text):
            value = _parse_value(match.group("number"), match.group("magnitude"))
            if value is None:
                logger.debug("Unparseable amount skipped: %r", match.group(0))
                continue
            found.append(MonetaryAmount(
                raw_text=match.group(0),
                value=value,
                context=context_window(text, match.start(), radius),
                offset=match.start(),
            ))
    found.sort(key=lambda a: a.offset)
    return found


def format_amount(value: float) -> str:
    """
    Human-readable dollar figure.

    >= 1e9 -> "$X.XB", >= 1e6 -> "$X.XM", otherwise grouped digits.
    """
    if value >= 1_000_000_000:
        return f"${value / 1_000_000_000:.1f}B"
    if value >= 1_000_000:
        return f"${value / 1_000_000:.1f}M"
    if float(value).is_integer():
        return f"${value:,.0f}"
    return f"${value:,.2f}"
