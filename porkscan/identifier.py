"""
Pork Item Identifier

Turns dollar-anchored spending provisions into PorkItems.

Each category pattern in the library requires a leading dollar amount and
a qualifying noun in the same sentence. Every accepted match becomes its
own item; overlapping matches from different categories are not merged.

Beneficiary inference is an ordered chain of strategies. Each strategy
returns a name or None, and the first success wins:
  1. location indicator + capitalized place ("in the district of Springfield")
  2. sponsor phrase ("sponsored by Senator Smith")
  3. "in X" with a capitalized X
  4. "for X" with a capitalized X
The chain runs over the matched span first, then over its context window.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional

from porkscan.context import DEFAULT_CONTEXT_RADIUS, context_window
from porkscan.extractor import extract_amounts, format_amount
from porkscan.library import CAPITALIZED_PHRASE, DEFAULT_LIBRARY, PatternLibrary
from porkscan.models import PorkItem
from porkscan.scorer import (
    DEFAULT_WEIGHTS,
    ScoringWeights,
    calculate_suspicion,
    suspicion_level,
)

logger = logging.getLogger(__name__)

UNKNOWN_BENEFICIARY = "Specific locality/district"
NO_JUSTIFICATION = "No clear public benefit justification"


# ============================================================
# BENEFICIARY STRATEGIES
# ============================================================

@dataclass(frozen=True)
class BeneficiaryStrategy:
    """One step of the beneficiary chain."""
    name: str
    find: Callable[[str, PatternLibrary], Optional[str]]


def _regex_strategy(regex: re.Pattern) -> Callable[[str, PatternLibrary], Optional[str]]:
    def find(text: str, library: PatternLibrary) -> Optional[str]:
        match = regex.search(text)
        return match.group(1).strip() if match else None
    return find


def _location_strategy(text: str, library: PatternLibrary) -> Optional[str]:
    if library.location_regex is None:
        return None
    match = library.location_regex.search(text)
    return match.group(1).strip() if match else None


_SPONSOR_RE = re.compile(
    r"\b(?i:sponsored|requested|championed)\s+by\s+" + CAPITALIZED_PHRASE
)
_IN_PLACE_RE = re.compile(r"\bin\s+(?:the\s+)?" + CAPITALIZED_PHRASE)
_FOR_NAME_RE = re.compile(r"\bfor\s+(?:the\s+)?" + CAPITALIZED_PHRASE)

BENEFICIARY_STRATEGIES: tuple[BeneficiaryStrategy, ...] = (
    BeneficiaryStrategy("location_indicator", _location_strategy),
    BeneficiaryStrategy("sponsor", _regex_strategy(_SPONSOR_RE)),
    BeneficiaryStrategy("in_place", _regex_strategy(_IN_PLACE_RE)),
    BeneficiaryStrategy("for_name", _regex_strategy(_FOR_NAME_RE)),
)


def infer_beneficiary(
    *texts: str,
    library: PatternLibrary = DEFAULT_LIBRARY,
    strategies: tuple[BeneficiaryStrategy, ...] = BENEFICIARY_STRATEGIES,
) -> str:
    """
    Guess who benefits from a provision.

    Texts are tried in the order given (narrowest first); within each text
    the strategies run in priority order. Never returns None.
    """
    for text in texts:
        if not text:
            continue
        for strategy in strategies:
            name = strategy.find(text, library)
            if name:
                return name
    return UNKNOWN_BENEFICIARY


def infer_justification(span: str, library: PatternLibrary = DEFAULT_LIBRARY) -> str:
    """Report which public-benefit claims the provision makes, if any."""
    span_lower = span.lower()
    claimed = [kw for kw in library.benefit_keywords if kw in span_lower]
    if claimed:
        return f"Claimed: {', '.join(claimed)}"
    return NO_JUSTIFICATION


# ============================================================
# IDENTIFICATION
# ============================================================

def identify_items(
    text: str,
    library: PatternLibrary = DEFAULT_LIBRARY,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    radius: int = DEFAULT_CONTEXT_RADIUS,
) -> list[PorkItem]:
    """
    Synthesize candidate pork items from the category patterns.

    Args:
        text: Full document text (original case).
        library: Pattern library providing the category patterns.
        weights: Suspicion weights and thresholds.
        radius: Context window radius for beneficiary fallback.

    Returns:
        One PorkItem per accepted match, grouped by category in library order.
    """
    items: list[PorkItem] = []
    for pattern, regex in library.item_regexes:
        for match in regex.finditer(text):
            span = match.group(0).strip()
            span_amounts = extract_amounts(span, radius)
            if not span_amounts:
                continue  # A pork item must carry a dollar figure

            value = sum(a.value for a in span_amounts)
            score, _ = calculate_suspicion(span, value, weights)
            context = context_window(text, match.start(), radius)

            items.append(PorkItem(
                description=span,
                amount=format_amount(value),
                monetary_value=value,
                beneficiary=infer_beneficiary(span, context, library=library),
                justification=infer_justification(span, library),
                suspicion_level=suspicion_level(score, weights),
                category=pattern.category,
                suspicion_score=score,
            ))

    logger.debug("Identified %d pork item(s)", len(items))
    return items
