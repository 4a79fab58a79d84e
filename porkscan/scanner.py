"""
Indicator Scanner

Collects raw evidence from a document: every keyword occurrence and every
suspicious-pattern match becomes one Indicator. The two sources are
independent; nothing here cross-checks or deduplicates them.
"""

from __future__ import annotations

from porkscan.context import DEFAULT_CONTEXT_RADIUS, context_window
from porkscan.library import DEFAULT_LIBRARY, PatternLibrary
from porkscan.models import Indicator, IndicatorKind


def scan_keywords(
    text: str,
    library: PatternLibrary = DEFAULT_LIBRARY,
    radius: int = DEFAULT_CONTEXT_RADIUS,
) -> list[Indicator]:
    """One KEYWORD indicator per whole-word occurrence of each keyword."""
    indicators: list[Indicator] = []
    text_lower = text.lower()
    for keyword, regex in library.keyword_regexes:
        # Cheap containment check before running the regex
        if keyword not in text_lower:
            continue
        for match in regex.finditer(text):
            indicators.append(Indicator(
                kind=IndicatorKind.KEYWORD,
                label=keyword,
                matched_text=match.group(0),
                context=context_window(text, match.start(), radius),
            ))
    return indicators


def scan_patterns(
    text: str,
    library: PatternLibrary = DEFAULT_LIBRARY,
) -> list[Indicator]:
    """One PATTERN indicator per global match of each suspicious pattern."""
    indicators: list[Indicator] = []
    for pattern, regex in library.suspicious_regexes:
        for match in regex.finditer(text):
            span = match.group(0)
            indicators.append(Indicator(
                kind=IndicatorKind.PATTERN,
                label=pattern.category,
                matched_text=span,
                context=span,
            ))
    return indicators


def scan_indicators(
    text: str,
    library: PatternLibrary = DEFAULT_LIBRARY,
    radius: int = DEFAULT_CONTEXT_RADIUS,
) -> list[Indicator]:
    """Keyword indicators followed by pattern indicators."""
    return scan_keywords(text, library, radius) + scan_patterns(text, library)
