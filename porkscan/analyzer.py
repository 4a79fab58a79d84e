"""
Analyzer — Pork Detection Orchestrator

Runs the full pipeline for one document:

    text ─┬─> extract_amounts ─────────────┐
          └─> scan_indicators ─> identify_items ─> scoring ─> AnalysisResult

The analyzer performs no I/O and raises nothing for "no pork found": any
string, including an empty one, yields a valid AnalysisResult. It holds no
per-call state, so one instance is safely shared across threads.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from porkscan.config import settings
from porkscan.extractor import extract_amounts
from porkscan.identifier import identify_items
from porkscan.library import DEFAULT_LIBRARY, PatternLibrary
from porkscan.models import AnalysisResult
from porkscan.scanner import scan_indicators
from porkscan.scorer import DEFAULT_WEIGHTS, ScoringWeights, calculate_confidence

logger = logging.getLogger(__name__)


def join_bill_text(
    title: Optional[str] = None,
    summary: Optional[str] = None,
    full_text: Optional[str] = None,
) -> str:
    """Concatenate a bill's text fields with single spaces."""
    return " ".join([title or "", summary or "", full_text or ""])


class PorkAnalyzer:
    """
    Pork-barrel detection engine.

    Instantiated once as a module-level singleton with the default library
    and weights. Build another instance to substitute either.
    """

    def __init__(
        self,
        library: PatternLibrary = DEFAULT_LIBRARY,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
        context_radius: int = settings.CONTEXT_RADIUS,
    ):
        self.library = library
        self.weights = weights
        self.context_radius = context_radius

    def analyze_text(self, text: str) -> AnalysisResult:
        """
        Analyze one document's text.

        Args:
            text: Plain text of the document (title, summary and body
                already joined).

        Returns:
            AnalysisResult with items, totals and confidence.
        """
        text = text or ""

        amounts = extract_amounts(text, self.context_radius)
        indicators = scan_indicators(text, self.library, self.context_radius)
        items = identify_items(text, self.library, self.weights, self.context_radius)

        total_value = sum(item.monetary_value for item in items)
        has_pork = (
            len(items) > 0
            or len(indicators) >= self.weights.has_pork_indicator_threshold
        )
        confidence, breakdown = calculate_confidence(items, indicators, self.weights)

        result = AnalysisResult(
            has_pork=has_pork,
            pork_items=items,
            total_pork_value=total_value,
            indicator_count=len(indicators),
            confidence_score=confidence,
            analyzed_at=datetime.now(timezone.utc),
            indicators=indicators,
            amounts=amounts,
            confidence_breakdown=breakdown,
        )

        logger.debug(
            "Analysis complete: %d item(s), %d indicator(s)",
            len(items), len(indicators),
            extra={
                "items_count": len(items),
                "indicator_count": len(indicators),
                "confidence": confidence,
                "total_value": total_value,
                "has_pork": has_pork,
            },
        )
        return result

    def analyze_bill(
        self,
        title: Optional[str] = None,
        summary: Optional[str] = None,
        full_text: Optional[str] = None,
    ) -> AnalysisResult:
        """Analyze a bill from its title, summary and full-text fields."""
        return self.analyze_text(join_bill_text(title, summary, full_text))

    def get_patterns(self) -> dict:
        """Return the active detection surface."""
        return self.library.describe()


# ============================================================
# SINGLETON
# ============================================================

pork_analyzer = PorkAnalyzer()
