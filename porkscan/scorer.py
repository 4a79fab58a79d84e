"""
Scoring Model

Two independent scalar scores:
  - Suspicion (per item): additive points mapped to LOW / MEDIUM / HIGH.
  - Confidence (per document): 0-100 estimate that the document holds pork.

Both are deliberately simple additive heuristics, not calibrated
probabilities. Every weight and threshold lives in ScoringWeights so a
caller can swap them without touching the logic.

Suspicion:
  Start at 0.
  Term bonuses:  memorial +3, hometown +3, festival/stadium/various/targeted +2
  Value bonuses: > $50M +2, > $100M +1 more (cumulative, strict >)
  Long description (> 100 chars): +1
  score >= 5 -> high, >= 3 -> medium, else low.

Confidence:
  70 if any pork items, plus min(indicators * 5, 30), clamped to [0, 100].
"""

from __future__ import annotations

from dataclasses import dataclass

from porkscan.models import Indicator, PorkItem, SuspicionLevel


@dataclass(frozen=True)
class ScoringWeights:
    """Tunable weights and thresholds for both scores."""

    # --- Suspicion ---
    term_bonuses: tuple[tuple[str, int], ...] = (
        ("memorial", 3),
        ("hometown", 3),
        ("festival", 2),
        ("stadium", 2),
        ("various", 2),
        ("targeted", 2),
    )
    high_value_threshold: float = 50_000_000
    high_value_bonus: int = 2
    very_high_value_threshold: float = 100_000_000
    very_high_value_bonus: int = 1
    long_description_chars: int = 100
    long_description_bonus: int = 1
    high_level_threshold: int = 5
    medium_level_threshold: int = 3

    # --- Confidence ---
    item_base_confidence: int = 70
    confidence_per_indicator: int = 5
    indicator_confidence_cap: int = 30

    # --- Document verdict ---
    has_pork_indicator_threshold: int = 3


DEFAULT_WEIGHTS = ScoringWeights()


def calculate_suspicion(
    description: str,
    monetary_value: float,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> tuple[int, dict]:
    """
    Score one item.

    Returns:
        (score, breakdown) where breakdown lists every bonus applied.
    """
    score = 0
    breakdown: dict = {"term_bonuses": [], "value_bonus": 0, "length_bonus": 0}
    description_lower = description.lower()

    for term, points in weights.term_bonuses:
        if term in description_lower:
            score += points
            breakdown["term_bonuses"].append({"term": term, "points": points})

    value_bonus = 0
    if monetary_value > weights.high_value_threshold:
        value_bonus += weights.high_value_bonus
    if monetary_value > weights.very_high_value_threshold:
        value_bonus += weights.very_high_value_bonus
    score += value_bonus
    breakdown["value_bonus"] = value_bonus

    if len(description) > weights.long_description_chars:
        score += weights.long_description_bonus
        breakdown["length_bonus"] = weights.long_description_bonus

    breakdown["score"] = score
    return score, breakdown


def suspicion_level(score: int, weights: ScoringWeights = DEFAULT_WEIGHTS) -> SuspicionLevel:
    """Map a raw suspicion score onto its level."""
    if score >= weights.high_level_threshold:
        return SuspicionLevel.HIGH
    if score >= weights.medium_level_threshold:
        return SuspicionLevel.MEDIUM
    return SuspicionLevel.LOW


def calculate_confidence(
    items: list[PorkItem],
    indicators: list[Indicator],
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> tuple[int, dict]:
    """
    Document-level confidence that the text contains pork.

    Returns:
        (score, breakdown) with the item base and the indicator component.
    """
    item_base = weights.item_base_confidence if items else 0
    indicator_points = min(
        len(indicators) * weights.confidence_per_indicator,
        weights.indicator_confidence_cap,
    )
    final = max(0, min(100, item_base + indicator_points))
    return final, {
        "item_base": item_base,
        "indicator_points": indicator_points,
        "final_score": final,
    }
