"""
Scoring Model Tests — Suspicion points, level thresholds, confidence.

Boundaries matter here: the value bonuses use strict "greater than", and
the confidence indicator component saturates at its cap.
"""

from __future__ import annotations

import pytest

from porkscan.models import Indicator, IndicatorKind, PorkItem, SuspicionLevel
from porkscan.scorer import (
    DEFAULT_WEIGHTS,
    ScoringWeights,
    calculate_confidence,
    calculate_suspicion,
    suspicion_level,
)


def _indicators(n: int) -> list[Indicator]:
    return [
        Indicator(kind=IndicatorKind.KEYWORD, label="earmark",
                  matched_text="earmark", context="earmark")
        for _ in range(n)
    ]


def _item(value: float = 1_000_000) -> PorkItem:
    return PorkItem(
        description="$1 million for the museum",
        amount="$1.0M",
        monetary_value=value,
        beneficiary="Springfield",
        justification="No clear public benefit justification",
        suspicion_level=SuspicionLevel.LOW,
        category="Museum/Cultural Center",
    )


class TestSuspicionTerms:

    def test_scenario_terms(self):
        score, breakdown = calculate_suspicion(
            "$50 million for the Hometown Memorial Stadium", 50_000_000,
        )
        assert score == 8
        assert {b["term"] for b in breakdown["term_bonuses"]} == {
            "memorial", "hometown", "stadium",
        }
        assert breakdown["value_bonus"] == 0

    def test_case_insensitive(self):
        assert calculate_suspicion("VARIOUS TARGETED grants", 0)[0] == 4

    def test_festival(self):
        assert calculate_suspicion("a harvest festival", 0)[0] == 2

    def test_each_term_counted_once(self):
        assert calculate_suspicion("memorial memorial memorial", 0)[0] == 3

    def test_no_terms(self):
        assert calculate_suspicion("plain", 1_000)[0] == 0


class TestSuspicionValue:

    @pytest.mark.parametrize("value, expected", [
        (50_000_000, 0),
        (50_000_001, 2),
        (100_000_000, 2),
        (100_000_001, 3),
        (2_500_000_000, 3),
    ])
    def test_strict_thresholds(self, value, expected):
        assert calculate_suspicion("plain", value)[0] == expected


class TestSuspicionLength:

    def test_over_hundred_chars(self):
        assert calculate_suspicion("a" * 101, 0)[0] == 1

    def test_exactly_hundred_chars(self):
        assert calculate_suspicion("a" * 100, 0)[0] == 0


class TestSuspicionLevel:

    @pytest.mark.parametrize("score, level", [
        (0, SuspicionLevel.LOW),
        (2, SuspicionLevel.LOW),
        (3, SuspicionLevel.MEDIUM),
        (4, SuspicionLevel.MEDIUM),
        (5, SuspicionLevel.HIGH),
        (12, SuspicionLevel.HIGH),
    ])
    def test_thresholds(self, score, level):
        assert suspicion_level(score) is level

    def test_custom_thresholds(self):
        weights = ScoringWeights(high_level_threshold=10)
        assert suspicion_level(8, weights) is SuspicionLevel.MEDIUM

    def test_level_values_are_lowercase(self):
        assert [lvl.value for lvl in SuspicionLevel] == ["low", "medium", "high"]


class TestConfidence:

    def test_nothing(self):
        score, breakdown = calculate_confidence([], [])
        assert score == 0
        assert breakdown == {"item_base": 0, "indicator_points": 0, "final_score": 0}

    def test_indicators_only(self):
        assert calculate_confidence([], _indicators(3))[0] == 15

    def test_indicator_cap(self):
        assert calculate_confidence([], _indicators(500))[0] == 30

    def test_items_only(self):
        assert calculate_confidence([_item()], [])[0] == 70

    def test_items_and_many_indicators(self):
        score, breakdown = calculate_confidence([_item()], _indicators(100))
        assert score == 100
        assert breakdown["item_base"] == 70
        assert breakdown["indicator_points"] == 30

    def test_clamped_with_custom_weights(self):
        weights = ScoringWeights(item_base_confidence=90, indicator_confidence_cap=50)
        assert calculate_confidence([_item()], _indicators(10), weights)[0] == 100

    def test_default_weights_shared(self):
        assert calculate_confidence([], _indicators(1), DEFAULT_WEIGHTS)[0] == 5
