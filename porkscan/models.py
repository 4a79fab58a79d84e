"""
Analysis Records

Immutable value types passed between the pipeline stages. Every record is
owned by the single analysis call that produced it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class IndicatorKind(str, Enum):
    KEYWORD = "keyword"
    PATTERN = "pattern"


class SuspicionLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class MonetaryAmount:
    """A currency expression found in the text, normalized to dollars."""
    raw_text: str      # Verbatim match, e.g. "$2.5 billion"
    value: float       # Absolute dollars, magnitude applied
    context: str       # Window of surrounding prose
    offset: int = 0    # Match start in the scanned text

    def to_dict(self) -> dict:
        return {
            "raw_text": self.raw_text,
            "value": self.value,
            "context": self.context,
            "offset": self.offset,
        }


@dataclass(frozen=True)
class Indicator:
    """A single piece of textual evidence (keyword or pattern hit)."""
    kind: IndicatorKind
    label: str          # Keyword phrase or pattern category
    matched_text: str
    context: str

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "label": self.label,
            "matched_text": self.matched_text,
            "context": self.context,
        }


@dataclass(frozen=True)
class PorkItem:
    """A monetarily quantified spending provision flagged as likely pork."""
    description: str
    amount: str                 # Display form, e.g. "$50.0M"
    monetary_value: float
    beneficiary: str
    justification: str
    suspicion_level: SuspicionLevel
    category: str
    suspicion_score: int = 0

    def to_dict(self) -> dict:
        return {
            "description": self.description,
            "amount": self.amount,
            "monetary_value": self.monetary_value,
            "beneficiary": self.beneficiary,
            "justification": self.justification,
            "suspicion_level": self.suspicion_level.value,
            "suspicion_score": self.suspicion_score,
            "category": self.category,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Aggregate verdict for one document."""
    has_pork: bool
    pork_items: list[PorkItem]
    total_pork_value: float
    indicator_count: int
    confidence_score: int
    analyzed_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    # Diagnostics
    indicators: list[Indicator] = field(default_factory=list)
    amounts: list[MonetaryAmount] = field(default_factory=list)
    confidence_breakdown: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "has_pork": self.has_pork,
            "pork_items": [item.to_dict() for item in self.pork_items],
            "total_pork_value": self.total_pork_value,
            "indicator_count": self.indicator_count,
            "confidence_score": self.confidence_score,
            "analyzed_at": self.analyzed_at.isoformat(),
            "indicators": [i.to_dict() for i in self.indicators],
            "amounts": [a.to_dict() for a in self.amounts],
            "confidence_breakdown": dict(self.confidence_breakdown),
        }
