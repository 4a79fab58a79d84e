"""
PorkScan — Pork-Barrel Spending Detector for Legislative Text

Scans bill text for monetary amounts, beneficiary cues and suspicious
phrasing, and returns a scored list of candidate pork items per document.

Public API:
  - pork_analyzer:    Shared analyzer built from the default library
  - PorkAnalyzer:     Analyzer with an injectable library / weights
  - PatternLibrary:   Immutable keyword and pattern registries
  - ScoringWeights:   Suspicion and confidence weights
  - extract_amounts:  Currency expressions -> absolute dollar values
  - scan_indicators:  Keyword and pattern evidence
  - identify_items:   Dollar-anchored provisions -> PorkItems
  - summarize:        Collection-level statistics

Usage:
    from porkscan import pork_analyzer
    result = pork_analyzer.analyze_bill(title, summary, full_text)
"""

__version__ = "1.0.0"

from porkscan.analyzer import PorkAnalyzer, pork_analyzer, join_bill_text
from porkscan.context import context_window
from porkscan.extractor import extract_amounts, format_amount
from porkscan.identifier import identify_items
from porkscan.library import (
    DEFAULT_LIBRARY,
    PatternLibrary,
    PatternLibraryError,
    SpendingPattern,
)
from porkscan.models import (
    AnalysisResult,
    Indicator,
    IndicatorKind,
    MonetaryAmount,
    PorkItem,
    SuspicionLevel,
)
from porkscan.scanner import scan_indicators
from porkscan.scorer import (
    DEFAULT_WEIGHTS,
    ScoringWeights,
    calculate_confidence,
    calculate_suspicion,
    suspicion_level,
)
from porkscan.stats import summarize

__all__ = [
    "PorkAnalyzer",
    "pork_analyzer",
    "join_bill_text",
    "context_window",
    "extract_amounts",
    "format_amount",
    "identify_items",
    "DEFAULT_LIBRARY",
    "PatternLibrary",
    "PatternLibraryError",
    "SpendingPattern",
    "AnalysisResult",
    "Indicator",
    "IndicatorKind",
    "MonetaryAmount",
    "PorkItem",
    "SuspicionLevel",
    "scan_indicators",
    "DEFAULT_WEIGHTS",
    "ScoringWeights",
    "calculate_confidence",
    "calculate_suspicion",
    "suspicion_level",
    "summarize",
]
