"""
API Schemas — Request and Response Models

Pydantic models for the PorkScan API.
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field


# ============================================================
# ANALYZE
# ============================================================

class AnalyzeRequest(BaseModel):
    """POST /analyze request body."""
    bill_id: Optional[str] = Field(None, max_length=100,
                                   description="Caller's identifier, echoed back.")
    title: str = Field("", max_length=5_000)
    summary: str = Field("", max_length=200_000)
    full_text: str = Field("", max_length=1_500_000)

    model_config = {"json_schema_extra": {"examples": [
        {
            "bill_id": "118-hr-1234",
            "title": "Community Investment Act",
            "summary": "",
            "full_text": "This bill appropriates $50 million for the Hometown "
                         "Memorial Stadium renovation in the district of Springfield.",
        },
    ]}}


class AnalyzeBatchRequest(BaseModel):
    """POST /analyze/batch request body."""
    items: list[AnalyzeRequest] = Field(..., min_length=1, max_length=100)


class IndicatorResponse(BaseModel):
    kind: str
    label: str
    matched_text: str
    context: str


class AmountResponse(BaseModel):
    raw_text: str
    value: float
    context: str
    offset: int = 0


class PorkItemResponse(BaseModel):
    description: str
    amount: str
    monetary_value: float
    beneficiary: str
    justification: str
    suspicion_level: str
    suspicion_score: int = 0
    category: str


class AnalysisResponse(BaseModel):
    """POST /analyze response body."""
    bill_id: Optional[str] = None
    has_pork: bool
    pork_items: list[PorkItemResponse]
    total_pork_value: float
    total_pork_value_display: str
    indicator_count: int
    confidence_score: int = Field(..., ge=0, le=100)
    analyzed_at: str
    indicators: list[IndicatorResponse] = []
    amounts: list[AmountResponse] = []
    confidence_breakdown: Optional[dict] = None
    error: Optional[str] = None


class StatsResponse(BaseModel):
    total_bills: int
    bills_with_pork: int
    pork_percentage: float
    total_pork_value: float
    total_pork_value_display: str


class AnalyzeBatchResponse(BaseModel):
    """POST /analyze/batch response body."""
    results: list[AnalysisResponse]
    total: int
    analyzed: int
    stats: StatsResponse


# ============================================================
# PATTERNS
# ============================================================

class SuspiciousPatternInfo(BaseModel):
    id: str
    category: str
    description: str = ""


class ItemPatternInfo(BaseModel):
    id: str
    category: str


class PatternsResponse(BaseModel):
    """GET /patterns response body."""
    version: str
    keywords: list[str]
    suspicious_patterns: list[SuspiciousPatternInfo]
    item_patterns: list[ItemPatternInfo]
    location_indicators: list[str]
    benefit_keywords: list[str]


# ============================================================
# HEALTH
# ============================================================

class HealthResponse(BaseModel):
    status: str
    version: str
    keywords: int
    suspicious_patterns: int
    item_patterns: int
    context_radius: int
