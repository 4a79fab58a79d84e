"""
PorkScan API — Main Application

POST /analyze        — Analyze one bill for pork-barrel spending
POST /analyze/batch  — Analyze many bills, with aggregate statistics
GET  /patterns       — List the detection surface
GET  /health         — Health check
"""

from __future__ import annotations

import asyncio
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.requests import Request

from porkscan import __version__
from porkscan.analyzer import pork_analyzer
from porkscan.config import settings
from porkscan.extractor import format_amount
from porkscan.logging import setup_logging, get_logger
from porkscan.models import AnalysisResult
from porkscan.stats import summarize
from porkscan.schemas.analysis import (
    AnalyzeRequest,
    AnalyzeBatchRequest,
    AnalysisResponse,
    AnalyzeBatchResponse,
    PatternsResponse,
    HealthResponse,
)

logger = get_logger("api")


# ============================================================
# STARTUP / SHUTDOWN
# ============================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("PorkScan API starting", extra={"version": __version__})
    yield
    logger.info("PorkScan API shutting down")


app = FastAPI(
    title="PorkScan API",
    description="Pork-barrel spending detection for legislative bill text",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.CORS_ORIGINS.split(",")],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    allow_credentials=False,
)


@app.get("/", include_in_schema=False)
async def root():
    return JSONResponse({"message": "PorkScan API", "docs": "/docs"})


# ============================================================
# GLOBAL ERROR HANDLER
# ============================================================

@app.exception_handler(Exception)
async def global_error_handler(request: Request, exc: Exception):
    """Log unhandled exceptions and return a generic 500 body."""
    logger.error(
        f"Unhandled exception: {type(exc).__name__}",
        extra={"error": str(exc), "path": request.url.path, "method": request.method},
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error. The analysis could not be completed."},
    )


def _to_response(result: AnalysisResult, bill_id: str | None = None) -> dict:
    payload = result.to_dict()
    payload["bill_id"] = bill_id
    payload["total_pork_value_display"] = format_amount(result.total_pork_value)
    return payload


def _analyze(item: AnalyzeRequest) -> AnalysisResult:
    return pork_analyzer.analyze_bill(item.title, item.summary, item.full_text)


# ============================================================
# ROUTES
# ============================================================

@app.post("/analyze", response_model=AnalysisResponse)
async def analyze(request: AnalyzeRequest):
    """Analyze one bill."""
    start = time.time()
    result = _analyze(request)
    duration = int((time.time() - start) * 1000)

    logger.info(
        f"Analysis complete: items={len(result.pork_items)} "
        f"confidence={result.confidence_score}",
        extra={
            "bill_id": request.bill_id,
            "items_count": len(result.pork_items),
            "indicator_count": result.indicator_count,
            "confidence": result.confidence_score,
            "total_value": result.total_pork_value,
            "duration_ms": duration,
        },
    )
    return _to_response(result, request.bill_id)


@app.post("/analyze/batch", response_model=AnalyzeBatchResponse)
async def analyze_batch(request: AnalyzeBatchRequest):
    """Analyze multiple bills concurrently."""
    results = await asyncio.gather(
        *[asyncio.to_thread(_analyze, item) for item in request.items],
        return_exceptions=True,
    )

    successful = [r for r in results if isinstance(r, AnalysisResult)]
    payloads = []
    for item, r in zip(request.items, results):
        if isinstance(r, AnalysisResult):
            payloads.append(_to_response(r, item.bill_id))
        else:
            logger.warning(
                "Batch item failed",
                extra={"bill_id": item.bill_id, "error": str(r), "error_type": type(r).__name__},
            )
            empty = AnalysisResult(
                has_pork=False,
                pork_items=[],
                total_pork_value=0.0,
                indicator_count=0,
                confidence_score=0,
            )
            payload = _to_response(empty, item.bill_id)
            payload["error"] = "Analysis failed for this item."
            payloads.append(payload)

    logger.info(f"Batch complete: {len(successful)}/{len(request.items)} analyzed")

    return {
        "results": payloads,
        "total": len(request.items),
        "analyzed": len(successful),
        "stats": summarize(successful),
    }


@app.get("/patterns", response_model=PatternsResponse)
async def get_patterns():
    """Return the keywords and patterns the analyzer matches against."""
    return {"version": __version__, **pork_analyzer.get_patterns()}


@app.get("/health", response_model=HealthResponse)
async def health():
    library = pork_analyzer.library
    return {
        "status": "operational",
        "version": __version__,
        "keywords": len(library.keywords),
        "suspicious_patterns": len(library.suspicious_patterns),
        "item_patterns": len(library.item_patterns),
        "context_radius": pork_analyzer.context_radius,
    }


# --- Security + Version Headers Middleware ---
@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-PorkScan-Version"] = __version__
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response


# --- Body Size Limit Middleware ---
_MAX_BODY_BYTES = 2_097_152  # 2 MB


@app.middleware("http")
async def enforce_body_size_limit(request: Request, call_next):
    """Reject bodies over 2 MB, by Content-Length header or by actual size."""
    content_length = request.headers.get("content-length", "")
    too_large = content_length.isdigit() and int(content_length) > _MAX_BODY_BYTES

    if not too_large and request.method == "POST":
        too_large = len(await request.body()) > _MAX_BODY_BYTES

    if too_large:
        return JSONResponse(status_code=413, content={"detail": "Request body too large."})
    return await call_next(request)


# --- Request Logging Middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    path = request.url.path
    if path == "/health":
        return await call_next(request)

    start = time.time()
    response = await call_next(request)
    duration_ms = round((time.time() - start) * 1000, 1)

    logger.info(
        f"{request.method} {path} → {response.status_code} ({duration_ms}ms)",
        extra={
            "method": request.method,
            "path": path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.main:app", host=settings.HOST, port=settings.PORT)
