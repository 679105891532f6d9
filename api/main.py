"""
jobscreen API — Main Application

POST /predict        — Classify a job posting
POST /predict/batch  — Classify several postings
GET  /patterns       — List the detection rules (by family)
GET  /health         — Health check
"""

from __future__ import annotations

import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.requests import Request

from jobscreen.config import settings
from jobscreen.detector import predict
from jobscreen.logging import setup_logging, get_logger
from jobscreen.patterns import LIBRARY_VERSION, describe_rules
from jobscreen.schemas.predict import (
    PredictRequest,
    PredictBatchRequest,
    PredictResponse,
    PredictBatchResponse,
    PatternListResponse,
    HealthResponse,
)

logger = get_logger("api")


# ============================================================
# STARTUP / SHUTDOWN
# ============================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("jobscreen API starting")
    yield
    logger.info("jobscreen API shutting down")


app = FastAPI(
    title="jobscreen API",
    description="Rule-based fake job posting classifier",
    version=f"{settings.APP_VERSION} (library {LIBRARY_VERSION})",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.CORS_ORIGINS.split(",")],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    allow_credentials=False,
)


# ============================================================
# GLOBAL ERROR HANDLER
# ============================================================

@app.exception_handler(Exception)
async def global_error_handler(request: Request, exc: Exception):
    """Catch unhandled exceptions — return structured error, don't leak internals."""
    logger.error(
        f"Unhandled exception: {type(exc).__name__}",
        extra={"error": str(exc), "path": request.url.path, "method": request.method},
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error. The posting could not be analyzed.",
        },
    )


# ============================================================
# ROUTES
# ============================================================

@app.post("/predict", response_model=PredictResponse)
def predict_posting(request: PredictRequest):
    """Classify one job posting. Sync handler: runs in the worker threadpool."""
    start = time.time()
    result = predict(request.text)

    duration = int((time.time() - start) * 1000)
    logger.info(
        f"Prediction complete: {result.verdict}",
        extra={
            "verdict": result.verdict,
            "confidence": result.confidence,
            "red_flag_count": len(result.red_flags),
            "duration_ms": duration,
        },
    )
    return result.to_dict()


@app.post("/predict/batch", response_model=PredictBatchResponse)
def predict_batch(request: PredictBatchRequest):
    """Classify several postings. Items are independent and run in order."""
    results = [predict(item.text).to_dict() for item in request.items]

    logger.info(
        f"Batch complete: {len(results)} classified",
        extra={"items": len(results)},
    )
    return {"results": results, "total": len(results)}


@app.get("/patterns", response_model=PatternListResponse)
async def get_patterns(
    family: Optional[str] = Query(None, pattern="^(red_flag|positive|grammar)$"),
):
    """Expose the detection surface."""
    patterns = describe_rules(family)
    return {
        "library_version": LIBRARY_VERSION,
        "total": len(patterns),
        "patterns": patterns,
    }


@app.get("/health", response_model=HealthResponse)
async def health():
    return {
        "status": "operational",
        "version": settings.APP_VERSION,
        "library_version": LIBRARY_VERSION,
    }
