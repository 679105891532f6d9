"""
API Schemas — Request and Response Models

Pydantic models for the jobscreen API.
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field

from jobscreen.config import settings


# ============================================================
# PREDICT
# ============================================================

class PredictRequest(BaseModel):
    """POST /predict request body."""
    text: str = Field(
        ...,
        min_length=settings.MIN_TEXT_LENGTH,
        max_length=settings.MAX_TEXT_LENGTH,
        description="Plain job posting text.",
    )

    model_config = {"json_schema_extra": {"examples": [
        {"text": "Acme Corporation Inc. is hiring a Software Engineer. "
                 "Visit www.acmecorp.com or email careers@acmecorp.com."},
    ]}}


class PredictBatchRequest(BaseModel):
    """POST /predict/batch request body."""
    items: list[PredictRequest] = Field(..., min_length=1, max_length=settings.MAX_BATCH_ITEMS)


class EvidenceResponse(BaseModel):
    label: str
    match_count: int
    severity: str
    description: str
    source: str = "pattern"


class CompanyIndicators(BaseModel):
    company_name_present: bool
    website_present: bool
    address_present: bool
    phone_present: bool
    email_present: bool
    linkedin_present: bool
    social_media_present: bool
    year_founded_present: bool
    employee_count_present: bool


class PredictMetadata(BaseModel):
    word_count: int
    salary_mentioned: bool
    company_info_present: bool
    contact_info_present: bool
    grammar_score: float
    red_flag_count: int
    positive_flag_count: int
    company_score: float
    company_name: Optional[str] = None
    company_indicators: CompanyIndicators
    signal_score: float
    adjusted_score: float
    library_version: str


class PredictResponse(BaseModel):
    """POST /predict response body."""
    verdict: str
    confidence: float
    explanation: str
    recommendations: list[str]
    red_flags: list[EvidenceResponse]
    metadata: PredictMetadata


class PredictBatchResponse(BaseModel):
    """POST /predict/batch response body."""
    results: list[PredictResponse]
    total: int


# ============================================================
# PATTERNS
# ============================================================

class PatternResponse(BaseModel):
    label: str
    family: str
    weight: float
    description: str
    pattern: str


class PatternListResponse(BaseModel):
    library_version: str
    total: int
    patterns: list[PatternResponse]


# ============================================================
# HEALTH
# ============================================================

class HealthResponse(BaseModel):
    status: str
    version: str
    library_version: str
