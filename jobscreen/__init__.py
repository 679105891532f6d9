"""
jobscreen — Rule-Based Fake Job Posting Classifier

Scores a job posting for likelihood of fraud using a fixed library of
weighted patterns plus a company-identity check. Deterministic, no model,
no I/O.

Public API:
  - predict:              Classify one posting -> AnalysisResult
  - analyze_text:         Raw textual signals (pre-fusion)
  - analyze_company_info: Company identity profile and 0-10 score
  - explain / recommend:  Narrative for a verdict
  - describe_rules:       Inspect the Pattern Library

Usage:
    from jobscreen import predict
    result = predict(posting_text)
    result.verdict, result.confidence, result.explanation
"""

__version__ = "1.0.0"

from jobscreen.patterns import (
    PatternRule,
    LIBRARY_VERSION,
    RED_FLAG_RULES,
    POSITIVE_RULES,
    GRAMMAR_RULES,
    get_rules,
    describe_rules,
)
from jobscreen.signals import EvidenceItem, SignalAnalysis, analyze_text
from jobscreen.company import (
    CompanyProfile,
    extract_company_name,
    analyze_company_info,
    detect_company_red_flags,
)
from jobscreen.narrative import Evidence, explain, recommend
from jobscreen.detector import (
    AnalysisResult,
    predict,
    REAL,
    UNCERTAIN,
    FAKE,
)

__all__ = [
    "PatternRule",
    "LIBRARY_VERSION",
    "RED_FLAG_RULES",
    "POSITIVE_RULES",
    "GRAMMAR_RULES",
    "get_rules",
    "describe_rules",
    "EvidenceItem",
    "SignalAnalysis",
    "analyze_text",
    "CompanyProfile",
    "extract_company_name",
    "analyze_company_info",
    "detect_company_red_flags",
    "Evidence",
    "explain",
    "recommend",
    "AnalysisResult",
    "predict",
    "REAL",
    "UNCERTAIN",
    "FAKE",
]
