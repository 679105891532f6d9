"""
Detector — Decision Engine

Orchestrates one classification:
  1. Signal Extractor scores the text against the Pattern Library
  2. Company Verifier scores the employer's identity (independently)
  3. Fusion: company identity nudges the signal score up or down
  4. Verdict from the adjusted score, confidence from the raw score
  5. Narrative Generator writes the explanation and recommendations

Confidence deliberately comes from the pre-fusion signal score while the
verdict comes from the adjusted score. A posting can therefore be a
high-confidence REAL or a low-confidence FAKE. Keep the asymmetry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from jobscreen.company import (
    WEAK_COMPANY_SCORE,
    STRONG_COMPANY_SCORE,
    GENERIC_NAME_FLAG,
    MISSING_NAME_FLAG,
    UNVERIFIED_STARTUP_FLAG,
    analyze_company_info,
)
from jobscreen.narrative import Evidence, explain, recommend
from jobscreen.patterns import LIBRARY_VERSION
from jobscreen.signals import EvidenceItem, analyze_text

logger = logging.getLogger(__name__)

REAL = "REAL"
UNCERTAIN = "UNCERTAIN"
FAKE = "FAKE"

VERDICTS = (REAL, UNCERTAIN, FAKE)

# Verdict cutoffs on the adjusted score (strictly greater than)
FAKE_THRESHOLD = 1.5
UNCERTAIN_THRESHOLD = 0.5

# Company identity fusion
WEAK_COMPANY_PENALTY = 0.5
STRONG_COMPANY_BONUS = 0.3


@dataclass
class AnalysisResult:
    """Output contract of predict()."""
    verdict: str
    confidence: float
    explanation: str
    recommendations: list[str]
    red_flags: list[EvidenceItem]
    metadata: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "verdict": self.verdict,
            "confidence": self.confidence,
            "explanation": self.explanation,
            "recommendations": list(self.recommendations),
            "red_flags": [f.to_dict() for f in self.red_flags],
            "metadata": {
                **self.metadata,
                "company_indicators": dict(self.metadata.get("company_indicators", {})),
            },
        }


def adjust_score(signal_score: float, company_score: float) -> float:
    """Fuse the signal score with the company identity score."""
    if company_score < WEAK_COMPANY_SCORE:
        return signal_score + WEAK_COMPANY_PENALTY
    if company_score > STRONG_COMPANY_SCORE:
        return signal_score - STRONG_COMPANY_BONUS
    return signal_score


def verdict_for_score(adjusted_score: float) -> str:
    if adjusted_score > FAKE_THRESHOLD:
        return FAKE
    if adjusted_score > UNCERTAIN_THRESHOLD:
        return UNCERTAIN
    return REAL


def company_evidence(description: str) -> EvidenceItem:
    """Company red flags are always MEDIUM and never move the score."""
    return EvidenceItem(
        label=_company_label(description),
        match_count=1,
        severity="MEDIUM",
        description=description,
        source="company",
    )


def predict(text: str) -> AnalysisResult:
    """
    Classify a job posting.

    Args:
        text: Plain posting text. Length limits are the caller's business;
            any string, including "", yields a well-formed result.

    Returns:
        AnalysisResult with verdict, confidence, narrative, and metadata.

    Raises:
        TypeError: text is not a str.
    """
    if not isinstance(text, str):
        raise TypeError(f"predict() expects str, got {type(text).__name__}")

    signals = analyze_text(text)
    company = analyze_company_info(text)

    adjusted = adjust_score(signals.score, company.score)
    verdict = verdict_for_score(adjusted)

    red_flags = list(signals.red_flags)
    red_flags.extend(company_evidence(flag) for flag in company.red_flags)

    evidence = Evidence(
        red_flags=red_flags,
        grammar_score=signals.grammar_score,
        company_score=company.score,
        company_name=company.name,
        company_info_present=signals.company_info_present,
        contact_info_present=signals.contact_info_present,
        salary_mentioned=signals.salary_mentioned,
    )

    result = AnalysisResult(
        verdict=verdict,
        confidence=signals.confidence,
        explanation=explain(evidence, verdict),
        recommendations=recommend(evidence),
        red_flags=red_flags,
        metadata={
            "word_count": signals.word_count,
            "salary_mentioned": signals.salary_mentioned,
            "company_info_present": signals.company_info_present,
            "contact_info_present": signals.contact_info_present,
            "grammar_score": signals.grammar_score,
            "red_flag_count": len(red_flags),
            "positive_flag_count": len(signals.positive_flags),
            "company_score": company.score,
            "company_name": company.name,
            "company_indicators": company.indicators,
            "signal_score": signals.score,
            "adjusted_score": adjusted,
            "library_version": LIBRARY_VERSION,
        },
    )

    logger.debug(
        f"Classified posting: {verdict}",
        extra={
            "verdict": verdict,
            "confidence": signals.confidence,
            "signal_score": round(signals.score, 3),
            "adjusted_score": round(adjusted, 3),
            "company_score": round(company.score, 3),
            "red_flag_count": len(red_flags),
            "word_count": signals.word_count,
        },
    )
    return result


_COMPANY_LABELS = {
    GENERIC_NAME_FLAG: "COMPANY_NAME_GENERIC",
    MISSING_NAME_FLAG: "COMPANY_NAME_MISSING",
    UNVERIFIED_STARTUP_FLAG: "COMPANY_STARTUP_UNVERIFIED",
}


def _company_label(description: str) -> str:
    return _COMPANY_LABELS.get(description, "COMPANY_RED_FLAG")
