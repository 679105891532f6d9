"""
Narrative Generator

Turns a verdict plus its evidence into reader-facing text. Sentence order
is fixed per verdict: the explanation string is part of the output
contract, so two runs over the same evidence must produce the same words.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from jobscreen.company import WEAK_COMPANY_SCORE, STRONG_COMPANY_SCORE
from jobscreen.signals import EvidenceItem

LOW_GRAMMAR_SCORE = 70

GENERAL_TIPS = (
    "Check the employer's online presence and reviews.",
    "Be cautious of job postings that seem too good to be true.",
    "Use video interviews when possible to verify the employer.",
)


@dataclass
class Evidence:
    """Everything the narrative needs to know about one classification."""
    red_flags: list[EvidenceItem] = field(default_factory=list)
    grammar_score: float = 100.0
    company_score: float = 0.0
    company_name: Optional[str] = None
    company_info_present: bool = False
    contact_info_present: bool = False
    salary_mentioned: bool = False

    def has_flag(self, label: str) -> bool:
        return any(f.label == label for f in self.red_flags)


def explain(evidence: Evidence, verdict: str) -> str:
    """Build the explanation paragraph for a verdict."""
    sentences = []

    if verdict == "FAKE":
        sentences.append(
            "This job posting shows several characteristics commonly "
            "associated with fake job listings."
        )
        if any(f.severity == "HIGH" for f in evidence.red_flags):
            sentences.append(
                "High severity red flags were detected including potential scam indicators."
            )
        if evidence.grammar_score < LOW_GRAMMAR_SCORE:
            sentences.append(
                "The posting contains grammatical issues often found in fraudulent listings."
            )
        if evidence.company_score < WEAK_COMPANY_SCORE:
            sentences.append(
                "Company information is insufficient or missing. "
                "Legitimate companies provide verifiable information."
            )
    elif verdict == "UNCERTAIN":
        sentences.append(
            "This job posting has some concerning elements but may be legitimate."
        )
        sentences.append("Proceed with caution and verify through official channels.")
    else:
        sentences.append("This job posting appears legitimate based on our analysis.")
        if evidence.company_info_present:
            sentences.append(
                "Company information is clearly provided, which is a good sign."
            )
        if evidence.company_score > STRONG_COMPANY_SCORE:
            sentences.append(
                f'Company "{evidence.company_name}" appears well-documented '
                f"with proper contact and web presence."
            )
        if evidence.contact_info_present:
            sentences.append("Professional contact information is included.")

    if evidence.red_flags:
        sentences.append(f"Found {len(evidence.red_flags)} potential red flag(s).")

    return " ".join(sentences)


def recommend(evidence: Evidence) -> list[str]:
    """Checklist of next steps for the reader. General tips always come last."""
    recommendations = []

    if not evidence.company_info_present:
        recommendations.append(
            "Verify the company through official websites and business registries."
        )
    if evidence.salary_mentioned and evidence.has_flag("UNREALISTIC_SALARY"):
        recommendations.append(
            "Research typical salary ranges for this position in your area."
        )
    if evidence.has_flag("REQUEST_MONEY"):
        recommendations.append(
            "Never send money to potential employers. "
            "Legitimate companies do not ask for payments."
        )
    if not evidence.contact_info_present:
        recommendations.append(
            "Look for professional contact information (company email, phone, address)."
        )

    recommendations.extend(GENERAL_TIPS)
    return recommendations
