"""
Signal Extractor

Runs every rule of the Pattern Library against the text and accumulates
the weighted signal score together with the evidence that produced it.
No rule short-circuits another: the evidence list is complete and its
order follows the rule tables, whatever the input.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict

from jobscreen.patterns import (
    RED_FLAG_RULES,
    POSITIVE_RULES,
    GRAMMAR_RULES,
    MARK_SALARY,
    MARK_CONTACT,
    MARK_COMPANY,
    PatternRule,
)

# Severity cutoffs on absolute rule weight
HIGH_SEVERITY_WEIGHT = 0.8
MEDIUM_SEVERITY_WEIGHT = 0.5

# confidence = |signal score| * CONFIDENCE_MULTIPLIER, clamped to [0, 100]
CONFIDENCE_MULTIPLIER = 20

# Each triggered grammar rule type costs this many grammar points
GRAMMAR_PENALTY = 10


@dataclass(frozen=True)
class EvidenceItem:
    """One piece of evidence behind a verdict."""
    label: str
    match_count: int
    severity: str          # "LOW", "MEDIUM", "HIGH"
    description: str
    source: str = "pattern"  # "pattern" or "company"

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class SignalAnalysis:
    """Raw textual signals, before company-identity fusion."""
    red_flags: list[EvidenceItem] = field(default_factory=list)
    positive_flags: list[EvidenceItem] = field(default_factory=list)
    grammar_issues: list[EvidenceItem] = field(default_factory=list)
    score: float = 0.0
    word_count: int = 0
    salary_mentioned: bool = False
    company_info_present: bool = False
    contact_info_present: bool = False
    confidence: float = 0.0
    grammar_score: float = 100.0


def severity_for_weight(weight: float) -> str:
    """Map a rule weight to LOW / MEDIUM / HIGH by magnitude."""
    magnitude = abs(weight)
    if magnitude >= HIGH_SEVERITY_WEIGHT:
        return "HIGH"
    if magnitude >= MEDIUM_SEVERITY_WEIGHT:
        return "MEDIUM"
    return "LOW"


def confidence_for_score(score: float) -> float:
    return min(100.0, max(0.0, abs(score) * CONFIDENCE_MULTIPLIER))


def analyze_text(text: str) -> SignalAnalysis:
    """
    Scan text against all three rule families.

    Args:
        text: The posting text. Any string is accepted, including "".

    Returns:
        SignalAnalysis with evidence lists, score, and derived booleans.
    """
    analysis = SignalAnalysis(word_count=len(text.split()))

    for rules, bucket in (
        (RED_FLAG_RULES, analysis.red_flags),
        (POSITIVE_RULES, analysis.positive_flags),
        (GRAMMAR_RULES, analysis.grammar_issues),
    ):
        for rule in rules:
            hits = rule.count(text)
            if not hits:
                continue
            bucket.append(_evidence(rule, hits))
            analysis.score += rule.weight * hits
            _apply_mark(analysis, rule)

    analysis.confidence = confidence_for_score(analysis.score)
    analysis.grammar_score = float(
        max(0, 100 - GRAMMAR_PENALTY * len(analysis.grammar_issues))
    )
    return analysis


def _evidence(rule: PatternRule, hits: int) -> EvidenceItem:
    return EvidenceItem(
        label=rule.label,
        match_count=hits,
        severity=severity_for_weight(rule.weight),
        description=rule.description,
    )


def _apply_mark(analysis: SignalAnalysis, rule: PatternRule) -> None:
    if rule.marks == MARK_SALARY:
        analysis.salary_mentioned = True
    elif rule.marks == MARK_CONTACT:
        analysis.contact_info_present = True
    elif rule.marks == MARK_COMPANY:
        analysis.company_info_present = True
