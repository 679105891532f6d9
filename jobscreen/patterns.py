"""
Pattern Library — Immutable Rule Tables

The rule tables are the detection surface of the classifier. Three families:
  1. Red flags: language typical of fraudulent postings (positive weight)
  2. Positive indicators: signs of a real employer (negative weight)
  3. Grammar/style: shouting, command phrasing, punctuation runs

Rules are plain data. They are compiled once at import and never mutated,
so the tables can be shared by any number of concurrent callers.
Changing a weight or a regex means a new LIBRARY_VERSION.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

# --- Library Version (stamped on every result) ---
LIBRARY_VERSION = "1.0.0"

RED_FLAG = "red_flag"
POSITIVE = "positive"
GRAMMAR = "grammar"

FAMILIES = (RED_FLAG, POSITIVE, GRAMMAR)

# Metadata flags a rule can set when it fires
MARK_SALARY = "salary_mentioned"
MARK_CONTACT = "contact_info_present"
MARK_COMPANY = "company_info_present"


# ============================================================
# DATA STRUCTURES
# ============================================================

@dataclass(frozen=True)
class PatternRule:
    """
    A single weighted detection rule.

    Weight is signed: positive pushes toward FAKE, negative toward REAL.
    Each match adds `weight` once, so repeated phrases accumulate.
    """
    label: str
    matcher: re.Pattern
    weight: float
    description: str
    family: str
    marks: Optional[str] = None

    def count(self, text: str) -> int:
        """Number of non-overlapping matches in text."""
        return sum(1 for _ in self.matcher.finditer(text))


def _rule(
    label: str,
    regex: str,
    weight: float,
    description: str,
    family: str,
    marks: Optional[str] = None,
    flags: int = re.IGNORECASE,
) -> PatternRule:
    return PatternRule(
        label=label,
        matcher=re.compile(regex, flags),
        weight=weight,
        description=description,
        family=family,
        marks=marks,
    )


# ============================================================
# RED FLAGS
# ============================================================

RED_FLAG_RULES: tuple[PatternRule, ...] = (
    _rule(
        "UNREALISTIC_SALARY",
        r"\b\$?[0-9]{4,5}\s*k\s*/?\s*(?:month|year|yr|annually|annual|hour)\b|"
        r"\b(?:salary|pay).{0,50}\$?[0-9]{3,}\b",
        0.8,
        "Unusually high salary for the position",
        RED_FLAG,
        marks=MARK_SALARY,
    ),
    _rule(
        "URGENT_HIRING",
        r"\b(?:immediate\s+hiring|urgently\s+needed|hiring\s+now|apply\s+now|quick\s+hiring)\b",
        0.6,
        "Urgent hiring language often used in scams",
        RED_FLAG,
    ),
    _rule(
        "WFH_HIGH_PAY_SCAM",
        r"\b(?:work\s+from\s+home|remote\s+work|wfh).{0,30}\b(?:high\s+pay|earn\s+big|make\s+money)\b",
        0.9,
        "Work from home with high pay is a common scam pattern",
        RED_FLAG,
    ),
    _rule(
        "REQUEST_MONEY",
        r"\b(?:wire\s+money|send\s+money|advance\s+payment|registration\s+fee|processing\s+fee)\b",
        1.0,
        "Requests for money are strong indicators of fraud",
        RED_FLAG,
    ),
    _rule(
        "PERSONAL_EMAIL_DOMAIN",
        r"@(?:gmail|yahoo|hotmail|outlook)\.(?:com|net|org)",
        0.5,
        "Personal email domains instead of company email",
        RED_FLAG,
    ),
    _rule(
        "CONTACT_INFO_PRESENT",
        # 555-123-4567, 555.123.4567, 5551234567, (555) 123-4567
        r"\b[0-9]{3}[-.\s]?[0-9]{3}[-.\s]?[0-9]{4}\b|\([0-9]{3}\)\s*[0-9]{3}[-.\s]?[0-9]{4}\b",
        -0.2,
        "Legitimate contact information",
        RED_FLAG,
        marks=MARK_CONTACT,
    ),
)


# ============================================================
# POSITIVE INDICATORS
# ============================================================

POSITIVE_RULES: tuple[PatternRule, ...] = (
    _rule(
        "COMPANY_ENTITY",
        r"\b(?:company|corporation|inc|llc|limited|gmbh)\b",
        -0.3,
        "Formal company structure mentioned",
        POSITIVE,
        marks=MARK_COMPANY,
    ),
    _rule(
        "PROFESSIONAL_EMAIL",
        r"\b(?:hr|careers|jobs|recruitment)@[a-z0-9.-]+\.[a-z]{2,}",
        -0.4,
        "Professional email address",
        POSITIVE,
    ),
    _rule(
        "COMPANY_WEBSITE",
        r"\b(?:www\.|https?://)[a-z0-9.-]+\.[a-z]{2,}",
        -0.3,
        "Company website provided",
        POSITIVE,
    ),
    _rule(
        "STANDARD_BENEFITS",
        r"\b(?:401k|health\s+insurance|dental|vision|pto|vacation|benefits)\b",
        -0.5,
        "Legitimate benefits mentioned",
        POSITIVE,
    ),
)


# ============================================================
# GRAMMAR / STYLE
# ============================================================

GRAMMAR_RULES: tuple[PatternRule, ...] = (
    _rule(
        "COMMAND_LANGUAGE",
        r"\byou\s+(?:will|must|need|should)\b",
        0.3,
        "Poor grammar or command-like language",
        GRAMMAR,
    ),
    # Case-sensitive: a run of capitals is the signal
    _rule(
        "EXCESSIVE_CAPS",
        r"[A-Z]{4,}",
        0.4,
        "Excessive capitalization (common in scams)",
        GRAMMAR,
        flags=0,
    ),
    _rule(
        "EXCESSIVE_PUNCTUATION",
        r"!!!|\?\?\?|\.{4,}",
        0.3,
        "Excessive punctuation",
        GRAMMAR,
        flags=0,
    ),
)


_BY_FAMILY: dict[str, tuple[PatternRule, ...]] = {
    RED_FLAG: RED_FLAG_RULES,
    POSITIVE: POSITIVE_RULES,
    GRAMMAR: GRAMMAR_RULES,
}


def get_rules(family: Optional[str] = None) -> tuple[PatternRule, ...]:
    """Return the rules of one family, or every rule in evaluation order."""
    if family is None:
        return RED_FLAG_RULES + POSITIVE_RULES + GRAMMAR_RULES
    try:
        return _BY_FAMILY[family]
    except KeyError:
        raise ValueError(
            f"Unknown rule family: {family!r} (expected one of {', '.join(FAMILIES)})"
        ) from None


def describe_rules(family: Optional[str] = None) -> list[dict]:
    """
    Return the active rules as JSON-ready dicts.

    Used by GET /patterns and `jobscreen patterns` to expose the detection surface.
    """
    return [
        {
            "label": r.label,
            "family": r.family,
            "weight": r.weight,
            "description": r.description,
            "pattern": r.matcher.pattern,
        }
        for r in get_rules(family)
    ]
