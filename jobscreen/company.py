"""
Company Verifier

Looks for the employer's identity in a posting: who they are, and whether
the text gives a reader any way to check. Produces a 0-10 identity score
and a short list of identity red flags.

Name extraction is strict first-match-wins across four ordered strategies.
A later strategy is never consulted once an earlier one yields an
acceptable name, even if the later one would look "better".
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional

# Accepted name length is exclusive on both ends
MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 100

MAX_COMPANY_SCORE = 10.0

# Identity score bands: below WEAK is suspicious, above STRONG is well documented
WEAK_COMPANY_SCORE = 3
STRONG_COMPANY_SCORE = 6

NAME_POINTS = 2.0

GENERIC_NAME_FLAG = "Company name is generic or missing"
MISSING_NAME_FLAG = "No company name provided in job description"
UNVERIFIED_STARTUP_FLAG = "Claims to be startup but no founding information"


# ============================================================
# NAME EXTRACTION STRATEGIES (evaluated in order)
# ============================================================

# Captures are capped just past MAX_NAME_LENGTH so a long run of text costs
# a bounded amount of backtracking per candidate position.
_NAME_STRATEGIES: tuple[re.Pattern, ...] = (
    # Company: Acme Corp / Employer - "Acme"
    re.compile(
        r"\b(?:company|employer|organization|firm|corporation)(?:\s+name)?(?:\s*:|\s+-)\s*"
        r"[\"']?([^\"'\n,]{1,100})[\"']?",
        re.IGNORECASE,
    ),
    # We are (a) ...
    re.compile(r"\bwe(?:\s+are|'re)\s+(?:an?\s+)?([^,\n]{1,100})", re.IGNORECASE),
    # ... at Acme Labs is hiring
    re.compile(
        r"\b(?:at|for|with)\s+([A-Z][A-Za-z0-9\s&.,'-]{0,98}?)\s(?:is|are|looking|hiring|seeking)\b",
        re.IGNORECASE,
    ),
    # Acme Labs is hiring ... (start of a line)
    re.compile(
        r"^([A-Z][A-Za-z0-9\s&.,'-]{0,98}?)\s(?:is\s+hiring|is\s+looking|seeks)\b",
        re.MULTILINE,
    ),
)

_GENERIC_NAME = re.compile(
    r"^(?:company|business|organization|firm|corporation)$", re.IGNORECASE,
)


# ============================================================
# IDENTITY CHECKS: (indicator, points, pattern)
# ============================================================

_IDENTITY_CHECKS: tuple[tuple[str, float, re.Pattern], ...] = (
    ("website_present", 1.5, re.compile(
        r"website|www|https?://|\.com|\.org|\.net|\.io", re.IGNORECASE,
    )),
    ("address_present", 1.5, re.compile(
        r"(?:address|located|office|headquarters|street|suite|floor)\s*[\w\s,.-]{1,100}?"
        r"(?:street|avenue|blvd|lane|road|st|ave|rd)\b",
        re.IGNORECASE,
    )),
    ("phone_present", 1.0, re.compile(
        r"(?:\+?1[-.\s]?)?\(?[0-9]{3}\)?[-.\s]?[0-9]{3}[-.\s]?[0-9]{4}|\+\d{1,3}[-.\s]?\d{1,14}",
    )),
    ("email_present", 1.0, re.compile(r"@[\w.-]+\.\w+")),
    ("linkedin_present", 1.0, re.compile(r"linkedin", re.IGNORECASE)),
    ("social_media_present", 0.5, re.compile(
        r"\b(?:facebook|twitter|instagram|youtube|github)\.(?:com|io|org)\b|(?<![\w.])@\w{2,}",
        re.IGNORECASE,
    )),
    ("year_founded_present", 1.0, re.compile(
        r"\b(?:founded|established|since)\s+(?:in\s+)?(?:19|20)\d{2}\b|"
        r"\b\d+\+?\s+years?\s+(?:old|in\s+business)\b|\bin\s+business\b",
        re.IGNORECASE,
    )),
    ("employee_count_present", 1.0, re.compile(
        r"\b(?:employees?|team\s+members?|staff)\s+(?:of\s+)?\d[\d,]*\+?|"
        r"\b\d[\d,]*\+?\s+(?:employees|team\s+members|staff)\b|"
        r"\b(?:small|medium|large|enterprise)\s+(?:company|business|organization)\b",
        re.IGNORECASE,
    )),
)

MAX_POINTS = NAME_POINTS + sum(points for _, points, _ in _IDENTITY_CHECKS)

_STARTUP_CLAIM = re.compile(
    r"\b(?:startup|newly\s+formed|just\s+started|brand\s+new)\s+company\b", re.IGNORECASE,
)
_RECENT_FOUNDING = re.compile(
    r"\b(?:founded|established)\s+(?:in\s+)?20(?:19|2[0-9])\b", re.IGNORECASE,
)


@dataclass
class CompanyProfile:
    """Company identity extracted from one posting."""
    name: Optional[str]
    score: float
    indicators: dict[str, bool] = field(default_factory=dict)
    red_flags: list[str] = field(default_factory=list)


def extract_company_name(text: str) -> Optional[str]:
    """Return the first acceptable company name, or None."""
    for strategy in _NAME_STRATEGIES:
        match = strategy.search(text)
        if not match:
            continue
        candidate = match.group(1).strip()
        if MIN_NAME_LENGTH < len(candidate) < MAX_NAME_LENGTH:
            return candidate
    return None


def analyze_company_info(text: str) -> CompanyProfile:
    """
    Score how completely the posting identifies its employer.

    Scoring (points earned / points possible, scaled to 0-10):
      name 2.0, website 1.5, address 1.5, phone 1.0, email 1.0,
      LinkedIn 1.0, other social 0.5, founding year 1.0, size 1.0
    """
    name = extract_company_name(text)
    indicators = {"company_name_present": name is not None}
    earned = NAME_POINTS if name is not None else 0.0

    for key, points, pattern in _IDENTITY_CHECKS:
        present = bool(pattern.search(text))
        indicators[key] = present
        if present:
            earned += points

    score = MAX_COMPANY_SCORE * earned / MAX_POINTS if MAX_POINTS > 0 else 0.0

    return CompanyProfile(
        name=name,
        score=score,
        indicators=indicators,
        red_flags=_red_flags_for(text, name),
    )


def detect_company_red_flags(text: str) -> list[str]:
    """Identity red flags, in fixed order. Conditions are independent."""
    return _red_flags_for(text, extract_company_name(text))


def _red_flags_for(text: str, name: Optional[str]) -> list[str]:
    flags = []
    if name is not None and _GENERIC_NAME.match(name):
        flags.append(GENERIC_NAME_FLAG)
    if name is None:
        flags.append(MISSING_NAME_FLAG)
    if _STARTUP_CLAIM.search(text) and not _RECENT_FOUNDING.search(text):
        flags.append(UNVERIFIED_STARTUP_FLAG)
    return flags
