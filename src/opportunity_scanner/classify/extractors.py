"""Field extractors: each is a pure function of message text.

Extractors that look at "text" expect the lowercased subject + snippet
(see matching.combined_text). Extractors that look at "snippet" take the
original snippet so captured values keep their case.
"""

import re
from datetime import date
from typing import Optional

from opportunity_scanner.matching import contains_any, first_match
from opportunity_scanner.models.opportunity import Category, Priority

from .keywords import (
    BULLET_PATTERN,
    CATEGORY_GROUPS,
    DEADLINE_PATTERN,
    DEFAULT_CATEGORY,
    HIGH_PRIORITY_TERMS,
    LOCATION_PATTERN,
    MAX_REQUIREMENTS,
    MEDIUM_PRIORITY_TERMS,
    MONTHS,
    SALARY_PATTERN,
    TAG_CHECKS,
    URL_PATTERN,
    WORK_MODE_CUES,
)


def categorize(text: str) -> Category:
    """First matching keyword group; 'job' when nothing matches."""
    return first_match(text, CATEGORY_GROUPS) or DEFAULT_CATEGORY


def extract_priority(text: str) -> Priority:
    if contains_any(text, HIGH_PRIORITY_TERMS):
        return "high"
    if contains_any(text, MEDIUM_PRIORITY_TERMS):
        return "medium"
    return "low"


def _expand_year(year: int, digits: int) -> int:
    if digits == 2:
        return 2000 + year
    if digits != 4:
        raise ValueError(f"Unsupported year width: {digits}")
    return year


def _month_number(name: str) -> int:
    name = name.lower().rstrip(".")
    if name in MONTHS:
        return MONTHS[name]
    for full, number in MONTHS.items():
        if len(name) == 3 and full.startswith(name):
            return number
    raise ValueError(f"Unknown month: {name}")


def parse_deadline_date(token: str) -> Optional[date]:
    """
    Parse a captured deadline token into a date.

    Accepted forms:
      2024-03-15          ISO
      03/15/2024, 3-15-24 month first; day first if month-first is invalid
      March 15, 2024      English month name, 3-letter abbreviation or "Sept"
    Returns None instead of raising for anything unparseable.
    """
    token = token.strip()
    try:
        m = re.fullmatch(r"(\d{4})-(\d{1,2})-(\d{1,2})", token)
        if m:
            return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))

        m = re.fullmatch(r"(\d{1,2})[/\-](\d{1,2})[/\-](\d{2,4})", token)
        if m:
            first, second = int(m.group(1)), int(m.group(2))
            year = _expand_year(int(m.group(3)), len(m.group(3)))
            try:
                return date(year, first, second)
            except ValueError:
                return date(year, second, first)

        m = re.fullmatch(r"([A-Za-z]+\.?) (\d{1,2}),? (\d{4})", token)
        if m:
            return date(int(m.group(3)), _month_number(m.group(1)), int(m.group(2)))
    except ValueError:
        return None
    return None


def extract_deadline(snippet: str) -> Optional[date]:
    """Date following the first deadline phrase, or None."""
    m = DEADLINE_PATTERN.search(snippet or "")
    if not m:
        return None
    return parse_deadline_date(m.group(1))


def extract_location(snippet: str) -> Optional[str]:
    """
    Location after a cue such as 'Location:' or 'based in'.
    'remote'/'hybrid' stand for themselves unless followed by ':' or ' - '
    and a place ('Hybrid: Toronto').
    """
    snippet = snippet or ""
    m = LOCATION_PATTERN.search(snippet)
    if m:
        cue, separator, rest = m.group(1).lower(), m.group(2), m.group(3)
        if cue in WORK_MODE_CUES and ":" not in separator and " -" not in separator:
            return WORK_MODE_CUES[cue]
        location = re.split(r"[,\n]", rest.strip(), maxsplit=1)[0].strip()
        if location:
            return location

    if "remote" in snippet.lower():
        return "Remote"
    return None


def extract_tags(text: str) -> list[str]:
    return [label for needle, label in TAG_CHECKS if needle in text]


def extract_salary(snippet: str) -> Optional[str]:
    m = SALARY_PATTERN.search(snippet or "")
    return m.group(0) if m else None


def extract_requirements(snippet: str) -> list[str]:
    """Bullet items in order of appearance, at most three."""
    items = [m.group(1).strip() for m in BULLET_PATTERN.finditer(snippet or "")]
    return [item for item in items if item][:MAX_REQUIREMENTS]


def extract_application_url(snippet: str) -> Optional[str]:
    m = URL_PATTERN.search(snippet or "")
    return m.group(0) if m else None
