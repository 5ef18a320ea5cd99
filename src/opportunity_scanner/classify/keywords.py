"""Keyword tables and patterns used by the extractors."""

import re

from opportunity_scanner.models.opportunity import Category

# Tested in order; first match wins. Internship must precede job.
# "intern" needs both word boundaries ("international" is not one); "hack"
# only a trailing one, so "lifehack" counts as a hackathon.
CATEGORY_GROUPS: list[tuple[Category, re.Pattern[str]]] = [
    ("internship", re.compile(r"internship|\bintern\b")),
    ("job", re.compile(r"job|position|role|hiring|career")),
    ("hackathon", re.compile(r"hackathon|hack\b|coding competition")),
    ("scholarship", re.compile(r"scholarship|grant|funding|fellowship")),
    ("event", re.compile(r"event|conference|workshop|seminar|meetup")),
    ("competition", re.compile(r"competition|contest|challenge")),
]
DEFAULT_CATEGORY: Category = "job"

HIGH_PRIORITY_TERMS = ("urgent", "asap", "deadline", "expires", "limited time", "final reminder")
MEDIUM_PRIORITY_TERMS = ("important", "reminder", "action required")

# (needle, label) in output order
TAG_CHECKS: list[tuple[str, str]] = [
    ("remote", "Remote"),
    ("full-time", "Full-time"),
    ("part-time", "Part-time"),
    ("urgent", "Urgent"),
    ("paid", "Paid"),
    ("summer", "Summer"),
    ("winter", "Winter"),
]

GENERIC_LOCAL_PARTS = frozenset({"noreply", "no-reply", "hiring", "careers", "jobs"})

DEADLINE_PATTERN = re.compile(
    r"(?:deadline|due|expires?|apply by|submit by)[\s:]*"
    r"(\d{4}-\d{1,2}-\d{1,2}"
    r"|\d{1,2}[/\-]\d{1,2}[/\-]\d{2,4}"
    r"|[A-Za-z]+\.? \d{1,2},? \d{4})",
    re.IGNORECASE,
)

LOCATION_PATTERN = re.compile(
    r"(location|based in|office in|remote|hybrid)([\s:\-]*)([^.]*)",
    re.IGNORECASE,
)
WORK_MODE_CUES = {"remote": "Remote", "hybrid": "Hybrid"}

# A spaced dash only starts a range when the second amount carries '$' or
# 'k'; "$500 - 3 winners" is just "$500".
SALARY_PATTERN = re.compile(
    r"\$\d[\d,]*k?(?:[-–]\$?\d[\d,]*k?|\s*[-–]\s*(?:\$\d[\d,]*k?|\d[\d,]*k\b))?"
    r"|\b\d+k(?:\s*[-–]\s*\d+k)?\b",
    re.IGNORECASE,
)

BULLET_GLYPHS = "•·▪▫‣⁃"
BULLET_PATTERN = re.compile(rf"[{BULLET_GLYPHS}]\s*([^{BULLET_GLYPHS}\n]+)")
MAX_REQUIREMENTS = 3

URL_PATTERN = re.compile(r"https?://\S+", re.IGNORECASE)

MONTHS = {
    "january": 1,
    "february": 2,
    "march": 3,
    "april": 4,
    "may": 5,
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
    "sept": 9,
}
