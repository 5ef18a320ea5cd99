"""Shared keyword matching utilities for classification and filtering."""

import re
from typing import Iterable, Optional, Sequence, TypeVar

T = TypeVar("T")


def combined_text(subject: Optional[str], snippet: Optional[str]) -> str:
    """Subject and snippet joined by a space, lowercased for matching."""
    return f"{subject or ''} {snippet or ''}".lower()


def contains_any(text: str, phrases: Iterable[str]) -> bool:
    """Plain substring test; `text` is expected to be lowercased already."""
    return any(p in text for p in phrases)


def first_match(text: str, groups: Sequence[tuple[T, re.Pattern[str]]]) -> Optional[T]:
    """
    Label of the first group whose pattern matches, in list order.
    Later groups are never consulted once one matches.
    """
    for label, pattern in groups:
        if pattern.search(text):
            return label
    return None

