"""Derive a display company name from a From header."""

from typing import Optional

from .keywords import GENERIC_LOCAL_PARTS

UNKNOWN_COMPANY = "Unknown Company"


def _is_generic(word: str) -> bool:
    return word.lower() in GENERIC_LOCAL_PARTS


def _name_from_address(address: str) -> str:
    """Domain for generic mailboxes (noreply@acme.com), local-part otherwise."""
    local, _, domain = address.partition("@")
    local, domain = local.strip(), domain.strip()
    return domain if _is_generic(local) else local


def extract_company_name(sender: Optional[str]) -> str:
    """
    Company name from a sender header such as 'Acme Careers <jobs@acme.com>'.

    The display name before the first '<' wins. When that name is generic
    ('Hiring Team', 'noreply') the address domain is used instead.
    """
    if not sender or not sender.strip():
        return UNKNOWN_COMPANY

    display, bracket, rest = sender.partition("<")
    display = display.strip().strip("\"'").strip()
    address = rest.split(">", 1)[0].strip() if bracket else ""

    if "@" in display:
        return _name_from_address(display) or UNKNOWN_COMPANY

    if display:
        if _is_generic(display.split()[0]) and "@" in address:
            domain = address.partition("@")[2].strip()
            if domain:
                return domain
        if _is_generic(display):
            return UNKNOWN_COMPANY
        return display

    if "@" in address:
        return _name_from_address(address) or UNKNOWN_COMPANY
    return UNKNOWN_COMPANY
