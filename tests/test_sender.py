"""Unit tests for sender -> company name normalization."""

import pytest

from opportunity_scanner.classify.sender import UNKNOWN_COMPANY, extract_company_name


class TestExtractCompanyName:
    """Tests for extract_company_name."""

    def test_display_name_wins(self) -> None:
        assert extract_company_name("Google <jobs@google.com>") == "Google"

    def test_bare_generic_address_keeps_domain(self) -> None:
        """noreply@ prefix is stripped, leaving the domain."""
        assert extract_company_name("noreply@acme.com") == "acme.com"

    @pytest.mark.parametrize("local", ["no-reply", "hiring", "careers", "jobs", "NoReply"])
    def test_other_generic_local_parts(self, local: str) -> None:
        assert extract_company_name(f"{local}@acme.com") == "acme.com"

    def test_bare_personal_address_keeps_local_part(self) -> None:
        assert extract_company_name("jane.doe@acme.com") == "jane.doe"

    def test_generic_display_name_uses_domain(self) -> None:
        assert extract_company_name("Hiring Team <hiring@stripe.com>") == "stripe.com"

    def test_quoted_display_name(self) -> None:
        assert extract_company_name('"Acme Corp" <hr@acme.com>') == "Acme Corp"

    def test_multi_part_name_not_split(self) -> None:
        assert extract_company_name("Jane at Acme, Inc. <jane@acme.com>") == "Jane at Acme, Inc."

    def test_address_only_in_brackets(self) -> None:
        assert extract_company_name("<careers@acme.com>") == "acme.com"

    @pytest.mark.parametrize(
        "sender", [None, "", "   ", "<>", "noreply@", "jobs", "noreply", "Careers", "\"Hiring\" <>"]
    )
    def test_unknown_fallback(self, sender) -> None:
        assert extract_company_name(sender) == UNKNOWN_COMPANY
