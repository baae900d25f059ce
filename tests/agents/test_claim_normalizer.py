"""Tests for claim normalization and question detection.

Tests cover:
- Whitespace trimming and collapsing
- Length cap and idempotence at the cut
- Non-string and empty input
- Question detection by trailing '?' and by starter word
"""

import pytest

from factcheck_system.agents.claim_normalizer import (
    MAX_CLAIM_LENGTH,
    is_question,
    normalize_claim,
)


class TestNormalizeClaim:
    def test_trims_and_collapses(self) -> None:
        assert normalize_claim("  The   moon\tis\n\nmade of  cheese  ") == "The moon is made of cheese"

    def test_caps_length(self) -> None:
        result = normalize_claim("a" * (MAX_CLAIM_LENGTH + 100))
        assert len(result) == MAX_CLAIM_LENGTH

    @pytest.mark.parametrize("value", [None, "", "   ", 42, ["claim"]])
    def test_non_string_or_empty_yields_empty(self, value) -> None:
        assert normalize_claim(value) == ""

    @pytest.mark.parametrize(
        "text",
        [
            "  plain   claim ",
            "multi\nline\r\nclaim",
            "a" * (MAX_CLAIM_LENGTH - 1) + "   b",
            "x " * 4000,
        ],
    )
    def test_idempotent(self, text: str) -> None:
        once = normalize_claim(text)
        assert normalize_claim(once) == once

    def test_cut_does_not_leave_trailing_space(self) -> None:
        text = "a" * (MAX_CLAIM_LENGTH - 1) + " bcd"
        result = normalize_claim(text)
        assert not result.endswith(" ")


class TestIsQuestion:
    def test_trailing_question_mark(self) -> None:
        assert is_question("The vaccine contains microchips?")

    @pytest.mark.parametrize("starter", ["Who", "what", "IS", "Does", "should", "could"])
    def test_question_starter(self, starter: str) -> None:
        assert is_question(f"{starter} the earth orbit the sun")

    def test_statement(self) -> None:
        assert not is_question("The earth orbits the sun.")

    def test_starter_must_be_whole_first_token(self) -> None:
        assert not is_question("Island nations are sinking")

    @pytest.mark.parametrize("value", [None, "", "   ", 7])
    def test_empty_or_invalid(self, value) -> None:
        assert not is_question(value)
