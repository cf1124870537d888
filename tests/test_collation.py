"""Tests for locale-style name collation (core/collation.py)."""

from __future__ import annotations

import pytest

from grocno.core.collation import collation_key


class TestCollationKey:
    def test_case_folded_at_primary_level(self) -> None:
        assert collation_key("Apple")[0] == collation_key("apple")[0]

    def test_accents_stripped_at_primary_level(self) -> None:
        assert collation_key("Éclair")[0] == "eclair"

    def test_uppercase_before_lowercase_next_letter(self) -> None:
        # Code-point order would put "Zebra" first.
        assert collation_key("apple") < collation_key("Zebra")

    def test_lowercase_before_uppercase_on_tie(self) -> None:
        assert collation_key("apple") < collation_key("Apple")

    def test_unaccented_before_accented_on_tie(self) -> None:
        assert collation_key("resume") < collation_key("résumé")

    def test_composed_and_decomposed_forms_are_equal(self) -> None:
        assert collation_key("caf\u00e9") == collation_key("cafe\u0301")

    def test_sorted_words(self) -> None:
        words = ["banana", "Apple", "éclair", "apple"]
        assert sorted(words, key=collation_key) == ["apple", "Apple", "banana", "éclair"]

    def test_empty_string_sorts_first(self) -> None:
        assert collation_key("") < collation_key("a")

    @pytest.mark.parametrize("name", ["€ voucher", "~tilde", "(bulk) rice", "#1 pick"])
    def test_symbols_before_letters(self, name: str) -> None:
        assert collation_key(name) < collation_key("apple")
        assert collation_key(name) < collation_key("zucchini")

    def test_symbols_before_digits(self) -> None:
        assert collation_key("~tilde") < collation_key("7up")

    def test_digits_before_letters(self) -> None:
        assert collation_key("7up") < collation_key("apple")

    def test_space_keeps_shorter_word_first(self) -> None:
        assert collation_key("apple pie") < collation_key("applesauce")
