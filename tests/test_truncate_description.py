"""Tests for the short description derivation."""

import pytest

from catalog_api.app.services.product_service import truncate_description


@pytest.mark.parametrize("length", [0, 1, 50, 99, 100])
def test_short_text_is_returned_unchanged(length):
    description = "x" * length
    assert truncate_description(description) == description


@pytest.mark.parametrize("length", [101, 102, 115, 500])
def test_long_text_is_cut_to_exactly_100_characters(length):
    description = "".join(chr(ord("a") + i % 26) for i in range(length))
    short = truncate_description(description)
    assert len(short) == 100
    assert short.endswith("...")
    assert short[:97] == description[:97]


def test_text_ending_in_dots_within_limit_is_untouched():
    description = "Wait for it" + "." * 89
    assert len(description) == 100
    assert truncate_description(description) == description


def test_counts_characters_not_bytes():
    description = "é" * 150
    short = truncate_description(description)
    assert len(short) == 100
    assert short == "é" * 97 + "..."


def test_custom_limit_and_marker():
    assert truncate_description("abcdefghij", max_length=6, marker="~") == "abcde~"
