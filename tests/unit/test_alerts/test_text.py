#!/usr/bin/env python3
"""Tests for alert text normalization."""

import pytest

from cashdeposit.alerts.text import context_window, normalize_body, normalize_whitespace


class TestNormalizeBody:
    """Test the light normalization applied before segmentation."""

    @pytest.mark.alerts
    def test_unifies_line_endings(self):
        """Test CRLF and lone CR both become LF."""
        assert normalize_body("a\r\nb\rc\nd") == "a\nb\nc\nd"

    @pytest.mark.alerts
    def test_nbsp_entity_and_character_become_spaces(self):
        """Test &nbsp; (any case) and U+00A0 become plain spaces."""
        assert normalize_body("Amount:&nbsp;1&NBSP;2\u00a03") == "Amount: 1 2 3"

    @pytest.mark.alerts
    def test_invisible_spacing_is_removed(self):
        """Test thin, zero-width and separator characters are stripped."""
        noisy = "30,000.\u200900\u200b\u200c\u200d\u2028\u2029\u202f\u2060\ufeffUSD"
        assert normalize_body(noisy) == "30,000.00USD"

    @pytest.mark.alerts
    def test_entity_split_by_invisible_character(self):
        """Test an &nbsp; entity broken up by zero-width characters still becomes a space."""
        assert normalize_body("Amount:&\u200bnbsp;30,000.00 USD") == "Amount: 30,000.00 USD"

    @pytest.mark.alerts
    def test_keeps_runs_of_spaces(self):
        """Test spacing runs survive so offsets stay meaningful."""
        assert normalize_body("a   b") == "a   b"


class TestNormalizeWhitespace:
    """Test the full normalization applied before extraction."""

    @pytest.mark.alerts
    def test_collapses_and_trims(self):
        """Test horizontal runs collapse and ends are trimmed."""
        assert normalize_whitespace("  Amount:\t\t 30,000.00   USD \n") == "Amount: 30,000.00 USD"

    @pytest.mark.alerts
    @pytest.mark.parametrize(
        "text",
        [
            "",
            "plain",
            "  Amount:&nbsp;30,000.\u200900\u00a0USD\r\n AC\u200b 472852G  ",
            "Amount:&\u200bnbsp;30,000.00 USD",
            "&\u200bn\u2060bsp\u200b;\r\u200b\n",
            "\t\t\n\n",
        ],
    )
    def test_is_a_fixed_point(self, text):
        """Test normalizing twice gives the same result as normalizing once."""
        once = normalize_whitespace(text)
        assert normalize_whitespace(once) == once


class TestContextWindow:
    """Test context slicing around a match."""

    @pytest.mark.alerts
    def test_clamps_at_start(self):
        """Test the window never starts before index 0."""
        assert context_window("abcdefgh", 2, 4, 10, 2) == "abcdef"

    @pytest.mark.alerts
    def test_interior_window(self):
        """Test a window fully inside the text."""
        assert context_window("0123456789", 4, 6, 2, 1) == "23456"
