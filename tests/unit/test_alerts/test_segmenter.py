#!/usr/bin/env python3
"""
Unit tests for the alert block segmenter.

Covers marker-based splitting, the whole-body fallback and the tabular
region bounds.
"""

import pytest

from cashdeposit.alerts.segmenter import find_marker_offsets, is_transaction_block, segment
from tests.fixtures.alert_samples import (
    NO_CURRENCY_HTML,
    NOISY_SPACING_HTML,
    PLAIN_TEXT_NO_MARKER,
    QUOTED_NOISE_HTML,
    SINGLE_DEPOSIT_HTML,
    TWO_DEPOSITS_HTML,
)


class TestSegment:
    """Test segment() on representative alert bodies."""

    @pytest.mark.alerts
    def test_single_deposit_gives_one_block(self):
        """Test one marker yields one block starting at the marker."""
        blocks = segment(SINGLE_DEPOSIT_HTML)

        assert len(blocks) == 1
        assert blocks[0].startswith("Amount: 30,000.00 USD")
        assert "472852G" in blocks[0]
        # Region stops at the closing table marker
        assert "Kind regards" not in blocks[0]

    @pytest.mark.alerts
    def test_two_deposits_in_order(self):
        """Test each marker starts its own block, in body order."""
        blocks = segment(TWO_DEPOSITS_HTML)

        assert len(blocks) == 2
        assert blocks[0].startswith("Amount: 30,000.00 USD")
        assert "472852G" in blocks[0]
        assert "310045K" not in blocks[0]
        assert blocks[1].startswith("Amount: 1,250.50 EUR")
        assert "310045K" in blocks[1]

    @pytest.mark.alerts
    def test_marker_without_currency_falls_back_to_body(self):
        """Test the original body is returned when no block is valid."""
        assert segment(NO_CURRENCY_HTML) == [NO_CURRENCY_HTML]

    @pytest.mark.alerts
    def test_no_markers_returns_body_unchanged(self):
        """Test plain text without markers is passed through untouched."""
        assert segment(PLAIN_TEXT_NO_MARKER) == [PLAIN_TEXT_NO_MARKER]

    @pytest.mark.alerts
    def test_empty_body(self):
        """Test an empty body still yields a non-empty list."""
        assert segment("") == [""]

    @pytest.mark.alerts
    def test_invalid_marker_is_dropped(self):
        """Test a marker without amount and currency contributes no block."""
        blocks = segment(QUOTED_NOISE_HTML)

        assert len(blocks) == 1
        assert blocks[0].startswith("Amount: 5,000.00 GBP")
        assert "see attached advice" not in blocks[0]

    @pytest.mark.alerts
    def test_noisy_spacing_still_splits(self):
        """Test &nbsp; after the label is normalized before marker search."""
        blocks = segment(NOISY_SPACING_HTML)

        assert len(blocks) == 1
        assert blocks[0].startswith("Amount: 30,000.00 USD")

    @pytest.mark.alerts
    def test_entity_split_by_zero_width_still_marks_blocks(self):
        """Test markers written as Amount:&<ZWSP>nbsp; split like clean ones."""
        clean = (
            "<table><tr><td>Amount:&nbsp;30,000.00 USD</td></tr><tr><td>AC 472852G</td></tr>"
            "<tr><td>Amount:&nbsp;1,250.50 EUR</td></tr><tr><td>AC 310045K</td></tr></table>"
        )
        noisy = clean.replace("&nbsp;", "&\u200bnbsp;")

        blocks = segment(noisy)

        assert len(blocks) == 2
        assert blocks == segment(clean)
        assert blocks[1].startswith("Amount: 1,250.50 EUR")

    @pytest.mark.alerts
    def test_marker_outside_table_is_ignored(self):
        """Test markers before the first table are outside the region."""
        body = (
            "<p>Amount: 99.00 GBP in the previous notice</p>"
            "<table><tr><td>Amount: 10.00 EUR</td></tr><tr><td>AC 123456A</td></tr></table>"
        )
        blocks = segment(body)

        assert len(blocks) == 1
        assert blocks[0].startswith("Amount: 10.00 EUR")

    @pytest.mark.alerts
    def test_missing_closing_marker_runs_to_end(self):
        """Test an unclosed table extends the region to the end of the body."""
        body = "<table><tr><td>Amount: 10.00 EUR</td></tr><tr><td>AC 123456A</td></tr>"
        blocks = segment(body)

        assert len(blocks) == 1
        assert blocks[0].endswith("AC 123456A</td></tr>")

    @pytest.mark.alerts
    def test_marker_without_table_uses_whole_text(self):
        """Test plain-text alerts with markers still split."""
        body = "Amount: 1.00 USD AC 111111A\nAmount: 2.00 EUR AC 222222B\n"
        blocks = segment(body)

        assert blocks == ["Amount: 1.00 USD AC 111111A\n", "Amount: 2.00 EUR AC 222222B\n"]

    @pytest.mark.alerts
    def test_is_idempotent(self):
        """Test segmenting the same body twice gives the same blocks."""
        assert segment(TWO_DEPOSITS_HTML) == segment(TWO_DEPOSITS_HTML)

    @pytest.mark.alerts
    @pytest.mark.parametrize("body", [None, 42, b"Amount: 1.00 USD"])
    def test_non_string_rejected(self, body):
        """Test non-string input raises TypeError."""
        with pytest.raises(TypeError):
            segment(body)


class TestSegmenterHelpers:
    """Test the boundary helpers."""

    @pytest.mark.alerts
    def test_marker_offsets_case_insensitive(self):
        """Test the label match ignores case but needs the trailing space."""
        assert find_marker_offsets("AMOUNT: 1 amount: 2 Amount:3") == [0, 10]

    @pytest.mark.alerts
    @pytest.mark.parametrize(
        "block,expected",
        [
            ("Amount: 30,000.00 USD", True),
            ("Amount: 1250EUR", True),
            ("Amount: to be confirmed", False),
            ("Amount: 30,000.00", False),
            ("Amount: " + "9," * 25_000, False),
            ("Fees,5.00 USD", True),
        ],
    )
    def test_is_transaction_block(self, block, expected):
        """Test a block needs a numeral followed by a currency code."""
        assert is_transaction_block(block) is expected
