#!/usr/bin/env python3
"""
Alert Text Normalization

Mail clients pad alert bodies with HTML entities, non-breaking spaces and
invisible Unicode spacing (thin spaces, zero-width joiners, byte-order marks).
These break both the block boundary scan and the field patterns, so every
body and block passes through these helpers first.
"""

import re

# General punctuation spaces, zero-width marks, line/paragraph separators,
# narrow no-break space, word joiner and BOM
NOISE_CHARS_PATTERN = re.compile("[\u2000-\u200F\u2028\u2029\u202F\u2060\uFEFF]")
NBSP_ENTITY_PATTERN = re.compile(r"&nbsp;", re.IGNORECASE)
HORIZONTAL_SPACE_PATTERN = re.compile(r"[ \t]+")
LINE_ENDING_PATTERN = re.compile(r"\r\n?")


def normalize_body(text: str) -> str:
    """
    Light normalization used before boundary detection.

    Unifies line endings, strips the invisible spacing characters and then
    turns &nbsp; entities and U+00A0 into plain spaces. Stripping comes first
    so an entity split by a zero-width character is still recognised.
    Offsets into the result are what the segmenter slices on.
    """
    text = LINE_ENDING_PATTERN.sub("\n", text or "")
    text = NOISE_CHARS_PATTERN.sub("", text)
    text = NBSP_ENTITY_PATTERN.sub(" ", text)
    return text.replace("\u00a0", " ")


def normalize_whitespace(text: str) -> str:
    """
    Full normalization used before field extraction.

    Applies normalize_body, collapses runs of spaces and tabs to a single
    space and trims. Running it on its own output changes nothing.
    """
    text = normalize_body(text)
    text = HORIZONTAL_SPACE_PATTERN.sub(" ", text)
    return text.strip()


def context_window(text: str, start: int, end: int, before: int, after: int) -> str:
    """Slice of text from `before` chars ahead of a match to `after` chars past it."""
    return text[max(0, start - before) : end + after]
