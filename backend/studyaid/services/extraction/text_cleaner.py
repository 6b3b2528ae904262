"""
Text normalization for extracted document text.
Re-joins words hyphenated across line breaks and flattens whitespace.
"""

import re

# A word character, a hyphen, then the line break (or any whitespace run) after it.
# Not dictionary-aware: "well-\nknown" becomes "wellknown".
HYPHEN_BREAK_PATTERN = re.compile(r"(\w)-\s+")
WHITESPACE_PATTERN = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Clean PDF text (direct or OCR) into a single-line body."""
    if not text:
        return ""

    cleaned = HYPHEN_BREAK_PATTERN.sub(r"\1", text)
    cleaned = WHITESPACE_PATTERN.sub(" ", cleaned)
    return cleaned.strip()


def normalize_plain_text(text: str) -> str:
    """Plain-text and markdown uploads keep their line structure."""
    if not text:
        return ""
    return text.replace("\r\n", "\n").strip()
