"""First pipeline stage: repair text-extraction artifacts.

PDF and DOCX converters leave CRLF line endings, words hyphenated across
line breaks, stretched bullets and long whitespace runs. None of this is
content, and cleaning it first lets the later patterns match reliably.
"""

import re

from bidleveler.preprocessing.patterns import BLANK_LINE_RUN, HORIZONTAL_WHITESPACE_RUN

_HYPHENATED_BREAK = re.compile(r"(\w)-\n(\w)")
_BULLET = re.compile(r"•[ \t]+")
_TRAILING_SPACE = re.compile(r"[ \t]+\n")


class TextCleaner:
    """Normalizes line endings and whitespace without removing words."""

    def clean(self, text: str) -> str:
        if not text:
            return ""
        cleaned = text.replace("\r\n", "\n").replace("\r", "\n")
        cleaned = _HYPHENATED_BREAK.sub(r"\1\2", cleaned)
        cleaned = _BULLET.sub("• ", cleaned)
        return normalize_whitespace(cleaned)


def normalize_whitespace(text: str) -> str:
    """Collapse blank-line runs to one blank line and spaces to one space."""
    text = HORIZONTAL_WHITESPACE_RUN.sub(" ", text)
    text = _TRAILING_SPACE.sub("\n", text)
    text = BLANK_LINE_RUN.sub("\n\n", text)
    return text.strip()
