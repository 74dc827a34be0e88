"""Token estimation shared by every component that reports token counts.

GPT-family models average roughly four characters per token for English
text. Everything that previews, logs or bills tokens goes through here so
the numbers agree.
"""

import math

CHARS_PER_TOKEN = 4


def estimate_tokens(text: str | int) -> int:
    """Estimate tokens for a string or a raw character count."""
    char_count = len(text) if isinstance(text, str) else int(text)
    if char_count <= 0:
        return 0
    return math.ceil(char_count / CHARS_PER_TOKEN)


def reduction_percent(original_tokens: int, processed_tokens: int) -> float:
    """Percentage saved, rounded to one decimal. Zero for empty input."""
    if original_tokens <= 0:
        return 0.0
    return round((original_tokens - processed_tokens) / original_tokens * 100, 1)
