from bidleveler.logging.logger import Log
from bidleveler.preprocessing.base import BaseSectionSelector, BaseSummarizer, BaseTruncator
from bidleveler.preprocessing.models import CostFinding
from bidleveler.preprocessing.patterns import (
    KEY_SECTIONS,
    PARAGRAPH_BOUNDARY_PATTERN,
    SECTION_BOUNDARY_PATTERN,
    SUMMARY_KEY_TERMS,
)


class KeySectionSelector(BaseSectionSelector):
    """Keeps sections whose text mentions pricing, scope, schedule or resources.

    An empty return means nothing matched; callers fall back to the full
    text rather than emitting nothing.
    """

    def __init__(self, keywords: tuple[str, ...] = KEY_SECTIONS) -> None:
        self._keywords = tuple(k.upper() for k in keywords)

    def select_key_sections(self, text: str) -> list[str]:
        if not text:
            return []
        sections = SECTION_BOUNDARY_PATTERN.split(text)
        return [
            section
            for section in sections
            if any(keyword in section.upper() for keyword in self._keywords)
        ]


class ParagraphSummarizer(BaseSummarizer):
    """Keeps introduction, keyword paragraphs and conclusion of long documents.

    Documents with few paragraphs gain nothing from paragraph selection and
    go straight to the truncator instead.
    """

    MAX_PARAGRAPHS = 15
    INTRO_PARAGRAPHS = 2
    FALLBACK_SLICE = slice(2, 5)

    def __init__(
        self,
        truncator: BaseTruncator,
        key_terms: tuple[str, ...] = SUMMARY_KEY_TERMS,
    ) -> None:
        self._truncator = truncator
        self._key_terms = tuple(t.lower() for t in key_terms)

    def summarize(
        self,
        text: str,
        max_length: int,
        cost_finding: CostFinding | None = None,
    ) -> str:
        if len(text) <= max_length:
            return text

        paragraphs = PARAGRAPH_BOUNDARY_PATTERN.split(text)
        if len(paragraphs) <= self.MAX_PARAGRAPHS:
            return self._truncator.truncate(text, max_length, cost_finding)

        intro = paragraphs[: self.INTRO_PARAGRAPHS]
        body = paragraphs[self.INTRO_PARAGRAPHS : -1]
        key_paragraphs = [p for p in body if self._has_key_term(p)]
        if not key_paragraphs:
            key_paragraphs = paragraphs[self.FALLBACK_SLICE]
        conclusion = paragraphs[-1:]

        Log.debug(
            f"Summarized {len(paragraphs)} paragraphs down to "
            f"{len(intro) + len(key_paragraphs) + len(conclusion)}"
        )
        summary = "\n\n".join([*intro, *key_paragraphs, *conclusion])
        return summary + (
            f"\n\n(Note: This is a summarized version of the original document "
            f"which contained {len(paragraphs)} paragraphs. Only the introduction, "
            f"key information, and conclusion are included.)"
        )

    def _has_key_term(self, paragraph: str) -> bool:
        lowered = paragraph.lower()
        return any(term in lowered for term in self._key_terms)
