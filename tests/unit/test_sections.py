from unittest.mock import MagicMock

from bidleveler.preprocessing.models import CostFinding
from bidleveler.preprocessing.sections import KeySectionSelector, ParagraphSummarizer


class TestKeySectionSelector:
    def test_keeps_matching_sections(self) -> None:
        text = (
            "INTRODUCTION:\nWe are pleased to submit.\n"
            "PRICING:\nTotal $5,000\n"
            "REFERENCES:\nAvailable on request."
        )
        sections = KeySectionSelector().select_key_sections(text)
        assert len(sections) == 1
        assert sections[0].startswith("PRICING:")

    def test_matches_keyword_anywhere_in_section(self) -> None:
        text = "OVERVIEW:\nIncludes the full scope of work for phase one."
        sections = KeySectionSelector().select_key_sections(text)
        assert sections == [text]

    def test_no_match_returns_empty(self) -> None:
        text = "INTRODUCTION:\nHello.\nREFERENCES:\nNone."
        assert KeySectionSelector().select_key_sections(text) == []

    def test_preserves_order(self) -> None:
        text = "SCHEDULE:\n18 months\nPRICING:\n$1,000"
        sections = KeySectionSelector().select_key_sections(text)
        assert [s.split(":")[0] for s in sections] == ["SCHEDULE", "PRICING"]

    def test_custom_keywords(self) -> None:
        text = "WARRANTY:\nTwo years.\nPRICING:\n$1,000"
        sections = KeySectionSelector(keywords=("warranty",)).select_key_sections(text)
        assert len(sections) == 1
        assert sections[0].startswith("WARRANTY:")

    def test_empty_text(self) -> None:
        assert KeySectionSelector().select_key_sections("") == []


def _paragraphs(count: int, keyword_at: tuple[int, ...] = ()) -> list[str]:
    return [
        f"Paragraph {i} mentions the price." if i in keyword_at else f"Paragraph {i} is filler."
        for i in range(count)
    ]


class TestParagraphSummarizer:
    def test_short_text_unchanged(self) -> None:
        truncator = MagicMock()
        result = ParagraphSummarizer(truncator).summarize("short", 100)
        assert result == "short"
        truncator.truncate.assert_not_called()

    def test_few_paragraphs_delegate_to_truncator(self) -> None:
        truncator = MagicMock()
        truncator.truncate.return_value = "truncated"
        finding = CostFinding(total_cost="Total Project Cost: $1")
        text = "\n\n".join(_paragraphs(5))

        result = ParagraphSummarizer(truncator).summarize(text, 20, finding)

        assert result == "truncated"
        truncator.truncate.assert_called_once_with(text, 20, finding)

    def test_keeps_intro_key_paragraphs_and_conclusion(self) -> None:
        text = "\n\n".join(_paragraphs(20, keyword_at=(7, 11)))
        result = ParagraphSummarizer(MagicMock()).summarize(text, 100)
        kept = result.split("\n\n")[:-1]
        assert kept == [
            "Paragraph 0 is filler.",
            "Paragraph 1 is filler.",
            "Paragraph 7 mentions the price.",
            "Paragraph 11 mentions the price.",
            "Paragraph 19 is filler.",
        ]

    def test_appends_summary_note(self) -> None:
        text = "\n\n".join(_paragraphs(20, keyword_at=(7,)))
        result = ParagraphSummarizer(MagicMock()).summarize(text, 100)
        assert result.endswith(
            "(Note: This is a summarized version of the original document which "
            "contained 20 paragraphs. Only the introduction, key information, "
            "and conclusion are included.)"
        )

    def test_falls_back_to_early_body_paragraphs(self) -> None:
        text = "\n\n".join(_paragraphs(20))
        result = ParagraphSummarizer(MagicMock()).summarize(text, 100)
        kept = result.split("\n\n")[:-1]
        assert kept == [f"Paragraph {i} is filler." for i in (0, 1, 2, 3, 4, 19)]

    def test_does_not_duplicate_intro_or_conclusion(self) -> None:
        text = "\n\n".join(_paragraphs(20, keyword_at=(0, 10, 19)))
        result = ParagraphSummarizer(MagicMock()).summarize(text, 100)
        assert result.count("Paragraph 0 ") == 1
        assert result.count("Paragraph 19 ") == 1
