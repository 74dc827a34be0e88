from bidleveler.preprocessing.cleaner import TextCleaner, normalize_whitespace


class TestTextCleaner:
    def test_normalizes_line_endings(self) -> None:
        assert TextCleaner().clean("a\r\nb\rc") == "a\nb\nc"

    def test_rejoins_hyphenated_line_breaks(self) -> None:
        assert TextCleaner().clean("construc-\ntion") == "construction"

    def test_normalizes_bullets(self) -> None:
        assert TextCleaner().clean("•    Concrete") == "• Concrete"

    def test_keeps_words(self) -> None:
        text = "Scope of work includes excavation."
        assert TextCleaner().clean(text) == text

    def test_empty_input(self) -> None:
        assert TextCleaner().clean("") == ""


class TestNormalizeWhitespace:
    def test_collapses_spaces_and_tabs(self) -> None:
        assert normalize_whitespace("a  \t  b") == "a b"

    def test_collapses_blank_line_runs(self) -> None:
        assert normalize_whitespace("a\n\n\n\n\nb") == "a\n\nb"

    def test_keeps_single_blank_line(self) -> None:
        assert normalize_whitespace("a\n\nb") == "a\n\nb"

    def test_strips_trailing_spaces_and_ends(self) -> None:
        assert normalize_whitespace("  a   \nb  ") == "a\nb"
