from bidleveler.preprocessing.tokens import estimate_tokens, reduction_percent


class TestEstimateTokens:
    def test_four_chars_per_token(self) -> None:
        assert estimate_tokens("abcd") == 1

    def test_rounds_up(self) -> None:
        assert estimate_tokens("abcde") == 2

    def test_empty_string_is_zero(self) -> None:
        assert estimate_tokens("") == 0

    def test_accepts_char_count(self) -> None:
        assert estimate_tokens(10000) == 2500

    def test_negative_count_is_zero(self) -> None:
        assert estimate_tokens(-5) == 0


class TestReductionPercent:
    def test_rounds_to_one_decimal(self) -> None:
        assert reduction_percent(3, 1) == 66.7

    def test_no_reduction(self) -> None:
        assert reduction_percent(100, 100) == 0.0

    def test_zero_original_is_zero(self) -> None:
        assert reduction_percent(0, 0) == 0.0
