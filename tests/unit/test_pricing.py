import pytest

from bidleveler.usage.pricing import estimate_cost, format_usd


class TestEstimateCost:
    def test_default_prices(self) -> None:
        assert estimate_cost(1000, 1000) == pytest.approx(0.09)

    def test_input_only(self) -> None:
        assert estimate_cost(3000, 0) == pytest.approx(0.09)

    def test_custom_prices(self) -> None:
        assert estimate_cost(2000, 500, 0.01, 0.02) == pytest.approx(0.03)


class TestFormatUsd:
    def test_two_decimals(self) -> None:
        assert format_usd(0.09) == "$0.09"
        assert format_usd(12.5) == "$12.50"
