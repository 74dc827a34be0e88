from unittest.mock import MagicMock, patch

import pytest

from bidleveler.analysis.analyzer import BidAnalyzer
from bidleveler.analysis.comparison import BidComparisonService
from bidleveler.analysis.example_client_adapter import ExampleClientAdapter
from bidleveler.analysis.factory import AnalyzerFactory, build_comparison_service
from bidleveler.analysis.openai_client_adapter import OpenAIClientAdapter
from bidleveler.config.settings import Settings


class TestAnalyzerFactory:
    def test_creates_example_analyzer(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYSIS_PROVIDER", "example")
        analyzer = AnalyzerFactory.create(Settings())
        assert isinstance(analyzer, BidAnalyzer)
        assert isinstance(analyzer._client, ExampleClientAdapter)

    def test_creates_openai_analyzer(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYSIS_PROVIDER", "openai")
        monkeypatch.setenv("ANALYSIS_OPENAI_API_KEY", "sk-test")
        monkeypatch.setenv("ANALYSIS_OPENAI_MODEL_NAME", "gpt-4o")
        with patch("bidleveler.analysis.openai_client_adapter.openai.OpenAI", return_value=MagicMock()):
            analyzer = AnalyzerFactory.create(Settings())
        assert isinstance(analyzer._client, OpenAIClientAdapter)
        assert analyzer._model == "gpt-4o"

    def test_is_case_insensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYSIS_PROVIDER", " Example ")
        analyzer = AnalyzerFactory.create(Settings())
        assert isinstance(analyzer._client, ExampleClientAdapter)

    def test_raises_for_unknown_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYSIS_PROVIDER", "unknown")
        with pytest.raises(ValueError, match="Unknown analysis provider"):
            AnalyzerFactory.create(Settings())


class TestBuildComparisonService:
    def test_wires_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYSIS_PROVIDER", "example")
        monkeypatch.setenv("COMBINED_CONTENT_BUDGET", "9000")
        service = build_comparison_service(Settings())
        assert isinstance(service, BidComparisonService)
        assert service._combined_budget == 9000
