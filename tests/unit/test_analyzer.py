"""Tests for the BidAnalyzer (AI-powered bid comparison)."""

import json
from unittest.mock import MagicMock

import pytest

from bidleveler.analysis.analyzer import BidAnalyzer
from bidleveler.analysis.exceptions import (
    AnalysisError,
    AnalysisNetworkError,
    AnalysisValidationError,
)
from bidleveler.preprocessing.models import ProcessingResult
from bidleveler.usage.recorder import InMemoryUsageRecorder


def _results() -> list[ProcessingResult]:
    return [
        ProcessingResult(name="acme.pdf", content="Total Project Cost: $82,300,000", original_size=40),
        ProcessingResult(name="northwind.pdf", content="Total Project Cost: $79,900,000", original_size=40),
    ]


def _valid_json_response() -> str:
    return json.dumps({
        "summary": {"recommendedBid": "northwind.pdf", "totalCost": 79900000, "reasoning": "Lower."},
        "bidComparison": [
            {"bidder": "acme.pdf", "totalCost": 82300000},
            {"bidder": "northwind.pdf", "totalCost": 79900000},
        ],
        "risks": [],
        "recommendations": [],
    })


def _make_analyzer(client: MagicMock, **kwargs: object) -> BidAnalyzer:
    return BidAnalyzer(client=client, model="test-model", **kwargs)  # type: ignore[arg-type]


class TestAnalyzeSuccess:
    def test_returns_analysis(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = _valid_json_response()
        analysis = _make_analyzer(client).analyze(_results())
        assert analysis.summary.recommended_bid == "northwind.pdf"
        assert len(analysis.bid_comparison) == 2

    def test_prompt_labels_each_bid(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = _valid_json_response()
        _make_analyzer(client).analyze(_results())
        user_prompt = client.create_chat_completion.call_args.kwargs["user_prompt"]
        assert "=== BID DOCUMENT 1: acme.pdf ===" in user_prompt
        assert "=== BID DOCUMENT 2: northwind.pdf ===" in user_prompt
        assert "Compare these 2 construction bid(s)" in user_prompt
        assert user_prompt.index("$82,300,000") < user_prompt.index("$79,900,000")

    def test_passes_model_settings(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = _valid_json_response()
        _make_analyzer(client, temperature=0.3, max_tokens=1234).analyze(_results())
        kwargs = client.create_chat_completion.call_args.kwargs
        assert kwargs["model"] == "test-model"
        assert kwargs["temperature"] == 0.3
        assert kwargs["max_tokens"] == 1234
        assert "IMPORTANT COST INFORMATION" in kwargs["system_prompt"]

    def test_clamps_temperature(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = _valid_json_response()
        _make_analyzer(client, temperature=3.0).analyze(_results())
        assert client.create_chat_completion.call_args.kwargs["temperature"] == 1.0

    def test_strips_markdown_fences(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = f"```json\n{_valid_json_response()}\n```"
        analysis = _make_analyzer(client).analyze(_results())
        assert analysis.summary.recommended_bid == "northwind.pdf"

    def test_records_usage(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = _valid_json_response()
        recorder = InMemoryUsageRecorder()
        _make_analyzer(client, usage_recorder=recorder).analyze(_results())
        [event] = recorder.events
        assert event.endpoint == "analyze-bids"
        assert event.model == "test-model"
        assert event.success is True
        assert event.input_tokens > 0
        assert event.output_tokens > 0


class TestAnalyzeErrors:
    def test_no_results_raises(self) -> None:
        with pytest.raises(AnalysisError, match="No bid documents"):
            _make_analyzer(MagicMock()).analyze([])

    def test_invalid_json_raises(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = "not json"
        with pytest.raises(AnalysisError, match="Invalid JSON"):
            _make_analyzer(client).analyze(_results())

    def test_non_object_json_raises(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = "[1, 2]"
        with pytest.raises(AnalysisError, match="must be an object"):
            _make_analyzer(client).analyze(_results())

    def test_validation_error_propagates(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = json.dumps({"summary": {}})
        with pytest.raises(AnalysisValidationError):
            _make_analyzer(client).analyze(_results())

    def test_network_error_recorded_as_failure(self) -> None:
        client = MagicMock()
        client.create_chat_completion.side_effect = AnalysisNetworkError("down")
        recorder = InMemoryUsageRecorder()
        with pytest.raises(AnalysisNetworkError):
            _make_analyzer(client, usage_recorder=recorder).analyze(_results())
        [event] = recorder.events
        assert event.success is False
        assert event.output_tokens == 0
