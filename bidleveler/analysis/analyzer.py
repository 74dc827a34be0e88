"""AI-powered comparison of preprocessed bid documents."""

import json
from collections.abc import Sequence
from pathlib import Path

from bidleveler.analysis.client_base import BaseAnalysisClient
from bidleveler.analysis.exceptions import AnalysisError
from bidleveler.analysis.models import BidAnalysis
from bidleveler.analysis.prompt_loader import load_comparison_template, load_system_prompt
from bidleveler.analysis.validator import validate_and_build
from bidleveler.logging.logger import Log
from bidleveler.preprocessing.models import ProcessingResult
from bidleveler.preprocessing.tokens import estimate_tokens
from bidleveler.usage.base import BaseUsageRecorder
from bidleveler.usage.models import UsageEvent


class BidAnalyzer:
    """Sends preprocessed bids to an AI provider and validates its comparison."""

    ENDPOINT = "analyze-bids"

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        model: str,
        temperature: float = 0.1,
        max_tokens: int = 4000,
        usage_recorder: BaseUsageRecorder | None = None,
        system_prompt_path: Path | None = None,
        comparison_template_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._max_tokens = max_tokens
        self._usage_recorder = usage_recorder
        self._system_prompt = load_system_prompt(system_prompt_path)
        self._template = load_comparison_template(comparison_template_path)

    def analyze(self, results: Sequence[ProcessingResult]) -> BidAnalysis:
        """Compare the bids in *results* (already preprocessed and in budget)."""
        if not results:
            raise AnalysisError("No bid documents to analyze")
        prompt = self.build_prompt(results)
        input_tokens = estimate_tokens(self._system_prompt) + estimate_tokens(prompt)
        Log.info(f"Final prompt: ~{input_tokens} tokens for {len(results)} bid(s)")

        try:
            raw_response = self._client.create_chat_completion(
                model=self._model,
                temperature=self._temperature,
                max_tokens=self._max_tokens,
                system_prompt=self._system_prompt,
                user_prompt=prompt,
            )
        except AnalysisError:
            self._record(input_tokens, 0, success=False)
            raise
        Log.debug(f"AI raw response:\n{raw_response}")
        self._record(input_tokens, estimate_tokens(raw_response), success=True)

        analysis = validate_and_build(self._parse_json(raw_response))
        Log.info(
            f"Bid analysis complete: {len(analysis.bid_comparison)} bids compared, "
            f"recommended {analysis.summary.recommended_bid}"
        )
        return analysis

    def build_prompt(self, results: Sequence[ProcessingResult]) -> str:
        blocks = [
            f"\n=== BID DOCUMENT {index}: {result.name} ===\n{result.content}\n---\n"
            for index, result in enumerate(results, start=1)
        ]
        return self._template.format(
            bid_count=len(results),
            bid_documents="\n\n".join(blocks),
        )

    def _record(self, input_tokens: int, output_tokens: int, *, success: bool) -> None:
        if self._usage_recorder is None:
            return
        self._usage_recorder.record(
            UsageEvent(
                endpoint=self.ENDPOINT,
                input_tokens=input_tokens,
                output_tokens=output_tokens,
                model=self._model,
                success=success,
            )
        )

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise AnalysisError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise AnalysisError("JSON response must be an object")
        return parsed
