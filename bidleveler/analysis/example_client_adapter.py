"""Offline analysis client.

Returns a fixed, valid comparison so the full bid flow can run locally and
in tests without an API key.
"""

import json
from typing import ClassVar

from bidleveler.analysis.client_base import BaseAnalysisClient


class ExampleClientAdapter(BaseAnalysisClient):
    """Answers every request with DEFAULT_RESPONSE; no network calls."""

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "summary": {
            "recommendedBid": "example-bid",
            "totalCost": 0,
            "reasoning": "Offline example response.",
        },
        "bidComparison": [],
        "risks": [],
        "recommendations": [],
    }

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, max_tokens, system_prompt, user_prompt
        return json.dumps(self.DEFAULT_RESPONSE)
