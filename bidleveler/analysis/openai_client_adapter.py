import httpx
import openai
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)
from tenacity.wait import wait_base

from bidleveler.analysis.client_base import BaseAnalysisClient
from bidleveler.analysis.exceptions import AnalysisError, AnalysisNetworkError
from bidleveler.logging.logger import Log


class OpenAIClientAdapter(BaseAnalysisClient):
    """Bid analysis client on the OpenAI chat API in JSON mode.

    Network, rate-limit and API failures are retried with jittered
    exponential backoff; an empty answer is not.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        max_attempts: int = 3,
        base_url: str | None = None,
        retry_wait: wait_base | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )
        self._max_attempts = max(1, max_attempts)
        self._retry_wait = retry_wait or wait_random_exponential(multiplier=1, max=60)

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        for attempt in Retrying(
            stop=stop_after_attempt(self._max_attempts),
            wait=self._retry_wait,
            retry=retry_if_exception_type(AnalysisNetworkError),
            reraise=True,
        ):
            with attempt:
                number = attempt.retry_state.attempt_number
                if number > 1:
                    Log.warning(f"Retrying bid analysis (attempt {number} of {self._max_attempts})")
                return self._request(
                    model=model,
                    temperature=temperature,
                    max_tokens=max_tokens,
                    system_prompt=system_prompt,
                    user_prompt=user_prompt,
                )
        raise AnalysisError("Max retries exceeded")  # pragma: no cover

    def _request(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
                response_format={"type": "json_object"},
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AnalysisNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise AnalysisNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise AnalysisError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise AnalysisError("AI returned empty response")
        return content
