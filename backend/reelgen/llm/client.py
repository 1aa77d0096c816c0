import logging
from typing import Dict, List

import requests

from reelgen import config
from reelgen.llm.base import LLMClient
from reelgen.errors import (
    UpstreamPaymentRequired,
    UpstreamRateLimited,
    UpstreamUnavailable,
)

logger = logging.getLogger(__name__)


class ChatCompletionsClient(LLMClient):
    def __init__(
        self,
        base_url: str = config.LLM_BASE_URL,
        model: str = config.LLM_MODEL,
        api_key: str = config.LLM_API_KEY,
        temperature: float = config.LLM_TEMPERATURE,
        timeout: float = config.LLM_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.api_key = api_key
        self.temperature = temperature
        self.timeout = timeout

    def generate(self, messages: List[Dict]) -> str:
        """
        Send one chat completion and return the assistant text untouched.

        Raises UpstreamRateLimited (429), UpstreamPaymentRequired (402)
        or UpstreamUnavailable for anything else that goes wrong.
        """
        if not self.api_key:
            raise UpstreamUnavailable("LLM_API_KEY is not configured")

        url = f"{self.base_url}/chat/completions"

        try:
            response = requests.post(
                url,
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
                json={
                    "model": self.model,
                    "messages": messages,
                    "temperature": self.temperature,
                },
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("AI gateway request failed: %s", e)
            raise UpstreamUnavailable(f"AI gateway request failed: {e}") from e

        if not response.ok:
            logger.error("AI gateway error: %s %s", response.status_code, response.text)

            if response.status_code == 429:
                raise UpstreamRateLimited()
            if response.status_code == 402:
                raise UpstreamPaymentRequired()

            raise UpstreamUnavailable(f"AI gateway error: {response.status_code}")

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError):
            content = None

        if not content:
            raise UpstreamUnavailable("No content in AI response")

        return content


def get_llm_client() -> ChatCompletionsClient:
    return ChatCompletionsClient()
