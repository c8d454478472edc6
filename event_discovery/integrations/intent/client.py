"""HTTP client for the intent-extraction service."""

import json
import logging
from typing import Any, Dict, Optional

import httpx

from ...config import config
from ...constants import ANYTIME, DEFAULT_INTENT_PRICE_RANGE
from ...search.search_models import PriceWindow
from ...search.tokenizer import tokenize
from .base import IntentProvider
from .models import IntentAnalysis

logger = logging.getLogger(__name__)


class IntentServiceClient(IntentProvider):
    """Client for the intent-extraction service.

    The service accepts `{"prompt": ...}` and answers with
    `{categories, keywords, price_range, time_preference, location}`.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        """Initialize intent service client.

        Args:
            base_url: Service endpoint. Defaults to INTENT_SERVICE_URL.
            api_key: Bearer token. Defaults to INTENT_SERVICE_KEY.
            timeout: Request timeout in seconds. Defaults to INTENT_TIMEOUT.
            http_client: Preconfigured client, mainly for tests.
        """
        self.base_url = base_url or config.intent_service_url
        self.api_key = api_key or config.intent_service_key
        self.default_city = config.default_city

        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        self.http_client = http_client or httpx.Client(
            headers=headers,
            timeout=timeout or config.intent_timeout,
        )

    def close(self) -> None:
        self.http_client.close()

    def __enter__(self) -> "IntentServiceClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _clean_json_string(self, content: str) -> str:
        """Strip markdown code fences around a JSON payload.

        Args:
            content: Raw response text

        Returns:
            Cleaned JSON string
        """
        content = content.strip()
        if content.startswith("```json"):
            content = content[7:]
        elif content.startswith("```"):
            content = content[3:]
        if content.endswith("```"):
            content = content[:-3]
        return content.strip()

    def fallback(self, prompt: str) -> IntentAnalysis:
        """Analysis used when the service is unavailable or answers garbage."""
        return IntentAnalysis(
            categories=[],
            keywords=tokenize(prompt),
            price_range=PriceWindow.from_dict(DEFAULT_INTENT_PRICE_RANGE),
            time_preference=ANYTIME,
            location=self.default_city,
            is_fallback=True,
        )

    def _call_service(self, prompt: str) -> Dict[str, Any]:
        """Post the prompt and decode the JSON answer.

        Raises:
            httpx.HTTPError: On transport errors or error status codes.
            ValueError: If the answer is not a JSON object.
        """
        if not self.base_url:
            raise ValueError("INTENT_SERVICE_URL is not configured")

        response = self.http_client.post(self.base_url, json={"prompt": prompt})
        if response.status_code != 200:
            logger.error(f"Intent service error response: {response.text}")
        response.raise_for_status()

        data = json.loads(self._clean_json_string(response.text))
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
        return data

    def analyze(self, prompt: str) -> IntentAnalysis:
        """Extract search hints from a prompt.

        Args:
            prompt: Free-text search prompt

        Returns:
            Intent analysis, or the fallback analysis on any service failure
        """
        if not prompt or not prompt.strip():
            return self.fallback(prompt)

        try:
            data = self._call_service(prompt)
        except httpx.HTTPError as e:
            logger.error(f"Intent service call failed: {e}")
            return self.fallback(prompt)
        except ValueError as e:
            logger.error(f"Intent service returned invalid JSON: {e}")
            return self.fallback(prompt)

        if "error" in data:
            logger.warning(f"Intent service reported an error: {data['error']}")

        analysis = IntentAnalysis.from_dict(data)
        analysis.is_fallback = "error" in data
        if not data.get("location"):
            analysis.location = self.default_city
        logger.debug(f"Intent analysis for {prompt!r}: {analysis}")
        return analysis
