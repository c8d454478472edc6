"""Intent-extraction collaborators."""

from typing import Optional

from ...config import config
from .base import IntentProvider
from .client import IntentServiceClient
from .models import IntentAnalysis, explain_results
from .rule_based import RuleBasedIntentAnalyzer


def get_intent_provider(service_url: Optional[str] = None) -> IntentProvider:
    """Return the HTTP client when a service URL is known, else the rule-based analyzer."""
    url = service_url or config.intent_service_url
    if url:
        return IntentServiceClient(base_url=url)
    return RuleBasedIntentAnalyzer()


__all__ = [
    "IntentAnalysis",
    "IntentProvider",
    "IntentServiceClient",
    "RuleBasedIntentAnalyzer",
    "explain_results",
    "get_intent_provider",
]
