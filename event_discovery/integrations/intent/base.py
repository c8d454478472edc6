"""Base interface for intent providers."""

from abc import ABC, abstractmethod

from .models import IntentAnalysis


class IntentProvider(ABC):
    """Abstract base class for intent providers."""

    @abstractmethod
    def analyze(self, prompt: str) -> IntentAnalysis:
        """Extract search hints from a prompt.

        Args:
            prompt: Free-text search prompt

        Returns:
            Intent analysis. Providers never raise for provider failures;
            they return a fallback analysis instead.
        """
        pass
