"""
Translation Provider Interface Contract.

Defines the interface every translation provider must follow. Real providers
(e.g., DeepL) and mock providers conform to this contract.
"""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class TranslationProvider(Protocol):
    """Protocol defining the provider contract.

    One blocking outbound call, text in and text out. No internal retry.
    """

    @property
    def component_instance(self) -> str:
        """Return the provider identifier (e.g., 'deepl-v1')."""
        ...

    @property
    def is_ready(self) -> bool:
        """Check if the provider can accept requests."""
        ...

    def translate(self, source_text: str, source_language: str, target_language: str) -> str:
        """Translate text from source to target language.

        Args:
            source_text: Non-empty text to translate
            source_language: Source language code (e.g., "zh")
            target_language: Target language code (e.g., "en")

        Returns:
            Translated text

        Raises:
            ProviderError: The upstream call failed; the cause is chained.
        """
        ...

    def shutdown(self) -> None:
        """Release resources (API clients, etc.)."""
        ...


class BaseTranslationProvider(ABC):
    """Abstract base class for provider implementations."""

    @property
    @abstractmethod
    def component_instance(self) -> str:
        """Subclasses must provide their instance identifier."""
        pass

    @property
    @abstractmethod
    def is_ready(self) -> bool:
        """Subclasses must indicate readiness."""
        pass

    @abstractmethod
    def translate(self, source_text: str, source_language: str, target_language: str) -> str:
        """Subclasses must implement translation logic."""
        pass

    def shutdown(self) -> None:
        """Default implementation does nothing. Override if cleanup needed."""
        return  # noqa: B027 - intentionally empty default implementation
