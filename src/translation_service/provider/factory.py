"""
Factory function for creating translation providers.
"""

import os

from .interface import TranslationProvider
from .mock import MockPrefixTranslator


def create_translation_provider(
    provider: str = "deepl",
    mock: bool = False,
    auth_key: str | None = None,
) -> TranslationProvider:
    """Create a translation provider instance.

    Args:
        provider: Provider name ("deepl" or "mock")
        mock: If True, return MockPrefixTranslator regardless of provider
        auth_key: DeepL API key (defaults to DEEPL_AUTH_KEY)

    Returns:
        TranslationProvider instance

    Raises:
        ValueError: If provider is "deepl" and no auth key is available, or
            the provider name is unknown
    """
    if mock or provider == "mock":
        return MockPrefixTranslator()

    if provider == "deepl":
        auth_key = auth_key or os.environ.get("DEEPL_AUTH_KEY")
        if not auth_key:
            raise ValueError(
                "DeepL auth key required. Set DEEPL_AUTH_KEY environment variable "
                "or use mock=True for testing."
            )

        # Import here to avoid loading deepl when not needed
        from .deepl_provider import DeepLTranslator

        return DeepLTranslator(auth_key=auth_key)

    raise ValueError(f"Unknown provider: {provider}. Supported: deepl, mock")
