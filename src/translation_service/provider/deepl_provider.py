"""
DeepL translation provider implementation.

Provides translation using the DeepL API.
"""

import os
from typing import Any

from ..errors import create_provider_error
from .interface import BaseTranslationProvider

# DeepL expects regional variants for some targets
_DEEPL_TARGET_CODES = {
    "en": "EN-US",
    "pt": "PT-PT",
}


class DeepLTranslator(BaseTranslationProvider):
    """Translation provider using the DeepL API.

    Requires the `deepl` package and a valid API key.
    """

    def __init__(self, auth_key: str | None = None):
        """Initialize DeepL translator.

        Args:
            auth_key: DeepL API key (defaults to DEEPL_AUTH_KEY)

        Raises:
            ValueError: If no auth key is available
        """
        self._auth_key = auth_key or os.environ.get("DEEPL_AUTH_KEY")
        self._translator: Any = None
        self._ready = False

        self._init_client()

    def _init_client(self) -> None:
        """Initialize the DeepL API client."""
        try:
            import deepl
        except ImportError as e:
            raise ImportError("DeepL package not installed. Run: pip install deepl>=1.0.0") from e

        if not self._auth_key:
            raise ValueError("DEEPL_AUTH_KEY environment variable is required")

        self._translator = deepl.Translator(self._auth_key)
        self._ready = True

    @property
    def component_instance(self) -> str:
        return "deepl-v1"

    @property
    def is_ready(self) -> bool:
        return self._ready

    def translate(self, source_text: str, source_language: str, target_language: str) -> str:
        """Translate text using the DeepL API.

        Raises:
            ProviderError: Any DeepL or transport failure, classified
        """
        try:
            result = self._translator.translate_text(
                source_text,
                source_lang=source_language.upper(),
                target_lang=_DEEPL_TARGET_CODES.get(target_language, target_language.upper()),
            )
        except Exception as e:
            raise create_provider_error(e) from e
        return result.text

    def shutdown(self) -> None:
        """Release DeepL client resources."""
        self._translator = None
        self._ready = False
