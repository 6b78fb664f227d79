"""
Translation provider adapters.

Exports:
    - create_translation_provider: Factory function for provider creation
    - TranslationProvider: Protocol interface
    - BaseTranslationProvider: Abstract base class
    - Mock providers for tests and local runs
"""

from .factory import create_translation_provider
from .interface import BaseTranslationProvider, TranslationProvider
from .mock import (
    MockFailingTranslator,
    MockIdentityTranslator,
    MockLabelTranslator,
    MockLatencyTranslator,
    MockPrefixTranslator,
    MockProviderConfig,
)

__all__ = [
    "create_translation_provider",
    "TranslationProvider",
    "BaseTranslationProvider",
    "MockProviderConfig",
    "MockIdentityTranslator",
    "MockPrefixTranslator",
    "MockLabelTranslator",
    "MockLatencyTranslator",
    "MockFailingTranslator",
]
