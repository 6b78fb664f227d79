"""Shared test fixtures for translation service tests.

Provides mock providers, a ready-made service, and sample content.
"""

import pytest

from translation_service.provider.mock import (
    MockFailingTranslator,
    MockIdentityTranslator,
    MockPrefixTranslator,
)
from translation_service.service import TranslationService

# =============================================================================
# Content Fixtures
# =============================================================================

ARTICLE_CONTENT = {
    "title": "Hello",
    "summary": "A short summary of the article.",
    "body": "The quick brown fox jumps over the lazy dog.",
}


@pytest.fixture
def article_content() -> dict[str, str]:
    """Three-field article in English."""
    return dict(ARTICLE_CONTENT)


# =============================================================================
# Provider Fixtures
# =============================================================================


@pytest.fixture
def prefix_provider() -> MockPrefixTranslator:
    """Deterministic "[lang] text" provider."""
    return MockPrefixTranslator()


@pytest.fixture
def identity_provider() -> MockIdentityTranslator:
    return MockIdentityTranslator()


@pytest.fixture
def french_failing_provider() -> MockFailingTranslator:
    """Prefix provider that fails every call targeting French."""
    return MockFailingTranslator(fail_languages=["fr"])


# =============================================================================
# Service Fixtures
# =============================================================================


@pytest.fixture
def service(prefix_provider) -> TranslationService:
    """Service over the prefix provider with English as default source.

    The worker is not started; async tests call ``await service.start()``.
    """
    return TranslationService(prefix_provider, default_source_language="en")
