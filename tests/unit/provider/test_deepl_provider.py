"""Tests for DeepLTranslator with the deepl client patched out."""

import os
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

deepl = pytest.importorskip("deepl")

from translation_service.errors import ProviderError, ProviderErrorType  # noqa: E402
from translation_service.provider.deepl_provider import DeepLTranslator  # noqa: E402


@pytest.fixture
def mock_client():
    with patch.object(deepl, "Translator") as mock_cls:
        client = MagicMock()
        mock_cls.return_value = client
        yield client


class TestDeepLTranslator:
    """Tests for DeepLTranslator."""

    def test_translate_maps_language_codes(self, mock_client):
        mock_client.translate_text.return_value = SimpleNamespace(text="Hello")

        provider = DeepLTranslator(auth_key="key")
        result = provider.translate("你好", "zh", "en")

        assert result == "Hello"
        mock_client.translate_text.assert_called_once_with(
            "你好", source_lang="ZH", target_lang="EN-US"
        )

    def test_portuguese_target_variant(self, mock_client):
        mock_client.translate_text.return_value = SimpleNamespace(text="Olá")

        DeepLTranslator(auth_key="key").translate("Hello", "en", "pt")

        assert mock_client.translate_text.call_args.kwargs["target_lang"] == "PT-PT"

    def test_quota_error_is_provider_error(self, mock_client):
        original = deepl.QuotaExceededException("quota exceeded")
        mock_client.translate_text.side_effect = original

        with pytest.raises(ProviderError) as exc_info:
            DeepLTranslator(auth_key="key").translate("Hello", "en", "fr")

        assert exc_info.value.error_type == ProviderErrorType.PROVIDER_ERROR
        assert exc_info.value.__cause__ is original

    def test_rate_limit_is_retryable(self, mock_client):
        mock_client.translate_text.side_effect = deepl.TooManyRequestsException("slow down")

        with pytest.raises(ProviderError) as exc_info:
            DeepLTranslator(auth_key="key").translate("Hello", "en", "fr")

        assert exc_info.value.retryable is True

    def test_shutdown(self, mock_client):
        provider = DeepLTranslator(auth_key="key")
        assert provider.is_ready is True
        provider.shutdown()
        assert provider.is_ready is False

    def test_requires_key(self, monkeypatch):
        monkeypatch.delenv("DEEPL_AUTH_KEY", raising=False)
        with pytest.raises(ValueError):
            DeepLTranslator()


@pytest.mark.deepl_live
@pytest.mark.skipif(not os.getenv("DEEPL_AUTH_KEY"), reason="DEEPL_AUTH_KEY not set")
def test_live_translation():
    """Round trip against the real DeepL API."""
    provider = DeepLTranslator()
    assert provider.translate("Bonjour", "fr", "en").strip()
