"""Tests for create_translation_provider."""

import pytest

from translation_service.provider import MockPrefixTranslator, create_translation_provider


class TestCreateTranslationProvider:
    """Tests for the provider factory."""

    def test_mock_flag(self):
        assert isinstance(create_translation_provider(mock=True), MockPrefixTranslator)

    def test_mock_provider_name(self):
        assert isinstance(create_translation_provider(provider="mock"), MockPrefixTranslator)

    def test_deepl_without_key_raises(self, monkeypatch):
        monkeypatch.delenv("DEEPL_AUTH_KEY", raising=False)
        with pytest.raises(ValueError, match="DeepL auth key required"):
            create_translation_provider(provider="deepl")

    def test_unknown_provider_raises(self):
        with pytest.raises(ValueError, match="Unknown provider"):
            create_translation_provider(provider="google")

    def test_deepl_with_key(self):
        pytest.importorskip("deepl")
        from translation_service.provider.deepl_provider import DeepLTranslator

        provider = create_translation_provider(provider="deepl", auth_key="test-key:fx")

        assert isinstance(provider, DeepLTranslator)
        assert provider.component_instance == "deepl-v1"
