"""Supported language codes and target-language resolution."""

from collections.abc import Iterable
from enum import Enum


class SupportedLanguage(str, Enum):
    """Closed set of language codes the service can translate between."""

    ZH = "zh"
    EN = "en"
    JA = "ja"
    KO = "ko"
    ES = "es"
    FR = "fr"
    DE = "de"
    IT = "it"
    PT = "pt"
    RU = "ru"


# code -> (native name, English name)
LANGUAGE_NAMES: dict[SupportedLanguage, tuple[str, str]] = {
    SupportedLanguage.ZH: ("中文", "Chinese"),
    SupportedLanguage.EN: ("English", "English"),
    SupportedLanguage.JA: ("日本語", "Japanese"),
    SupportedLanguage.KO: ("한국어", "Korean"),
    SupportedLanguage.ES: ("Español", "Spanish"),
    SupportedLanguage.FR: ("Français", "French"),
    SupportedLanguage.DE: ("Deutsch", "German"),
    SupportedLanguage.IT: ("Italiano", "Italian"),
    SupportedLanguage.PT: ("Português", "Portuguese"),
    SupportedLanguage.RU: ("Русский", "Russian"),
}

SUPPORTED_CODES: frozenset[str] = frozenset(lang.value for lang in SupportedLanguage)


def is_supported(code: object) -> bool:
    """Return True if code is one of the supported language codes."""
    if isinstance(code, SupportedLanguage):
        return True
    return isinstance(code, str) and code in SUPPORTED_CODES


def native_name(language: SupportedLanguage | str) -> str:
    """Return the native display name for a language (falls back to the code)."""
    if not is_supported(language):
        return str(language)
    return LANGUAGE_NAMES[SupportedLanguage(language)][0]


def english_name(language: SupportedLanguage | str) -> str:
    """Return the English display name for a language (falls back to the code)."""
    if not is_supported(language):
        return str(language)
    return LANGUAGE_NAMES[SupportedLanguage(language)][1]


def default_targets(source_language: SupportedLanguage | str) -> list[SupportedLanguage]:
    """All supported languages except the source, in declaration order."""
    source = SupportedLanguage(source_language)
    return [lang for lang in SupportedLanguage if lang != source]


def resolve_target_languages(
    requested: Iterable[object],
    source_language: SupportedLanguage | str,
) -> list[SupportedLanguage]:
    """Filter requested codes down to an ordered, duplicate-free target list.

    Unsupported codes and the source language itself are dropped. Caller
    order is preserved.

    Args:
        requested: Raw target language codes (may contain junk)
        source_language: Source language of the content

    Returns:
        Ordered list of distinct supported target languages
    """
    source = SupportedLanguage(source_language)
    resolved: list[SupportedLanguage] = []
    for code in requested:
        if not is_supported(code):
            continue
        language = SupportedLanguage(code)
        if language == source or language in resolved:
            continue
        resolved.append(language)
    return resolved
