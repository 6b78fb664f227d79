"""
Mock translation providers for testing and local runs.

Provides deterministic behavior without a real translation service.
"""

import random
import threading
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ..errors import ProviderError, ProviderErrorType
from ..languages import native_name
from .interface import BaseTranslationProvider


@dataclass
class MockProviderConfig:
    """Configuration for mock provider behavior."""

    simulate_latency_ms: int = 0


class MockIdentityTranslator(BaseTranslationProvider):
    """Deterministic mock that returns input unchanged."""

    def __init__(self, config: MockProviderConfig | None = None):
        self._config = config or MockProviderConfig()
        self._ready = True
        self._lock = threading.Lock()
        self.calls: list[tuple[str, str, str]] = []

    @property
    def component_instance(self) -> str:
        return "mock-identity-v1"

    @property
    def is_ready(self) -> bool:
        """Mock is always ready."""
        return self._ready

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def translate(self, source_text: str, source_language: str, target_language: str) -> str:
        """Record the call and return the rendered text."""
        with self._lock:
            self.calls.append((source_text, source_language, target_language))

        if self._config.simulate_latency_ms > 0:
            time.sleep(self._config.simulate_latency_ms / 1000.0)

        return self._render(source_text, source_language, target_language)

    def _render(self, source_text: str, source_language: str, target_language: str) -> str:
        return source_text

    def shutdown(self) -> None:
        self._ready = False


class MockPrefixTranslator(MockIdentityTranslator):
    """Returns ``"[<target>] " + text``. The reference deterministic provider."""

    @property
    def component_instance(self) -> str:
        return "mock-prefix-v1"

    def _render(self, source_text: str, source_language: str, target_language: str) -> str:
        return f"[{target_language}] {source_text}"


class MockLabelTranslator(MockIdentityTranslator):
    """Wraps text with native language labels, e.g. ``[Français翻译] text [由中文翻译]``."""

    @property
    def component_instance(self) -> str:
        return "mock-label-v1"

    def _render(self, source_text: str, source_language: str, target_language: str) -> str:
        return f"[{native_name(target_language)}翻译] {source_text} [由{native_name(source_language)}翻译]"


class MockLatencyTranslator(MockPrefixTranslator):
    """Prefix mock with configurable latency, for deadline and ordering tests."""

    def __init__(self, latency_ms: int = 100):
        self._latency_ms = latency_ms
        super().__init__(MockProviderConfig(simulate_latency_ms=latency_ms))

    @property
    def component_instance(self) -> str:
        return f"mock-latency-{self._latency_ms}ms"


class MockFailingTranslator(MockPrefixTranslator):
    """Prefix mock that fails on selected calls.

    A call fails when its target language is in ``fail_languages``, when
    ``fail_when`` returns True for ``(text, source, target)``, or at random
    with probability ``failure_rate``.
    """

    def __init__(
        self,
        fail_languages: Iterable[str] = (),
        failure_rate: float = 0.0,
        failure_type: ProviderErrorType = ProviderErrorType.PROVIDER_ERROR,
        fail_when: Callable[[str, str, str], bool] | None = None,
    ):
        super().__init__()
        self._fail_languages = {str(getattr(lang, "value", lang)) for lang in fail_languages}
        self._failure_rate = failure_rate
        self._failure_type = failure_type
        self._fail_when = fail_when

    @property
    def component_instance(self) -> str:
        return f"mock-failing-{self._failure_rate:.0%}"

    def translate(self, source_text: str, source_language: str, target_language: str) -> str:
        if self._should_fail(source_text, source_language, target_language):
            with self._lock:
                self.calls.append((source_text, source_language, target_language))
            raise ProviderError(
                f"Mock failure: {self._failure_type.value} ({source_language}->{target_language})",
                error_type=self._failure_type,
            )
        return super().translate(source_text, source_language, target_language)

    def _should_fail(self, source_text: str, source_language: str, target_language: str) -> bool:
        if target_language in self._fail_languages:
            return True
        if self._fail_when is not None and self._fail_when(
            source_text, source_language, target_language
        ):
            return True
        if self._failure_rate <= 0:
            return False
        if self._failure_rate >= 1:
            return True
        return random.random() < self._failure_rate
