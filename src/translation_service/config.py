"""Environment-based configuration for the translation service.

All configuration is loaded from environment variables with sensible defaults.
Invalid values cause startup to fail fast.
"""

import os
from dataclasses import dataclass, field

from .languages import SUPPORTED_CODES


@dataclass(frozen=True)
class ServerConfig:
    """HTTP server configuration."""

    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))


@dataclass(frozen=True)
class ObservabilityConfig:
    """Observability configuration for logging."""

    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    # "json" or "console"
    log_format: str = field(default_factory=lambda: os.getenv("LOG_FORMAT", "json"))

    @property
    def json_logs(self) -> bool:
        return self.log_format.lower() != "console"


@dataclass(frozen=True)
class PipelineConfig:
    """Provider, translator, store and poller configuration."""

    # Provider selection: "mock" or "deepl"
    provider: str = field(default_factory=lambda: os.getenv("TRANSLATION_PROVIDER", "mock"))
    deepl_auth_key: str | None = field(default_factory=lambda: os.getenv("DEEPL_AUTH_KEY"))

    # Canonical language of submitted content when the caller does not say
    default_source_language: str = field(
        default_factory=lambda: os.getenv("DEFAULT_SOURCE_LANGUAGE", "zh")
    )

    # Per-call provider deadline (seconds)
    provider_timeout_s: float = field(
        default_factory=lambda: float(os.getenv("PROVIDER_TIMEOUT_S", "30"))
    )

    # 1 = pairs translated one at a time
    max_concurrency: int = field(
        default_factory=lambda: int(os.getenv("TRANSLATION_MAX_CONCURRENCY", "1"))
    )

    # Results scoring below this are flagged needs_review
    review_score_threshold: int = field(
        default_factory=lambda: int(os.getenv("REVIEW_SCORE_THRESHOLD", "70"))
    )

    # 0 = unbounded retention
    max_tasks: int = field(default_factory=lambda: int(os.getenv("TASK_STORE_MAX_TASKS", "1000")))

    # Client poller defaults
    poll_interval_s: float = field(default_factory=lambda: float(os.getenv("POLL_INTERVAL_S", "5")))
    poll_max_attempts: int = field(
        default_factory=lambda: int(os.getenv("POLL_MAX_ATTEMPTS", "60"))
    )

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If configuration is missing or invalid.
        """
        if self.provider not in ("mock", "deepl"):
            raise ValueError(
                f"TRANSLATION_PROVIDER must be 'mock' or 'deepl', got {self.provider!r}"
            )
        if self.provider == "deepl" and not self.deepl_auth_key:
            raise ValueError(
                "DEEPL_AUTH_KEY environment variable is required for the deepl provider. "
                "Get your API key from https://www.deepl.com/pro-api"
            )
        if self.default_source_language not in SUPPORTED_CODES:
            raise ValueError(
                f"DEFAULT_SOURCE_LANGUAGE must be one of {sorted(SUPPORTED_CODES)}, "
                f"got {self.default_source_language!r}"
            )
        if self.provider_timeout_s <= 0:
            raise ValueError(f"PROVIDER_TIMEOUT_S must be positive, got {self.provider_timeout_s}")
        if self.max_concurrency < 1:
            raise ValueError(
                f"TRANSLATION_MAX_CONCURRENCY must be at least 1, got {self.max_concurrency}"
            )
        if not 0 <= self.review_score_threshold <= 100:
            raise ValueError(
                f"REVIEW_SCORE_THRESHOLD must be between 0 and 100, got {self.review_score_threshold}"
            )
        if self.max_tasks < 0:
            raise ValueError(f"TASK_STORE_MAX_TASKS must be >= 0, got {self.max_tasks}")
        if self.poll_interval_s < 0:
            raise ValueError(f"POLL_INTERVAL_S must be >= 0, got {self.poll_interval_s}")
        if self.poll_max_attempts < 1:
            raise ValueError(f"POLL_MAX_ATTEMPTS must be at least 1, got {self.poll_max_attempts}")


@dataclass(frozen=True)
class ServiceSettings:
    """Complete configuration for the translation service."""

    server: ServerConfig
    observability: ObservabilityConfig
    pipeline: PipelineConfig

    @classmethod
    def from_env(cls) -> "ServiceSettings":
        """Create configuration from environment variables.

        Raises:
            ValueError: If configuration is invalid.
        """
        config = cls(
            server=ServerConfig(),
            observability=ObservabilityConfig(),
            pipeline=PipelineConfig(),
        )
        config.pipeline.validate()
        return config


_config: ServiceSettings | None = None


def get_config() -> ServiceSettings:
    """Get the process configuration, loading it from the environment on first use."""
    global _config
    if _config is None:
        _config = ServiceSettings.from_env()
    return _config


def reset_config() -> None:
    """Reset the process configuration (for testing)."""
    global _config
    _config = None


def set_config(config: ServiceSettings) -> None:
    """Set the process configuration (for testing)."""
    global _config
    _config = config
