"""
Multi-language content translation service.

Translates canonical-language content fields into a configurable set of
target languages, tracks per-field/per-language outcomes, and exposes
task progress to polling clients.

Exports:
    - TranslationService: Facade wiring provider, translator, store and worker
    - SupportedLanguage: Closed set of supported language codes
    - TranslationStatus: Task and result status enum
    - TranslationTask: Task record model
    - TranslationResult: Per-pair result model
"""

from .languages import SupportedLanguage
from .service import TranslationService
from .tasks.models import TranslationResult, TranslationStatus, TranslationTask

__all__ = [
    "TranslationService",
    "SupportedLanguage",
    "TranslationStatus",
    "TranslationTask",
    "TranslationResult",
]

__version__ = "0.1.0"
