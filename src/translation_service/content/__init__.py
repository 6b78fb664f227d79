"""Content translation and quality scoring."""

from .scorer import QualityScorer, score
from .translator import ContentTranslator, MultiLanguageContent

__all__ = ["ContentTranslator", "MultiLanguageContent", "QualityScorer", "score"]
