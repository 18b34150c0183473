from .pipeline import get_default_normalizer, normalize_tree, NormalizerPipeline
from .rules import MathTextNormalizer, NormalizationRule, RULES, normalize_math_text
from .types import JsonValue, TEXT_KEY, LATEX_KEY
from .base import Normalizer

__all__ = [
    "get_default_normalizer",
    "normalize_tree",
    "NormalizerPipeline",
    "MathTextNormalizer",
    "NormalizationRule",
    "RULES",
    "normalize_math_text",
    "JsonValue",
    "TEXT_KEY",
    "LATEX_KEY",
    "Normalizer",
]
