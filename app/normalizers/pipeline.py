from copy import deepcopy
from typing import List
from .base import Normalizer
from .types import JsonValue
from .rules import MathTextNormalizer

class NormalizerPipeline(Normalizer):
    """
    A chain of normalizers.
    Each stage takes the output of the previous stage,
    so extra clean-up passes over the model output can be slotted in later.
    """
    def __init__(self, stages: List[Normalizer]):
        self.stages = stages

    def normalize(self, node: JsonValue) -> JsonValue:
        out = deepcopy(node)  # Don't mutate the input
        for stage in self.stages:
            out = stage.normalize(out)
        return out

def get_default_normalizer() -> Normalizer:
    """Factory for the default pipeline: LaTeX annotation of "text" fields."""
    return NormalizerPipeline([MathTextNormalizer()])

def normalize_tree(node: JsonValue) -> JsonValue:
    """Return a copy of `node` with a "text_latex" next to every "text"."""
    return get_default_normalizer().normalize(node)
