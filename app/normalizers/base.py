# app/normalizers/base.py
from typing import Protocol
from .types import JsonValue

class Normalizer(Protocol):
    def normalize(self, node: JsonValue) -> JsonValue:
        """Return a NEW normalized tree. Do not mutate `node`."""
        ...
