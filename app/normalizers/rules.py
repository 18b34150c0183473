from copy import deepcopy
from dataclasses import dataclass
import re
from typing import Callable, Tuple
from .base import Normalizer
from .types import JsonValue, TEXT_KEY, LATEX_KEY

class MathTextNormalizer(Normalizer):
    """
    Rule-based normalizer for model output:
    walks an arbitrary JSON tree and, next to every "text" string,
    stores a LaTeX-flavoured copy under "text_latex".
    The original "text" is never touched.
    """
    def normalize(self, node: JsonValue) -> JsonValue:
        out = deepcopy(node)  # work on a copy so we don’t mutate the input
        _annotate(out)
        return out


def _annotate(node: JsonValue) -> None:
    """Add text_latex siblings in place, recursing through lists and dicts."""
    if isinstance(node, list):
        for item in node:
            _annotate(item)
    elif isinstance(node, dict):
        # snapshot: we add keys while iterating
        for key in list(node.keys()):
            if key == LATEX_KEY and TEXT_KEY in node:
                continue  # recomputed from "text" below
            value = node[key]
            if key == TEXT_KEY:
                if isinstance(value, str):
                    node[LATEX_KEY] = normalize_math_text(value) or None
                    continue
                # odd shape from the model: no latex, but still walk it
                node[LATEX_KEY] = None
            _annotate(value)


# --- Rewrite rules (order matters: each rule sees the previous output) ---

@dataclass(frozen=True)
class NormalizationRule:
    name: str
    pattern: "re.Pattern[str]"
    replace: Callable[["re.Match[str]"], str]

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replace, text)


SUPERSCRIPT_DIGITS = {
    "⁰": "0", "¹": "1", "²": "2", "³": "3", "⁴": "4",
    "⁵": "5", "⁶": "6", "⁷": "7", "⁸": "8", "⁹": "9",
}
_SUP = "".join(SUPERSCRIPT_DIGITS)

# Root index: one of ²..⁹, or a multi-digit run without a leading ⁰ (¹²√a).
# The multi-digit form needs no base in front, so a²³√b stays a^{2}\sqrt[3]{b}.
_INDEX = f"(?P<index>(?<![A-Za-z0-9])[{_SUP[1:]}][{_SUP}]+|[{_SUP[2:]}])"


def _digits(sup: str) -> str:
    """Map a run of superscript digits to ASCII digits, in order."""
    return "".join(SUPERSCRIPT_DIGITS[c] for c in sup)


def _indexed_root(m: "re.Match[str]") -> str:
    return "\\sqrt[%d]{%s}" % (int(_digits(m.group("index"))), m.group("arg"))


def _root(m: "re.Match[str]") -> str:
    return "\\sqrt{%s}" % m.group("arg")


def _exponent(m: "re.Match[str]") -> str:
    return "%s^{%s}" % (m.group("base"), _digits(m.group("sup")))


def _fraction(m: "re.Match[str]") -> str:
    return "\\frac{%s}{%s}" % (m.group("num"), m.group("den"))


RULES: Tuple[NormalizationRule, ...] = (
    NormalizationRule("whitespace", re.compile(r"\s+"), lambda m: " "),
    # Blanks after the operator fold into the emitted space. An operator at
    # the very end keeps that space, which a second pass would trim.
    NormalizationRule("times", re.compile(r"×\s*"), lambda m: "\\cdot "),
    NormalizationRule("divide", re.compile(r"÷\s*"), lambda m: "\\div "),
    # indexed roots must run before plain ones, or ³√(a) leaves a stray ³
    NormalizationRule("indexed_root_group", re.compile(_INDEX + r"√\s*\((?P<arg>.*?)\)"), _indexed_root),
    NormalizationRule("indexed_root", re.compile(_INDEX + r"√(?P<arg>[a-zA-Z0-9]+)"), _indexed_root),
    NormalizationRule("root_group", re.compile(r"√\s*\((?P<arg>.*?)\)"), _root),
    NormalizationRule("root", re.compile(r"√(?P<arg>[a-zA-Z0-9]+)"), _root),
    NormalizationRule("exponent", re.compile(f"(?P<base>[a-zA-Z0-9])(?P<sup>[{_SUP}]+)"), _exponent),
    # Last on purpose. It can also wrap LaTeX emitted above
    # (\sqrt{a}/\sqrt{b} -> \sqrt{\frac{a}}{\sqrt{b}}); callers rely on that shape.
    NormalizationRule(
        "fraction",
        re.compile(r"(?P<num>[a-zA-Z0-9}\\]+)/(?P<den>[a-zA-Z0-9\\{]+)"),
        _fraction,
    ),
)


def normalize_math_text(value) -> str:
    """
    Rewrite OCR-style math (³√a, x², ×, ÷, a/b) into LaTeX-ish text.
    Total: None, blanks and non-strings give "".
    """
    if not isinstance(value, str) or not value.strip():
        return ""
    text = value.strip()
    for rule in RULES:
        text = rule.apply(text)
    return text
