import random
import time

import pytest

from app.normalizers import RULES, normalize_math_text


@pytest.mark.parametrize("raw, expected", [
    ("a²", "a^{2}"),
    ("³√(a)", "\\sqrt[3]{a}"),
    ("√a", "\\sqrt{a}"),
    ("a×b÷c", "a\\cdot b\\div c"),
    ("a/b", "\\frac{a}{b}"),
])
def test_basic_rewrites(raw, expected):
    assert normalize_math_text(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "   ", "\n\t ", 5, ["√a"], {"text": "a²"}])
def test_empty_and_non_string_input_gives_empty_string(raw):
    assert normalize_math_text(raw) == ""


def test_plain_text_passes_through():
    for s in ["다음 중 옳은 것은?", "Find the value of x.", "a>0, b<1", "(1) 2 (3)"]:
        assert normalize_math_text(s) == s


def test_whitespace_is_collapsed_and_trimmed():
    assert normalize_math_text("  x \t+\n\n y  ") == "x + y"


def test_operator_absorbs_following_space():
    assert normalize_math_text("a × b") == "a \\cdot b"
    assert normalize_math_text("6   ÷  2") == "6 \\div 2"


def test_operator_at_end_keeps_trailing_space():
    assert normalize_math_text("a÷") == "a\\div "
    # the next pass trims it: the one slash-free case that is not idempotent
    assert normalize_math_text("a\\div ") == "a\\div"


def test_indexed_root_with_group_allows_space_before_paren():
    assert normalize_math_text("⁴√ (x+1)") == "\\sqrt[4]{x+1}"


def test_indexed_root_with_identifier():
    assert normalize_math_text("³√a") == "\\sqrt[3]{a}"
    assert normalize_math_text("⁹√x2") == "\\sqrt[9]{x2}"


def test_multi_digit_root_index():
    assert normalize_math_text("¹²√a") == "\\sqrt[12]{a}"


def test_superscripts_after_a_base_keep_their_exponent():
    # only the last digit can be the index when a base sits in front
    assert normalize_math_text("a²³√(b)") == "a^{2}\\sqrt[3]{b}"
    assert normalize_math_text("x²⁴√y") == "x^{2}\\sqrt[4]{y}"
    assert normalize_math_text("(x)²³√y") == "(x)\\sqrt[23]{y}"


def test_lone_superscript_one_is_not_an_index():
    # only ²..⁹ or a multi-digit run count as an index
    assert normalize_math_text("¹√a") == "¹\\sqrt{a}"


def test_plain_root_with_group():
    assert normalize_math_text("√(x+1) + 2") == "\\sqrt{x+1} + 2"


def test_root_group_stops_at_first_closing_paren():
    assert normalize_math_text("√(a+(b)c)") == "\\sqrt{a+(b}c)"


def test_unclosed_root_group_is_left_alone():
    assert normalize_math_text("√(a+b") == "√(a+b"


def test_superscript_run_is_one_exponent():
    assert normalize_math_text("a²³") == "a^{23}"
    assert normalize_math_text("x² + y¹⁰") == "x^{2} + y^{10}"


def test_superscript_without_base_is_kept():
    assert normalize_math_text("(a+b)²") == "(a+b)²"


def test_fraction_of_digits():
    assert normalize_math_text("1/2 + 3/4") == "\\frac{1}{2} + \\frac{3}{4}"


def test_fraction_wraps_earlier_latex():
    # known over-match: the fraction rule runs last and sees \sqrt{..}
    assert normalize_math_text("√a/√b") == "\\sqrt{\\frac{a}}{\\sqrt{b}}"


def test_indexed_roots_go_before_plain_roots():
    names = [r.name for r in RULES]
    assert names.index("indexed_root_group") < names.index("root_group")
    assert names.index("indexed_root") < names.index("root")
    assert names[0] == "whitespace"
    assert names[-1] == "fraction"


def test_exam_question():
    raw = "a>0일 때, ³√a ÷ ⁴√a"
    assert normalize_math_text(raw) == "a>0일 때, \\sqrt[3]{a} \\div \\sqrt[4]{a}"


def test_idempotent_without_slashes():
    rng = random.Random(2024)
    # no "/" (fraction re-match) and no "(" (nested √( groups re-match)
    alphabet = "abx1 ²³⁴¹⁰√×÷{}\\\t가"
    checked = 0
    for _ in range(2000):
        s = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 40)))
        once = normalize_math_text(s)
        if once.endswith(("\\cdot ", "\\div ")):
            continue
        assert normalize_math_text(once) == once, s
        checked += 1
    assert checked > 1000


def test_idempotent_on_exam_text():
    for raw in ["a>0일 때, ³√a ÷ ⁴√a", "³√(a) × √b", "√(x+1)", "  spaced   out  "]:
        once = normalize_math_text(raw)
        assert normalize_math_text(once) == once


def test_nested_root_groups_are_not_idempotent():
    once = normalize_math_text("√(√(a))")
    assert once == "\\sqrt{√(a})"
    assert normalize_math_text(once) == "\\sqrt{\\sqrt{a}}"


def test_not_idempotent_with_slashes():
    once = normalize_math_text("a/b/c")
    assert once == "\\frac{a}{b}/c"
    assert normalize_math_text(once) != once


def test_fuzz_never_raises_and_stays_fast():
    rng = random.Random(1234)
    alphabet = "ab1 ²³⁴¹⁰√()/×÷{}\\\t가"
    start = time.perf_counter()
    for _ in range(500):
        s = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 300)))
        assert isinstance(normalize_math_text(s), str)
    # long runs with no closing match: the worst cases for these patterns
    for s in ["√(" * 1000, "a" * 2000, "²" * 2000, "}" * 2000 + "/", " " * 2000 + "x"]:
        assert isinstance(normalize_math_text(s), str)
    assert time.perf_counter() - start < 5
