import copy
import random

from app.normalizers import (
    MathTextNormalizer,
    NormalizerPipeline,
    get_default_normalizer,
    normalize_tree,
)


def test_question_gets_latex_sibling():
    out = normalize_tree({"question": {"text": "a>0일 때, ³√a ÷ ⁴√a"}})
    assert out["question"]["text"] == "a>0일 때, ³√a ÷ ⁴√a"
    assert out["question"]["text_latex"] == "a>0일 때, \\sqrt[3]{a} \\div \\sqrt[4]{a}"


def test_choices_in_a_list_are_all_annotated():
    tree = {"choices": [{"id": "1", "text": "√a"}, {"id": "2", "text": "a²"}]}
    out = normalize_tree(tree)
    assert [c["text_latex"] for c in out["choices"]] == ["\\sqrt{a}", "a^{2}"]
    assert [c["id"] for c in out["choices"]] == ["1", "2"]


def test_empty_text_gets_null_latex():
    out = normalize_tree([{"text": ""}, {"text": "   "}])
    assert out == [{"text": "", "text_latex": None}, {"text": "   ", "text_latex": None}]


def test_non_string_text_is_walked_not_converted():
    out = normalize_tree({"text": {"text": "√a", "coordinates": {"x": 1}}})
    assert out["text_latex"] is None
    assert out["text"]["text_latex"] == "\\sqrt{a}"
    assert out["text"]["coordinates"] == {"x": 1}

    out = normalize_tree({"text": 3, "other": [None, True]})
    assert out == {"text": 3, "text_latex": None, "other": [None, True]}


def test_existing_text_latex_is_recomputed():
    out = normalize_tree({"text_latex": "stale", "text": "√a"})
    assert out == {"text_latex": "\\sqrt{a}", "text": "√a"}


def test_other_string_fields_are_untouched():
    tree = {"answer": "⁴√a", "solution": {"steps": ["a²"], "correct_answer": "√a"}}
    assert normalize_tree(tree) == tree


def test_primitives_pass_through():
    for v in [None, True, 0, 1.5, "√a", []]:
        assert normalize_tree(v) == v


def test_input_is_not_mutated():
    tree = {"problems": [{"question": {"text": "a²"}}]}
    before = copy.deepcopy(tree)
    out = normalize_tree(tree)
    assert tree == before
    assert out is not tree
    assert "text_latex" in out["problems"][0]["question"]


def test_key_order_is_preserved():
    out = normalize_tree({"id": "p1", "text": "a", "coordinates": {}})
    assert list(out.keys()) == ["id", "text", "coordinates", "text_latex"]


def test_pipeline_runs_stages_in_order():
    class Tag:
        def __init__(self, name):
            self.name = name

        def normalize(self, node):
            return node + [self.name]

    pipe = NormalizerPipeline([Tag("first"), Tag("second")])
    assert pipe.normalize([]) == ["first", "second"]


def test_default_normalizer_is_math_text():
    pipe = get_default_normalizer()
    assert isinstance(pipe, NormalizerPipeline)
    assert any(isinstance(s, MathTextNormalizer) for s in pipe.stages)


# --- Properties over random trees ---

_LEAVES = [None, True, False, 0, 7, 2.5, "", "a²", "³√(a)", "x/y", "plain"]
_KEYS = ["text", "id", "question", "choices", "answer", "steps", "metadata"]


def _random_tree(rng, depth=0):
    if depth > 4 or rng.random() < 0.3:
        return rng.choice(_LEAVES)
    if rng.random() < 0.5:
        return [_random_tree(rng, depth + 1) for _ in range(rng.randint(0, 4))]
    return {k: _random_tree(rng, depth + 1) for k in rng.sample(_KEYS, rng.randint(0, 4))}


def _strip_latex(node):
    if isinstance(node, list):
        return [_strip_latex(n) for n in node]
    if isinstance(node, dict):
        return {k: _strip_latex(v) for k, v in node.items() if k != "text_latex"}
    return node


def _check_additive(before, after):
    if isinstance(before, list):
        assert isinstance(after, list) and len(after) == len(before)
        for b, a in zip(before, after):
            _check_additive(b, a)
    elif isinstance(before, dict):
        assert set(before) <= set(after)
        if "text" in before:
            assert "text_latex" in after
        for k, v in before.items():
            _check_additive(v, after[k])
    else:
        assert before == after


def test_random_trees_only_gain_text_latex():
    rng = random.Random(7)
    for _ in range(300):
        tree = _random_tree(rng)
        out = normalize_tree(tree)
        _check_additive(tree, out)
        assert _strip_latex(out) == tree


def _has_text_key(node):
    if isinstance(node, list):
        return any(_has_text_key(n) for n in node)
    if isinstance(node, dict):
        return "text" in node or any(_has_text_key(v) for v in node.values())
    return False


def test_trees_without_text_keys_are_unchanged():
    rng = random.Random(11)
    seen = 0
    for _ in range(300):
        tree = _random_tree(rng)
        if _has_text_key(tree):
            continue
        seen += 1
        assert normalize_tree(tree) == tree
    assert seen > 0
