import math
import random
import pytest

from autocompletor.binary_search import BinarySearchAutocomplete, first_index_of, last_index_of
from autocompletor.models import Term, prefix_order

WORDS = ["air", "bat", "bell", "boy"]
WEIGHTS = [3, 2, 4, 1]


@pytest.fixture
def ac():
    return BinarySearchAutocomplete(WORDS, WEIGHTS)


def _counting(cmp):
    calls = {"n": 0}
    def wrapped(a, b):
        calls["n"] += 1
        return cmp(a, b)
    return wrapped, calls


def test_literal_scenario(ac):
    assert ac.top_k_matches("b", 2) == ["bell", "bat"]
    assert ac.top_k_matches("a", 2) == ["air"]
    assert ac.top_match("b") == "bell"
    assert ac.top_k_matches("z", 3) == []
    assert ac.top_match("z") == ""


def test_terms_are_sorted_once(ac):
    assert [t.word for t in ac.terms] == ["air", "bat", "bell", "boy"]
    assert len(ac) == 4


def test_empty_prefix_spans_whole_vocabulary(ac):
    assert ac.top_k_matches("", 10) == ["bell", "air", "bat", "boy"]
    assert ac.top_match("") == "bell"


def test_prefix_is_case_insensitive(ac):
    assert ac.top_k_matches("BE", 5) == ["bell"]
    assert ac.top_match("B") == "bell"


def test_mixed_case_vocabulary_range_is_contiguous():
    ac = BinarySearchAutocomplete(["Bat", "apple", "bell", "Boy"], [5, 9, 3, 1])
    assert ac.top_k_matches("b", 5) == ["Bat", "bell", "Boy"]
    assert ac.top_match("b") == "Bat"


def test_k_zero_or_negative_is_empty(ac):
    assert ac.top_k_matches("b", 0) == []
    assert ac.top_k_matches("b", -3) == []


def test_k_larger_than_matches(ac):
    assert ac.top_k_matches("b", 50) == ["bell", "bat", "boy"]


def test_prefix_longer_than_every_word(ac):
    assert ac.top_k_matches("bellow", 3) == []
    assert ac.top_match("bellow") == ""


def test_truncated_weight_ties_keep_word_order():
    ac = BinarySearchAutocomplete(["cab", "caa", "cac"], [2.9, 2.1, 2.5])
    assert ac.top_k_matches("ca", 3) == ["caa", "cab", "cac"]
    assert ac.top_match("ca") == "caa"


def test_none_prefix_raises(ac):
    with pytest.raises(TypeError):
        ac.top_match(None)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        ac.top_k_matches(None, 2)  # type: ignore[arg-type]


def test_constructor_validates_inputs():
    with pytest.raises(TypeError):
        BinarySearchAutocomplete(None, [1])  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        BinarySearchAutocomplete(["a"], None)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        BinarySearchAutocomplete(["a", "b"], [1])
    with pytest.raises(ValueError):
        BinarySearchAutocomplete(["a", "b"], [1, -2])


def test_empty_vocabulary():
    ac = BinarySearchAutocomplete([], [])
    assert ac.top_k_matches("", 3) == []
    assert ac.top_match("a") == ""


def test_weight_of(ac):
    assert ac.weight_of("bell") == 4.0
    assert ac.weight_of("Bell") == 0.0
    assert ac.weight_of("be") == 0.0


def test_first_and_last_index_of_find_equivalence_class():
    a = [Term(w, 1) for w in ["aa", "ab", "ba", "bb", "bc", "ca"]]
    cmp = prefix_order(1)
    assert first_index_of(a, Term("b", 1), cmp) == 2
    assert last_index_of(a, Term("b", 1), cmp) == 4
    assert first_index_of(a, Term("a", 1), cmp) == 0
    assert last_index_of(a, Term("c", 1), cmp) == 5
    assert first_index_of(a, Term("d", 1), cmp) == -1
    assert last_index_of(a, Term("0", 1), cmp) == -1
    assert first_index_of([], Term("a", 1), cmp) == -1
    assert last_index_of([], Term("a", 1), cmp) == -1


def test_static_method_aliases():
    a = [Term("x", 1)]
    assert BinarySearchAutocomplete.first_index_of(a, Term("x", 1), prefix_order(1)) == 0
    assert BinarySearchAutocomplete.last_index_of(a, Term("x", 1), prefix_order(1)) == 0


def test_index_search_matches_linear_scan_and_call_bound():
    rng = random.Random(11)
    for n in range(0, 80):
        words = sorted("".join(rng.choice("abc") for _ in range(rng.randint(1, 4))) for _ in range(n))
        a = [Term(w, 1) for w in words]
        for key in ["a", "b", "c", "ab", "ca", "d", "0"]:
            order = prefix_order(len(key))
            k = Term(key, 1)
            hits = [i for i, t in enumerate(a) if order(t, k) == 0]
            bound = 1 + math.ceil(math.log2(n)) if n else 0

            cmp, calls = _counting(order)
            assert first_index_of(a, k, cmp) == (hits[0] if hits else -1)
            assert calls["n"] <= bound

            cmp, calls = _counting(order)
            assert last_index_of(a, k, cmp) == (hits[-1] if hits else -1)
            assert calls["n"] <= bound
