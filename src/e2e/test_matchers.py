import pytest
from textmapper.models import SearchAnchor
from textmapper.matchers import (
    find_exact,
    find_local_alignment,
    find_by_edit_distance,
    find_by_lcs,
    find_by_word_overlap,
    find_without_markup,
    iter_candidate_lines,
    width_ladder,
)
from textmapper.matchers.word_overlap import required_words


A0 = SearchAnchor(0, 0)


# ---------- helpers ----------

def test_candidate_lines_respect_window_and_anchor_column():
    lines = ["l0", "l1", "l2", "l3"]
    got = list(iter_candidate_lines(lines, SearchAnchor(1, 1), window=2))
    assert got == [(1, "l1", 1), (2, "l2", 0)]
    assert len(list(iter_candidate_lines(lines, A0))) == 4


def test_width_ladder():
    assert list(width_ladder(7, 2, 5)) == [7, 12]
    assert list(width_ladder(10, 2, 5)) == [10, 15, 20]


def test_required_words_is_exact_ceiling():
    assert required_words(10) == 7
    assert required_words(4) == 3
    assert required_words(1) == 1


# ---------- exact ----------

def test_exact_maps_back_through_collapsed_whitespace():
    lines = ["first line", "  second   line here"]
    hit = find_exact("line here", lines, A0)
    assert hit is not None
    assert (hit.line, hit.column, hit.confidence) == (1, 11, 1.0)
    assert lines[1][hit.column:] == "line here"


def test_exact_honours_anchor_column():
    hit = find_exact("word", ["word word"], SearchAnchor(0, 1))
    assert hit is not None and hit.column == 5


def test_exact_never_looks_above_the_anchor():
    assert find_exact("target", ["target", "x", "y"], SearchAnchor(1, 0)) is None


# ---------- local alignment ----------

def test_alignment_tolerates_transposed_letters():
    lines = ["Some intro text", "The quikc brown fox jumps"]
    hit = find_local_alignment("The quick brown fox jumps", lines, A0)
    assert hit is not None
    assert (hit.line, hit.column) == (1, 0)
    assert hit.confidence == pytest.approx(46 / 50)
    assert hit.matcher == "alignment"


def test_alignment_below_floor_reports_nothing():
    assert find_local_alignment("completely different words", ["xyzzy plugh quux frob nitz"], A0) is None


def test_alignment_is_windowed():
    lines = [""] * 6 + ["The quick brown fox"]
    assert find_local_alignment("The quick brown fox", lines, A0) is None
    assert find_local_alignment("The quick brown fox", lines, SearchAnchor(3, 0)) is not None


# ---------- edit distance ----------

def test_edit_distance_single_swap():
    hit = find_by_edit_distance("receive", ["I recieve mail"], SearchAnchor(0, 2))
    assert hit is not None
    assert hit.confidence == pytest.approx(1 - 2 / 7)
    # the query head is not in the slice, so the start column is used
    assert (hit.line, hit.column) == (0, 2)


def test_edit_distance_pins_column_on_query_head():
    hit = find_by_edit_distance("brown fox jumpz", ["The brown fox jumps"], SearchAnchor(0, 3))
    assert hit is not None
    assert hit.confidence == pytest.approx(1 - 1 / 15)
    assert hit.column == 4


def test_edit_distance_rejects_dissimilar_text():
    assert find_by_edit_distance("receive", ["zzzzzzzzzz"], A0) is None


# ---------- LCS ----------

def test_lcs_scores_subsequence_ratio():
    hit = find_by_lcs("abcdxfghij", ["xx abcdefghij"], SearchAnchor(0, 3))
    assert hit is not None
    assert hit.confidence == pytest.approx(0.9)
    assert hit.column == 3
    assert hit.matcher == "lcs"


def test_lcs_rejects_low_ratio():
    assert find_by_lcs("abcdefghij", ["aXbXcXdXeX"], A0) is None


# ---------- word overlap ----------

def test_word_overlap_positions_on_earliest_word():
    lines = ["alpha beta", "xx delta zeta gamma"]
    hit = find_by_word_overlap("delta zeta gamma omega", lines, A0)
    assert hit is not None
    assert (hit.line, hit.column, hit.confidence) == (1, 3, 0.6)


def test_word_overlap_needs_enough_words():
    assert find_by_word_overlap("delta zeta gamma omega", ["delta zeta only"], A0) is None


# ---------- markup stripped ----------

def test_stripped_finds_text_hidden_by_markup():
    hit = find_without_markup("The quick brown fox", ["The \\emph{quick} brown fox"], A0)
    assert hit is not None
    assert (hit.line, hit.column, hit.confidence) == (0, 0, 0.5)
    assert hit.matcher == "stripped"


def test_stripped_uses_proportional_column():
    hit = find_without_markup("brown", ["\\emph{quick} brown"], A0)
    assert hit is not None
    assert hit.column == 9


@pytest.mark.parametrize("finder", [
    find_exact,
    find_local_alignment,
    find_by_edit_distance,
    find_by_lcs,
    find_by_word_overlap,
    find_without_markup,
])
def test_every_matcher_handles_empty_query(finder):
    assert finder("", ["anything at all"], A0) is None


# ---------- width ladder cost ----------

def _count_calls(monkeypatch, module, name):
    seen = []
    real = getattr(module, name)

    def wrapper(a, b):
        seen.append(b)
        return real(a, b)

    monkeypatch.setattr(module, name, wrapper)
    return seen


def test_edit_distance_scores_each_distinct_slice_once(monkeypatch):
    import textmapper.matchers.edit_distance as ED
    seen = _count_calls(monkeypatch, ED, "similarity")
    assert find_by_edit_distance("x" * 100, ["y" * 120], A0) is None
    assert len(seen) == len(set(seen)) == 5


def test_lcs_scores_each_distinct_slice_once(monkeypatch):
    import textmapper.matchers.subsequence as SUB
    seen = _count_calls(monkeypatch, SUB, "lcs_ratio")
    assert find_by_lcs("x" * 100, ["y" * 120], A0) is None
    assert len(seen) == len(set(seen)) == 5
