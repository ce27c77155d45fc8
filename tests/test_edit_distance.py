"""Tests for word-level edit distance alignment."""
import pytest

from dictation.alignment.edit_distance import SequenceAligner, align_sequences, alignment_cost
from dictation.config import AlignmentCosts
from dictation.models.aligned_word import AlignedWord, AlignmentOp

M, S, I, D = AlignmentOp.MATCH, AlignmentOp.SUBSTITUTE, AlignmentOp.INSERT, AlignmentOp.DELETE


def ops_of(alignment):
    return [a.op for a in alignment]


def test_identical_sequences_match():
    words = ["der", "hund", "läuft", "schnell"]
    alignment = align_sequences(words, words)
    assert ops_of(alignment) == [M, M, M, M]
    assert [a.user_word for a in alignment] == words
    assert SequenceAligner().distance(words, words) == 0


def test_equal_length_mismatch_is_all_substitutions():
    alignment = align_sequences(["eins", "zwei", "drei"], ["vier", "fünf", "sechs"])
    assert ops_of(alignment) == [S, S, S]
    assert SequenceAligner().distance(["eins", "zwei", "drei"], ["vier", "fünf", "sechs"]) == 9


def test_single_typo_is_substitution():
    alignment = align_sequences(["der", "hund", "läuft"], ["der", "hund", "lauft"])
    assert alignment[-1] == AlignedWord(S, "läuft", "lauft")


def test_missing_word_is_delete():
    alignment = align_sequences(["ich", "habe", "keine", "zeit"], ["ich", "habe", "zeit"])
    assert ops_of(alignment) == [M, M, D, M]
    assert alignment[2] == AlignedWord(D, "keine", None)


def test_extra_word_is_insert():
    alignment = align_sequences(["ich", "habe", "zeit"], ["ich", "habe", "viel", "zeit"])
    assert ops_of(alignment) == [M, M, I, M]
    assert alignment[2] == AlignedWord(I, None, "viel")


def test_empty_reference_inserts_everything():
    assert ops_of(align_sequences([], ["hallo", "welt"])) == [I, I]


def test_empty_candidate_deletes_everything():
    alignment = align_sequences(["hallo", "welt"], [])
    assert ops_of(alignment) == [D, D]
    assert [a.ref_word for a in alignment] == ["hallo", "welt"]


def test_both_empty():
    assert align_sequences([], []) == []


def test_alignment_length():
    ref = ["a", "b", "c"]
    cand = ["x", "a", "c", "y"]
    alignment = align_sequences(ref, cand)
    inserted = sum(1 for a in alignment if a.op is I)
    assert len(alignment) == len(ref) + inserted


def test_tie_prefers_delete_over_insert():
    # [I b, M a, D b] and [D a, M b, I a] both cost 4; backtracking from the
    # end takes the delete first.
    alignment = align_sequences(["a", "b"], ["b", "a"])
    assert alignment == [
        AlignedWord(I, None, "b"),
        AlignedWord(M, "a", "a"),
        AlignedWord(D, "b", None),
    ]


def test_alternate_costs():
    costs = AlignmentCosts(match=0, substitute=5, insert=2, delete=2)
    alignment = align_sequences(["rennt"], ["läuft"], costs)
    assert alignment == [AlignedWord(I, None, "läuft"), AlignedWord(D, "rennt", None)]
    assert ops_of(align_sequences(["rennt"], ["läuft"])) == [S]


def test_cost_table_edges():
    table = SequenceAligner(AlignmentCosts(delete=4, insert=1)).cost_table(["a", "b"], ["a", "b", "c"])
    assert [row[0] for row in table] == [0, 4, 8]
    assert table[0] == [0, 1, 2, 3]


@pytest.mark.parametrize(
    "ref, cand",
    [
        (["der", "hund", "läuft", "schnell"], ["der", "hund", "rennt", "schnell"]),
        (["a", "b", "c", "d"], ["d", "c", "b", "a"]),
        (["ich", "bin", "müde"], ["bin", "ich", "sehr", "müde"]),
        (["ein", "zwei"], ["drei", "vier", "fünf", "sechs", "sieben"]),
        ([], ["x"]),
        (["x", "y", "z"], []),
    ],
)
@pytest.mark.parametrize(
    "costs",
    [AlignmentCosts(), AlignmentCosts(match=0, substitute=5, insert=1, delete=3)],
)
def test_alignment_cost_equals_table_value(ref, cand, costs):
    aligner = SequenceAligner(costs)
    assert alignment_cost(aligner.align(ref, cand), costs) == aligner.distance(ref, cand)
