import itertools

import pytest

from slack_wordle.models.game import LetterStatus
from slack_wordle.services.diff_engine import build_letter_positions, evaluate

F, P, N = LetterStatus.FULL, LetterStatus.PARTIAL, LetterStatus.NONE


def statuses(guess, target):
    return [status for _, status in evaluate(guess, target)]


@pytest.mark.parametrize("guess,target,expected", [
    ("AAAAB", "READA", [P, N, F, N, N]),
    ("DRAMA", "READY", [P, P, F, N, N]),
    ("HELLO", "NOVEL", [N, P, P, N, P]),
    ("SPEED", "ABIDE", [N, N, P, N, P]),
    ("LEVEL", "LEVEL", [F, F, F, F, F]),
    ("ALLEY", "LLAMA", [P, F, P, N, N]),
    ("QUICK", "NOVEL", [N, N, N, N, N]),
])
def test_evaluate_golden(guess, target, expected):
    assert statuses(guess, target) == expected


def test_evaluate_keeps_guess_letters_in_order():
    assert evaluate("DRAMA", "READY") == [
        ("D", P), ("R", P), ("A", F), ("M", N), ("A", N)
    ]


def test_evaluate_is_case_insensitive():
    assert evaluate("ready", "READY") == [(letter, F) for letter in "READY"]
    assert evaluate("DRAMA", "ready") == evaluate("drama", "READY")


def test_partial_goes_to_lowest_unmatched_index():
    # one spare E: only the first unmatched E is marked present
    assert statuses("EEXEE", "ABECD") == [P, N, N, N, N]


def test_evaluate_rejects_unequal_lengths():
    with pytest.raises(ValueError):
        evaluate("HELLO", "HI")


def test_matches_never_exceed_target_occurrences():
    words = ["READA", "AAAAB", "LEVEL", "EERIE", "NOVEL", "LLAMA", "ABBEY", "BOBBY"]
    for guess, target in itertools.product(words, repeat=2):
        result = evaluate(guess, target)
        assert len(result) == len(guess)
        for letter in set(guess):
            matched = sum(1 for l, s in result if l == letter and s != N)
            assert matched <= target.count(letter)


def test_evaluate_is_deterministic():
    assert evaluate("AAAAB", "READA") == evaluate("AAAAB", "READA")


def test_build_letter_positions():
    positions = build_letter_positions("reada")
    assert dict(positions) == {"R": (0,), "E": (1,), "A": (2, 4), "D": (3,)}


def test_letter_positions_are_read_only():
    positions = build_letter_positions("READA")
    with pytest.raises(TypeError):
        positions["Z"] = (0,)
