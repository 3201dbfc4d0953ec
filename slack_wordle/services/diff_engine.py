"""
Diff Engine

Scores a guess against a target word, letter by letter.
"""

from collections import Counter
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple
from ..models.game import LetterStatus


def build_letter_positions(word: str) -> Mapping[str, Tuple[int, ...]]:
    """
    Builds the read-only letter -> positions index of a word.

    Args:
        word: Word to index (upper-cased before indexing)

    Returns:
        Mapping of each letter to the ascending positions where it occurs
    """
    positions: Dict[str, List[int]] = {}
    for index, letter in enumerate(word.upper()):
        positions.setdefault(letter, []).append(index)
    return MappingProxyType({letter: tuple(indexes) for letter, indexes in positions.items()})


def evaluate(guess: str, target: str) -> List[Tuple[str, LetterStatus]]:
    """
    Implements the two-pass Wordle letter evaluation.

    Exact matches are claimed first. Remaining occurrences of each letter are
    then handed out as PARTIAL in ascending guess index order, so with a single
    spare occurrence only the leftmost unmatched copy of that letter gets it.

    Args:
        guess: Guessed word
        target: Word being guessed, same length as ``guess``

    Returns:
        One (letter, status) pair per guess letter, in guess order

    Raises:
        ValueError: If guess and target lengths differ
    """
    guess = guess.upper()
    target = target.upper()
    if len(guess) != len(target):
        raise ValueError(
            f"Guess length {len(guess)} does not match target length {len(target)}"
        )

    statuses: List[Optional[LetterStatus]] = [None] * len(guess)
    remaining = Counter(target)

    # First pass: exact position matches
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            statuses[i] = LetterStatus.FULL
            remaining[g] -= 1

    # Second pass: misplaced letters while unclaimed occurrences remain
    for i, g in enumerate(guess):
        if statuses[i] is not None:
            continue
        if remaining[g] > 0:
            statuses[i] = LetterStatus.PARTIAL
            remaining[g] -= 1
        else:
            statuses[i] = LetterStatus.NONE

    return [(letter, status) for letter, status in zip(guess, statuses)]
