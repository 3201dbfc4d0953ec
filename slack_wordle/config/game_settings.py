"""
Game Configuration Constants Module

Game rules and the secret-word pool. The pool is loaded once from
words.json next to this module.
"""

import json
import os
from typing import List, Final

MAX_ATTEMPTS: Final[int] = 3
"""
Number of distinct guesses each player may record per game.
"""

WORD_POOL_FILE: Final[str] = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'words.json')


def load_word_pool(json_file_path: str = WORD_POOL_FILE) -> List[str]:
    """
    Load the secret-word pool from a JSON array of words.

    Returns:
        List[str]: Upper-cased words

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the JSON is malformed, empty or contains invalid words
    """
    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_pool = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word pool file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_file_path}: {e}")

    if not isinstance(word_pool, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_pool:
        raise ValueError("Word pool cannot be empty")

    uppercase_words = []
    for word in word_pool:
        if not isinstance(word, str) or not word.isalpha():
            raise ValueError(f"Word {word!r} contains non-alphabetic characters")
        uppercase_words.append(word.upper())

    return uppercase_words


WORD_POOL: Final[List[str]] = load_word_pool()


def validate_word_pool_integrity(word_pool: List[str] = WORD_POOL) -> bool:
    """
    Validates the secret-word pool.

    Checks that the pool is non-empty, that every word is alphabetic and
    upper-case, and that there are no duplicates.

    Returns:
        bool: True if the pool passes all checks

    Raises:
        ValueError: If any check fails
    """
    if not word_pool:
        raise ValueError("Word pool cannot be empty")

    for index, word in enumerate(word_pool):
        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(word_pool) != len(set(word_pool)):
        duplicates = sorted({word for word in word_pool if word_pool.count(word) > 1})
        raise ValueError(f"Duplicate words found in word pool: {duplicates}")

    return True
