"""
Game Configuration Constants Module

This module defines all game rule constants. The word table is loaded once
from words.json and treated as read-only; each game copies it into its own
WordBank.
"""

import json
import os
from typing import Dict, Final, List

# Core Game Configuration Constants
START_WORD_LENGTH: Final[int] = 4
"""
Length of the target words at the start of every game.
"""

POINTS_PER_LENGTH_STEP: Final[int] = 2
"""
Word length grows by one letter every time the score reaches a multiple of this.
"""

DEFAULT_TIME_LIMIT: Final[int] = 60
"""
Time budget of a game in seconds when no TIME_LIMIT_SECONDS is configured.
"""


def _load_word_list() -> Dict[int, List[str]]:
    """
    Load the word table from words.json.

    Returns:
        Dict[int, List[str]]: Lowercase words keyed by word length

    Raises:
        FileNotFoundError: If words.json file is not found
        ValueError: If the table is malformed or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'words.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            raw_table = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in words.json: {e}") from e

    if not isinstance(raw_table, dict):
        raise ValueError("JSON file must contain an object keyed by word length")

    if not raw_table:
        raise ValueError("Word list cannot be empty")

    word_table = {}
    for key, words in raw_table.items():
        length = int(key)
        lowercase_words = [word.lower() for word in words]

        for word in lowercase_words:
            if len(word) != length:
                raise ValueError(f"Word '{word}' is not {length} characters long")
            if not word.isalpha():
                raise ValueError(f"Word '{word}' contains non-alphabetic characters")

        word_table[length] = lowercase_words

    return word_table


# Curated word table loaded from JSON file
WORD_LIST: Final[Dict[int, List[str]]] = _load_word_list()


def validate_word_list_integrity(word_table: Dict[int, List[str]] = None) -> bool:
    """
    Validates the integrity and consistency of a word table.

    This function performs validation to ensure:
    1. Length validation: every word matches the length it is filed under
    2. Character validation: only alphabetic characters allowed
    3. Format validation: consistent lowercase formatting
    4. Uniqueness validation: no duplicate entries within a length

    Returns:
        bool: True if the table passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if word_table is None:
        word_table = WORD_LIST

    if not word_table:
        raise ValueError("Word list cannot be empty")

    for length, words in word_table.items():
        for index, word in enumerate(words):
            if len(word) != length:
                raise ValueError(
                    f"Word at index {index} '{word}' is not {length} characters long"
                )

            if not word.isalpha():
                raise ValueError(
                    f"Word at index {index} '{word}' contains non-alphabetic characters"
                )

            if not word.islower():
                raise ValueError(
                    f"Word at index {index} '{word}' is not in lowercase format"
                )

        if len(words) != len(set(words)):
            duplicates = sorted({word for word in words if words.count(word) > 1})
            raise ValueError(f"Duplicate words found for length {length}: {duplicates}")

    return True


def get_word_statistics(word_table: Dict[int, List[str]] = None) -> dict:
    """
    Summarizes the word table.

    Returns:
        dict: Statistical information including:
            - total_words: Number of words across all lengths
            - words_per_length: Candidate count for each length
            - max_rounds: Upper bound on correct guesses before the bank runs dry
            - most_common_letters: Five most frequent letters
    """
    if word_table is None:
        word_table = WORD_LIST

    if not word_table:
        return {"error": "Word list is empty"}

    letter_frequency = {}
    for words in word_table.values():
        for word in words:
            for char in word:
                letter_frequency[char] = letter_frequency.get(char, 0) + 1

    # Each length is played for POINTS_PER_LENGTH_STEP correct guesses at most
    max_rounds = 0
    length = START_WORD_LENGTH
    while length in word_table:
        available = len(word_table[length])
        max_rounds += min(available, POINTS_PER_LENGTH_STEP)
        if available < POINTS_PER_LENGTH_STEP:
            break
        length += 1

    return {
        "total_words": sum(len(words) for words in word_table.values()),
        "words_per_length": {str(length): len(words) for length, words in sorted(word_table.items())},
        "max_rounds": max_rounds,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")

        stats = get_word_statistics()
        print(f" Game statistics: {stats}")

        print(" All configuration validation checks passed")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
