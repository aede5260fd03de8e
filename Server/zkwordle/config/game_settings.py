"""
Game Configuration Constants Module

This module defines the game constants shared by the proof scheme,
the evaluator and the word source. The word list is loaded once
from wordles.json and validated on import.
"""

import json
import os
from typing import List, Final

WORD_LENGTH: Final[int] = 5
"""
Length of every secret word and every accepted guess.
"""

ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
"""
Candidate letters tried when recovering a letter from a position hash.
"""

MAX_ROUNDS: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
"""


def is_alphabet_word(word: str) -> bool:
    """
    True if the uppercased word is non-empty and made only of ALPHABET letters.

    Accented letters and other scripts that str.isalpha() accepts are
    rejected; position hashes are only recovered over ALPHABET.
    """
    if not isinstance(word, str) or not word:
        return False
    return all(char in ALPHABET for char in word.upper())


def is_game_word(word: str, length: int = WORD_LENGTH) -> bool:
    """
    True if word is a playable word: ALPHABET letters only and exactly
    `length` characters once uppercased.

    The length is checked after uppercasing because str.upper() can grow a
    word ('straß' becomes 'STRASS').
    """
    return is_alphabet_word(word) and len(word.upper()) == length


# Load word list from JSON file
def _load_word_list() -> List[str]:
    """
    Load word list from wordles.json file.

    Returns:
        List[str]: List of uppercase 5-letter words

    Raises:
        FileNotFoundError: If wordles.json file is not found
        ValueError: If word list is empty, malformed or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'wordles.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in wordles.json: {e}")

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    if not all(isinstance(word, str) for word in word_list):
        raise ValueError("Every entry in the word list must be a string")

    # Convert all words to uppercase and validate
    uppercase_words = [word.upper() for word in word_list]

    for word in uppercase_words:
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word '{word}' is not {WORD_LENGTH} characters long")
        if not is_alphabet_word(word):
            raise ValueError(f"Word '{word}' contains letters outside A-Z")

    return uppercase_words


# Curated Word Database loaded from JSON file
WORD_LIST: Final[List[str]] = _load_word_list()


def validate_word_list_integrity(word_list: List[str] = None) -> bool:
    """
    Validates the integrity and consistency of the word database.

    Checks that every word has the game's length, is alphabetic and
    uppercase, and that there are no duplicate entries.

    Args:
        word_list: Words to check, defaults to WORD_LIST

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    words = WORD_LIST if word_list is None else word_list

    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if not isinstance(word, str) or len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not is_alphabet_word(word):
            raise ValueError(f"Word at index {index} '{word}' contains letters outside A-Z")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics() -> dict:
    """
    Analyzes word list and returns statistical information.

    Returns:
        dict: total_words, avg_vowel_count, letter_frequency and the
        five most common letters
    """
    if not WORD_LIST:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in WORD_LIST)

    letter_frequency = {}
    for word in WORD_LIST:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(WORD_LIST),
        "avg_vowel_count": round(total_vowels / len(WORD_LIST), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
