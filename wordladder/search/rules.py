from typing import Sequence
from wordladder.errors import EmptyWordError, LengthMismatchError, NotAWordError
from wordladder.words.bank import Dictionary

def normalize_word(text: str) -> str:
    return text.strip().lower()

def validate_endpoints(dictionary: Dictionary, source: str, destination: str) -> None:
    """
    Checks that a ladder can be attempted between source and destination.
    """
    for label, word in (("source", source), ("destination", destination)):
        if not word:
            raise EmptyWordError(f"The {label} word is empty.")
        if not dictionary.contains(word):
            raise NotAWordError(f"\"{word}\" is not an English word.")

    if len(source) != len(destination):
        raise LengthMismatchError(
            f"\"{source}\" and \"{destination}\" have different lengths "
            f"({len(source)} vs {len(destination)})."
        )

def differs_by_one_letter(first: str, second: str) -> bool:
    if len(first) != len(second):
        return False
    return sum(1 for a, b in zip(first, second) if a != b) == 1

def is_valid_ladder(dictionary: Dictionary, words: Sequence[str]) -> bool:
    """
    True when every step changes exactly one letter, no word repeats and
    every word after the first is in the dictionary.
    """
    if not words or len(set(words)) != len(words):
        return False
    for previous, current in zip(words, words[1:]):
        if not differs_by_one_letter(previous, current):
            return False
        if not dictionary.contains(current):
            return False
    return True
