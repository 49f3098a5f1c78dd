import json
import logging
from pathlib import Path
from typing import Iterable, Iterator
from wordladder.errors import DictionaryLoadError

logger = logging.getLogger(__name__)

class Dictionary:
    """
    Immutable word bank queried by exact-match membership.
    """

    def __init__(self, words: Iterable[str]):
        # Store as lowercase; lookups are exact after that
        self.all_words = frozenset(w.strip().lower() for w in words if w.strip())

    @classmethod
    def from_file(cls, filepath: str | Path):
        """
        Loads a word list. JSON files hold a list of words, anything else
        holds one word per line with '#' comment lines.
        """
        filepath = Path(filepath)
        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                if filepath.suffix == '.json':
                    words = json.load(f)
                else:
                    words = [line for line in f if not line.lstrip().startswith('#')]
        except json.JSONDecodeError as e:
            raise DictionaryLoadError(f"Malformed JSON in {filepath}: {e}") from e
        except UnicodeDecodeError as e:
            raise DictionaryLoadError(f"{filepath} is not valid UTF-8 text") from e

        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise DictionaryLoadError(f"{filepath} must hold a list of words")

        dictionary = cls(words)
        if not dictionary.all_words:
            raise DictionaryLoadError(f"No words found in {filepath}")
        logger.info("Loaded %d words from %s", len(dictionary), filepath)
        return dictionary

    def contains(self, word: str) -> bool:
        return word in self.all_words

    def __contains__(self, word: object) -> bool:
        return word in self.all_words

    def __len__(self) -> int:
        return len(self.all_words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.all_words)
