import logging
from typing import TextIO
from rich.console import Console
from wordladder.prompts.templates import (
    DESTINATION_PROMPT,
    LENGTH_MISMATCH_MESSAGE,
    NOT_A_WORD_MESSAGE,
    SOURCE_PROMPT
)
from wordladder.search.rules import normalize_word
from wordladder.words.bank import Dictionary

logger = logging.getLogger(__name__)

class ConsolePrompter:
    """
    Reads ladder endpoints from a terminal. An empty line means quit.
    """

    def __init__(self, dictionary: Dictionary, console: Console, stream: TextIO | None = None):
        self.dictionary = dictionary
        self.console = console
        # None reads from stdin
        self.stream = stream

    def ask_word(self, prompt: str) -> str | None:
        while True:
            try:
                line = self.console.input(prompt, markup=False, stream=self.stream)
            except EOFError:
                logger.debug("Input closed at prompt %r", prompt)
                return None

            # Only a bare return quits; blanks are re-prompted like any non-word
            if not line.rstrip('\r\n'):
                return None
            word = normalize_word(line)
            if self.dictionary.contains(word):
                return word
            self.console.print(NOT_A_WORD_MESSAGE, markup=False)

    def ask_endpoints(self) -> tuple[str, str] | None:
        source = self.ask_word(SOURCE_PROMPT)
        if source is None:
            return None
        destination = self.ask_word(DESTINATION_PROMPT)
        if destination is None:
            return None

        while len(source) != len(destination):
            self.console.print(LENGTH_MISMATCH_MESSAGE, markup=False)
            destination = self.ask_word(DESTINATION_PROMPT)
            if destination is None:
                return None
        return source, destination
