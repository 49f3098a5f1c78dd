import logging
import string
from collections import deque
from wordladder.search.models import LadderOutcome, LadderResult
from wordladder.search.neighbors import one_hop_away
from wordladder.words.bank import Dictionary

logger = logging.getLogger(__name__)

class LadderSearch:
    """
    Breadth-first search for the shortest word ladder between two words.
    """

    def __init__(self, dictionary: Dictionary, alphabet: str = string.ascii_lowercase):
        self.dictionary = dictionary
        self.alphabet = alphabet

    def search(self, source: str, destination: str) -> LadderResult:
        """
        Expects two non-empty words of equal length; see rules.validate_endpoints.
        """
        visited = {source}
        frontier = deque([(source,)])
        explored = 0

        while frontier:
            ladder = frontier.popleft()
            explored += 1
            top = ladder[-1]

            # Level order: the first ladder to reach the destination is a shortest one
            if top == destination:
                outcome = LadderOutcome.SAME_WORD if len(ladder) == 1 else LadderOutcome.FOUND
                return self._result(source, destination, ladder, outcome, explored)

            for word in sorted(one_hop_away(self.dictionary, visited, top, self.alphabet)):
                frontier.append(ladder + (word,))

        return self._result(source, destination, (source,), LadderOutcome.NOT_FOUND, explored)

    def _result(self, source, destination, ladder, outcome, explored) -> LadderResult:
        logger.debug(
            "Ladder %s -> %s: %s after %d ladders explored",
            source, destination, outcome.value, explored
        )
        return LadderResult(
            source=source,
            destination=destination,
            words=list(ladder),
            outcome=outcome,
            explored=explored
        )

def find_ladder(dictionary: Dictionary, source: str, destination: str) -> LadderResult:
    return LadderSearch(dictionary).search(source, destination)
