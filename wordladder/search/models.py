from enum import Enum
from pydantic import BaseModel

class LadderOutcome(str, Enum):
    SAME_WORD = "same_word"      # Source and destination are identical
    NOT_FOUND = "not_found"      # Frontier exhausted without reaching destination
    FOUND = "found"              # Destination reached through at least one hop

class LadderResult(BaseModel):
    source: str
    destination: str
    words: list[str]             # Source first; destination last when found
    outcome: LadderOutcome
    explored: int = 0            # Ladders dequeued during the search

    @property
    def found(self) -> bool:
        return self.outcome != LadderOutcome.NOT_FOUND

    @property
    def hops(self) -> int:
        return len(self.words) - 1
