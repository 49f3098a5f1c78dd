from wordladder.search.models import LadderOutcome, LadderResult

WELCOME_BANNER = """Welcome to the word ladder application!
Please give me two English words, and I will change the first into the second by changing one letter at a time.
"""

SOURCE_PROMPT = "Please enter the source word [return to quit]: "

DESTINATION_PROMPT = "Please enter the destination word [return to quit]: "

NOT_A_WORD_MESSAGE = "Your response needs to be an English word, so please try again."

LENGTH_MISMATCH_MESSAGE = (
    "The two endpoints must contain the same number of characters, "
    "or else no word ladder can exist."
)

FAREWELL_MESSAGE = "Thanks for playing!"

def format_ladder(result: LadderResult) -> str:
    if result.outcome == LadderOutcome.SAME_WORD:
        return f"Found ladder: {result.words[0]}"
    if result.outcome == LadderOutcome.NOT_FOUND:
        return f"No word ladder between \"{result.source}\" and \"{result.destination}\" could be found."
    return "Found ladder: " + " ".join(result.words)

def ladder_steps(result: LadderResult) -> list[tuple[int, str, int | None]]:
    """
    (step, word, changed position) rows; the source has no changed position.
    Positions are 1-based for display.
    """
    rows = []
    previous = None
    for step, word in enumerate(result.words):
        changed = None
        if previous is not None:
            changed = next(
                (i + 1 for i, (a, b) in enumerate(zip(previous, word)) if a != b),
                None
            )
        rows.append((step, word, changed))
        previous = word
    return rows
