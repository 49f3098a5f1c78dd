import string
from wordladder.words.bank import Dictionary

def one_hop_away(
    dictionary: Dictionary,
    visited: set[str],
    word: str,
    alphabet: str = string.ascii_lowercase
) -> set[str]:
    """
    Returns the dictionary words one letter substitution away from `word`
    that are not yet in `visited`.

    Every neighbor returned is also added to `visited` before returning, so
    a word is discovered by at most one parent ladder per search.
    """
    neighbors = set()
    for i, original in enumerate(word):
        prefix, suffix = word[:i], word[i + 1:]
        for letter in alphabet:
            if letter == original:
                continue
            candidate = prefix + letter + suffix
            if dictionary.contains(candidate) and candidate not in visited:
                neighbors.add(candidate)
                visited.add(candidate)
    return neighbors
