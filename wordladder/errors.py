"""Exception hierarchy for the word ladder boundary layer."""


class WordLadderError(Exception):
    """Base exception for word ladder failures."""


class DictionaryLoadError(WordLadderError):
    """Raised when a word list yields no usable words."""


class InvalidEndpointError(WordLadderError, ValueError):
    """Raised when a source/destination pair cannot start a ladder."""


class EmptyWordError(InvalidEndpointError):
    """Raised when an endpoint is blank."""


class NotAWordError(InvalidEndpointError):
    """Raised when an endpoint is not in the dictionary."""


class LengthMismatchError(InvalidEndpointError):
    """Raised when the endpoints have different lengths."""
