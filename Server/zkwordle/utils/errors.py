"""
Error Types

Exceptions raised by the proof scheme, the evaluator and the game service.
Input errors subclass ValueError so callers that already catch ValueError
keep working.
"""


class ZKWordleError(Exception):
    """Base class for all errors raised by this package."""


class InvalidInput(ZKWordleError, ValueError):
    """Rejected input: wrong guess length, bad position, malformed salt or hashes."""


class InvalidGuessLength(InvalidInput):
    """Guess length differs from the committed word length."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__("Invalid guess length")


class InvalidPosition(InvalidInput):
    """Letter proof requested for a position outside the word."""

    def __init__(self, position: int, word_length: int):
        self.position = position
        self.word_length = word_length
        super().__init__("Invalid position")


class InvalidPositionHashes(InvalidInput):
    """Published position hash table does not match the word length."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__("Invalid position hashes")


class VerificationMismatch(ZKWordleError):
    """A recomputed hash did not match any published position hash."""

    def __init__(self, position: int):
        self.position = position
        super().__init__(f"No letter matches the published hash at position {position}")


class SessionNotFound(ZKWordleError):
    """No session is stored under the given identifier."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Session not found: {session_id}")


class UpstreamUnavailable(ZKWordleError):
    """The word source could not provide a secret."""
