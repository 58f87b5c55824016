"""Domain errors raised while building a statement."""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    """Kinds of statement failure."""

    UNKNOWN_PLAY = "UNKNOWN_PLAY"
    UNKNOWN_GENRE = "UNKNOWN_GENRE"


class StatementError(Exception):
    """Base statement error tagged with an :class:`ErrorCode`."""

    code: ErrorCode

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return self.message


class UnknownPlayError(StatementError, LookupError):
    """Raised when a performance references a play id missing from the catalog."""

    def __init__(self, play_id: str) -> None:
        super().__init__(ErrorCode.UNKNOWN_PLAY, f"{play_id}: unknown play")
        self.play_id = play_id


class UnknownGenreError(StatementError):
    """Raised when no pricing strategy is registered for a play's genre."""

    def __init__(self, raw_value: object) -> None:
        super().__init__(ErrorCode.UNKNOWN_GENRE, f"{raw_value}: unknown genre")
        self.raw_value = raw_value
