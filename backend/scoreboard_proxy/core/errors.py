"""
Error type shared by the scoreboard client and the request handler.
"""

from enum import Enum


class ErrorKind(str, Enum):
    UPSTREAM_UNREACHABLE = "upstream_unreachable"
    NOT_FOUND = "not_found"
    MALFORMED_RESPONSE = "malformed_response"


class ScoreboardError(Exception):
    """
    Raised when a team lookup cannot produce a result.

    Attributes:
        kind: What went wrong
        status: HTTP status to surface to the caller
        message: Human readable description
    """

    def __init__(self, kind: ErrorKind, status: int, message: str):
        super().__init__(message)
        self.kind = kind
        self.status = status
        self.message = message

    def __repr__(self) -> str:
        return f"ScoreboardError(kind={self.kind.value}, status={self.status}, message={self.message!r})"


def upstream_unreachable(status: int, message: str) -> ScoreboardError:
    return ScoreboardError(ErrorKind.UPSTREAM_UNREACHABLE, status, message)


def not_found(message: str = "Team not found") -> ScoreboardError:
    return ScoreboardError(ErrorKind.NOT_FOUND, 404, message)


def malformed_response(message: str) -> ScoreboardError:
    return ScoreboardError(ErrorKind.MALFORMED_RESPONSE, 502, message)
