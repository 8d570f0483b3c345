"""Errors raised by the remote operation gateway."""

from enum import Enum


class ErrorKind(str, Enum):
    """Distinguishable gateway failure kinds."""

    UNREACHABLE = "unreachable"
    MALFORMED_RESPONSE = "malformed_response"
    APPLICATION_ERROR = "application_error"
    TIMED_OUT = "timed_out"


class GatewayError(Exception):
    """Base class for every failure the gateway reports."""

    kind: ErrorKind

    def __init__(self, message: str, endpoint: str = ""):
        super().__init__(message)
        self.message = message
        self.endpoint = endpoint


class UnreachableError(GatewayError):
    """The backend could not be reached (connection refused, reset, DNS...)."""

    kind = ErrorKind.UNREACHABLE


class TimedOutError(GatewayError):
    """The backend did not answer within the configured timeout."""

    kind = ErrorKind.TIMED_OUT


class MalformedResponseError(GatewayError):
    """The backend answered with something that violates the response contract."""

    kind = ErrorKind.MALFORMED_RESPONSE


class ApplicationError(GatewayError):
    """The backend reported a logical failure; the message is its own text."""

    kind = ErrorKind.APPLICATION_ERROR
