"""Raised when code asks the operation slot for a transition the table forbids."""


class InvalidTransitionError(RuntimeError):
    """Programming error: illegal state transition on the operation slot."""
