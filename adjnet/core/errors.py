"""Exception hierarchy for adjnet.

Every failure is raised synchronously to the caller; nothing in the engine
catches and recovers from these.
"""

__all__ = ["AdjnetError", "ValidationError", "MalformedInputError", "SearchCancelledError"]


class AdjnetError(Exception):
    """Base class for all adjnet errors."""


class ValidationError(AdjnetError, ValueError):
    """Input parses structurally but violates a shape, range or type constraint."""


class MalformedInputError(ValidationError):
    """Input is not the expected JSON array-of-arrays structure."""


class SearchCancelledError(AdjnetError):
    """Isomorphism search stopped through its cancellation token."""

    def __init__(self, checked: int):
        super().__init__(f"Isomorphism search cancelled after {checked} permutations")
        self.checked = checked
