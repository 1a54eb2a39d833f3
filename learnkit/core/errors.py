"""Exception types raised when a caller breaks a learnkit contract.

Degenerate numeric inputs (log of zero, empty groups, empty neighbour sets)
are never raised; they are guarded where they occur. Only precondition
violations surface as exceptions, always naming the contract that was broken.
"""

from typing import Any


class LearnKitError(Exception):
    """Base class for all learnkit errors."""


class PreconditionError(LearnKitError, ValueError):
    """A call was made in a state or with arguments its contract forbids."""


class ShapeMismatchError(PreconditionError):
    """A vector or array did not have the length its consumer requires.

    Attributes:
        expected: The length (or shape) the contract requires.
        actual: The length (or shape) that was supplied.
        context: Which contract was violated, e.g. ``"Dense input"``.
    """

    def __init__(self, context: str, expected: Any, actual: Any):
        self.context = context
        self.expected = expected
        self.actual = actual
        super().__init__(f"{context}: expected length {expected}, got {actual}")


class CallOrderError(PreconditionError):
    """A layer's ``backward`` was called without a preceding ``forward``."""

    def __init__(self, layer_name: str):
        self.layer_name = layer_name
        super().__init__(
            f"{layer_name}.backward() called before forward(); "
            "forward must run first so the layer has cached input/output"
        )


class MissingColumnError(PreconditionError, KeyError):
    """A column named for ingestion does not exist in the source table."""

    def __init__(self, column: str, available=None):
        self.column = column
        self.available = list(available) if available is not None else []
        super().__init__(f"Column '{column}' not found (available: {self.available})")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]
