"""Exceptions raised by hand evaluation."""


class EvaluationError(Exception):
    """Base class for hand evaluation errors."""

    pass


class EmptyHandError(EvaluationError, ValueError):
    """Raised when a hand is evaluated without any cards."""

    pass


class ClassificationError(EvaluationError):
    """Raised when no ranking rule matches a five card hand.

    This signals a defect in the ranking rules, never bad input.
    """

    pass


class RuleSetError(EvaluationError, ValueError):
    """Raised for unknown rule sets or invalid rule configuration."""

    pass


class SerializationError(EvaluationError, ValueError):
    """Raised when a serialized hand record cannot be read."""

    pass
