"""
Error hierarchy for the scoring engine.

Validation errors (bad ratings, duplicate catalog keys) are raised at the
call that caused them. Unknown metric keys are raised only by strict lookups;
the instance store and the scorecards log them and fall back to a neutral
default instead.
"""

from typing import Any


class ScoringError(Exception):
    """
    Base exception for all scoring-engine errors.

    Attributes:
        message: Human-readable error description
        key: Metric key or field tag involved, if any
    """

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.message = message
        self.key = key

    def __str__(self) -> str:
        if self.key:
            return f"[{self.key}] {self.message}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "key": self.key,
        }


class DuplicateKeyError(ScoringError, ValueError):
    """A metric definition with the same key is already registered."""

    def __init__(self, key: str):
        super().__init__(f"Metric definition '{key}' is already registered", key=key)


class InvalidRatingError(ScoringError, ValueError):
    """Rating outside the declared range of the metric."""

    def __init__(self, key: str, rating: int, min_rating: int, max_rating: int):
        super().__init__(
            f"Rating {rating} outside allowed range {min_rating}..{max_rating} (or 0 to clear)",
            key=key,
        )
        self.rating = rating
        self.min_rating = min_rating
        self.max_rating = max_rating

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(
            rating=self.rating,
            min_rating=self.min_rating,
            max_rating=self.max_rating,
        )
        return data


class UnknownMetricKeyError(ScoringError, KeyError):
    """Key not present in the catalog (or not a field of the scorecard)."""

    def __init__(self, key: str, scope: str = "catalog"):
        super().__init__(f"Unknown metric key in {scope}", key=key)
        self.scope = scope

    # KeyError.__str__ would repr() the args
    def __str__(self) -> str:
        return ScoringError.__str__(self)


class SiteTypeMismatchError(ScoringError, ValueError):
    """Scorecard or snapshot belongs to a different site type than its site."""

    def __init__(self, expected: str, actual: str):
        super().__init__(f"Expected site type '{expected}', got '{actual}'")
        self.expected = expected
        self.actual = actual
