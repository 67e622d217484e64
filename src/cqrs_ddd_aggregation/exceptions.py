"""
Aggregation builder exception hierarchy.

All exceptions inherit from ``AggregationError`` and provide
``to_dict()`` for API-friendly error responses.  Errors raised by the
expression builder collaborator are never wrapped.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class AggregationError(Exception):
    """Base exception for all aggregation builder errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class UnknownOperatorError(AggregationError, AttributeError):
    """
    Undeclared operator requested while undeclared operators are disabled.

    Subclasses ``AttributeError`` so ``hasattr()`` and ``getattr()`` with
    a default keep working on operator stages.
    """

    def __init__(self, operator: str, valid_operators: list[str]) -> None:
        self.operator = operator
        self.valid_operators = valid_operators
        self.suggestions = get_close_matches(operator, valid_operators, n=3, cutoff=0.6)

        message = f"Unknown operator: '{operator}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNKNOWN_OPERATOR",
            "operator": self.operator,
            "suggestions": self.suggestions,
        }


class StageNotFoundError(AggregationError, IndexError):
    """No stage exists at the requested pipeline position."""

    def __init__(self, index: int, stage_count: int) -> None:
        self.index = index
        self.stage_count = stage_count
        super().__init__(
            f"No stage at index {index}; pipeline has {stage_count} stage(s)"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "STAGE_NOT_FOUND",
            "index": self.index,
            "stage_count": self.stage_count,
        }
