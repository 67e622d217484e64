"""
Builder options.

``AggregationOptions`` is handed to :class:`AggregationBuilder` and read
by every stage the builder creates.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class AggregationOptions:
    """
    Immutable container for builder behaviour.

    Attributes:
        allow_undeclared_operators: If ``True``, operator stages forward
            any method name they do not declare to the expression builder.
            If ``False``, such names raise
            :class:`~cqrs_ddd_aggregation.exceptions.UnknownOperatorError`.
    """

    allow_undeclared_operators: bool = True

    def with_strict_operators(self) -> AggregationOptions:
        """Return a copy that only accepts declared operators."""
        return replace(self, allow_undeclared_operators=False)
