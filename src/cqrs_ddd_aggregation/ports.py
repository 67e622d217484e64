"""IExpressionBuilder - Protocol for the aggregation expression collaborator."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IExpressionBuilder(Protocol):
    """
    Abstract interface for the object that assembles expression documents.

    Operator methods (``add``, ``cond``, ``map``, ...) are looked up by
    name at call time, so only the final read-out is part of the protocol.
    """

    def get_expression(self) -> Any:
        """Return the assembled expression document."""
        ...
