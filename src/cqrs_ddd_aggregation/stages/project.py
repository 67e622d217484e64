"""$project stage."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..operators import PROJECT_ACCUMULATORS
from ..signatures import passthrough_operators
from .operator import Operator

if TYPE_CHECKING:
    from collections.abc import Iterable


@passthrough_operators(*PROJECT_ACCUMULATORS)
class Project(Operator):
    """
    Reshape documents: include, exclude or compute fields.

    Example::

        builder.project().include_fields(["name", "email"]).exclude_fields(["_id"])
        # → {"$project": {"name": True, "email": True, "_id": False}}
    """

    def get_expression(self) -> dict[str, Any]:
        return {"$project": self.expr.get_expression()}

    def include_fields(self, fields: Iterable[str]) -> Project:
        """Mark each field as included in the output documents."""
        for name in fields:
            self.field(name).expression(True)
        return self

    def exclude_fields(self, fields: Iterable[str]) -> Project:
        """Mark each field as excluded from the output documents."""
        for name in fields:
            self.field(name).expression(False)
        return self
