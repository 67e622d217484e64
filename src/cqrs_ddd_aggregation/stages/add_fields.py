"""$addFields stage."""

from __future__ import annotations

from typing import Any

from ..operators import PROJECT_ACCUMULATORS
from ..signatures import passthrough_operators
from .operator import Operator


@passthrough_operators(*PROJECT_ACCUMULATORS)
class AddFields(Operator):
    """Add new fields to documents, built with expression operators."""

    def get_expression(self) -> dict[str, Any]:
        return {"$addFields": self.expr.get_expression()}
