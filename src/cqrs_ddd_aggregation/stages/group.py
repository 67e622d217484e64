"""$group stage."""

from __future__ import annotations

from typing import Any

from ..operators import GROUP_ACCUMULATORS
from ..signatures import passthrough_operators
from .operator import Operator


@passthrough_operators(*GROUP_ACCUMULATORS)
class Group(Operator):
    """
    Group documents by the ``_id`` expression and apply accumulators.

    Example::

        (
            builder.group()
            .field("_id").expression("$customer")
            .field("orders").sum(1)
            .field("spent").sum("$amount")
        )
    """

    def get_expression(self) -> dict[str, Any]:
        return {"$group": self.expr.get_expression()}
