"""
Chainable expression operator stage.

:class:`Operator` wraps an expression builder obtained from the
aggregation builder.  Every operator method forwards its arguments,
unchanged, to the identically named method on the expression builder and
returns the stage so calls can be chained::

    stage.field("total").add("$price", "$tax").field("label").to_upper("$name")

Operators missing from the declared table are forwarded as well, unless
the builder was configured with ``allow_undeclared_operators=False``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar

from ..exceptions import UnknownOperatorError
from ..operators import EXPRESSION_OPERATORS
from ..signatures import OperatorRegistry, passthrough_operators
from .base import Stage

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..builder import AggregationBuilder
    from ..ports import IExpressionBuilder

logger = logging.getLogger("cqrs_ddd.aggregation")


@passthrough_operators(*EXPRESSION_OPERATORS)
class Operator(Stage):
    """
    Base class for stages built from aggregation expressions.

    The expression builder is created once, at construction, and owned by
    the expression-building side; this class only forwards calls to it.
    Argument validation and errors are left to the expression builder.
    """

    operators: ClassVar[OperatorRegistry] = OperatorRegistry()

    def __init__(self, builder: AggregationBuilder) -> None:
        super().__init__(builder)
        self._allow_undeclared = builder.options.allow_undeclared_operators
        self._expr = builder.expr()

    @property
    def expr(self) -> IExpressionBuilder:
        """The expression builder this stage forwards to."""
        return self._expr

    def _forward(self, name: str, args: tuple[Any, ...]) -> None:
        getattr(self._expr, name)(*args)

    def __getattr__(self, name: str) -> Callable[..., Any]:
        # Only reached for names not found through normal lookup.
        expr = self.__dict__.get("_expr")
        if name.startswith("_") or expr is None:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            )
        if not self._allow_undeclared:
            raise UnknownOperatorError(name, sorted(self.operators.names))

        target = getattr(expr, name)

        def forward(*args: Any, **kwargs: Any) -> Operator:
            logger.debug("Forwarding undeclared operator %r", name)
            target(*args, **kwargs)
            return self

        forward.__name__ = name
        return forward
