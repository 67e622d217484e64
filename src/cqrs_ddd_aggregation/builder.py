"""
Fluent builder for aggregation pipelines.

Example::

    builder = AggregationBuilder(Expr)
    builder.add_fields().field("total").add("$price", "$tax")
    builder.sort("-total").limit(5)

    builder.get_pipeline()
    # → [{"$addFields": {...}}, {"$sort": {"total": -1}}, {"$limit": 5}]

The builder does not construct expressions itself; ``expr_factory``
supplies a fresh expression builder for every operator stage.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from .exceptions import StageNotFoundError
from .options import AggregationOptions
from .stages import (
    AddFields,
    Count,
    Group,
    Limit,
    Match,
    Project,
    Skip,
    Sort,
    Unwind,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from .ports import IExpressionBuilder
    from .stages import Stage

logger = logging.getLogger("cqrs_ddd.aggregation")

S = TypeVar("S", bound="Stage")


class AggregationBuilder:
    """
    Collects pipeline stages in order and renders them as a pipeline.

    Every stage factory appends the new stage and returns it, so stage
    methods can be chained directly on the result.
    """

    def __init__(
        self,
        expr_factory: Callable[[], IExpressionBuilder],
        *,
        options: AggregationOptions | None = None,
    ) -> None:
        self._expr_factory = expr_factory
        self.options = options if options is not None else AggregationOptions()
        self._stages: list[Stage] = []

    def expr(self) -> IExpressionBuilder:
        """Return a new expression builder."""
        return self._expr_factory()

    # -- stages ----------------------------------------------------------------

    def add_stage(self, stage: S) -> S:
        """Append an already-constructed stage and return it."""
        self._stages.append(stage)
        logger.debug(
            "Added %s stage at position %d", type(stage).__name__, len(self._stages) - 1
        )
        return stage

    def add_fields(self) -> AddFields:
        return self.add_stage(AddFields(self))

    def project(self) -> Project:
        return self.add_stage(Project(self))

    def group(self) -> Group:
        return self.add_stage(Group(self))

    def match(self, query: Mapping[str, Any]) -> Match:
        return self.add_stage(Match(self, query))

    def sort(self, *fields: Any) -> Sort:
        return self.add_stage(Sort(self, *fields))

    def limit(self, limit: int) -> Limit:
        return self.add_stage(Limit(self, limit))

    def skip(self, skip: int) -> Skip:
        return self.add_stage(Skip(self, skip))

    def unwind(
        self,
        path: str,
        *,
        include_array_index: str | None = None,
        preserve_null_and_empty_arrays: bool | None = None,
    ) -> Unwind:
        return self.add_stage(
            Unwind(
                self,
                path,
                include_array_index=include_array_index,
                preserve_null_and_empty_arrays=preserve_null_and_empty_arrays,
            )
        )

    def count(self, field: str) -> Count:
        return self.add_stage(Count(self, field))

    # -- inspection ------------------------------------------------------------

    @property
    def stages(self) -> tuple[Stage, ...]:
        return tuple(self._stages)

    def get_stage(self, index: int) -> Stage:
        """
        Return the stage at ``index``.

        Raises:
            StageNotFoundError: If no stage exists at that position.
        """
        try:
            return self._stages[index]
        except IndexError:
            raise StageNotFoundError(index, len(self._stages)) from None

    def get_pipeline(self) -> list[dict[str, Any]]:
        """Render every stage, in order."""
        return [stage.get_expression() for stage in self._stages]

    def reset(self) -> AggregationBuilder:
        """Clear all stages and return ``self`` for reuse."""
        self._stages.clear()
        return self

    def __len__(self) -> int:
        return len(self._stages)
