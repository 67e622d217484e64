"""
Abstract pipeline stage.

A stage renders itself as one pipeline document via ``get_expression()``
and exposes builder shortcuts so a pipeline reads as a single chain::

    pipeline = (
        builder.match({"status": "active"})
        .group()
            .field("_id").expression("$customer")
            .field("total").sum("$amount")
        .sort("-total")
        .limit(10)
        .get_pipeline()
    )
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..builder import AggregationBuilder
    from .add_fields import AddFields
    from .basic import Count, Limit, Match, Skip, Sort, Unwind
    from .group import Group
    from .project import Project


class Stage(ABC):
    """Base class for all aggregation pipeline stages."""

    def __init__(self, builder: AggregationBuilder) -> None:
        self.builder = builder

    @abstractmethod
    def get_expression(self) -> dict[str, Any]:
        """Return the pipeline document for this stage."""
        ...

    # -- builder shortcuts ---------------------------------------------------

    def add_fields(self) -> AddFields:
        return self.builder.add_fields()

    def project(self) -> Project:
        return self.builder.project()

    def group(self) -> Group:
        return self.builder.group()

    def match(self, query: Mapping[str, Any]) -> Match:
        return self.builder.match(query)

    def sort(self, *fields: Any) -> Sort:
        return self.builder.sort(*fields)

    def limit(self, limit: int) -> Limit:
        return self.builder.limit(limit)

    def skip(self, skip: int) -> Skip:
        return self.builder.skip(skip)

    def unwind(
        self,
        path: str,
        *,
        include_array_index: str | None = None,
        preserve_null_and_empty_arrays: bool | None = None,
    ) -> Unwind:
        return self.builder.unwind(
            path,
            include_array_index=include_array_index,
            preserve_null_and_empty_arrays=preserve_null_and_empty_arrays,
        )

    def count(self, field: str) -> Count:
        return self.builder.count(field)

    def get_pipeline(self) -> list[dict[str, Any]]:
        """Return the full pipeline this stage belongs to."""
        return self.builder.get_pipeline()
