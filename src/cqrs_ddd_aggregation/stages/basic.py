"""Stages that render their own document without an expression builder."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .base import Stage

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..builder import AggregationBuilder


class Match(Stage):
    """Filter documents with a MongoDB query document."""

    def __init__(self, builder: AggregationBuilder, query: Mapping[str, Any]) -> None:
        super().__init__(builder)
        self.query = query

    def get_expression(self) -> dict[str, Any]:
        return {"$match": dict(self.query)}


class Sort(Stage):
    """
    Order documents.

    Accepts ``"-field"`` / ``"field"`` strings, ``(field, "asc"|"desc")`` or
    ``(field, 1|-1)`` tuples, or a single mapping of ``{field: 1 | -1}``.
    """

    def __init__(self, builder: AggregationBuilder, *fields: Any) -> None:
        super().__init__(builder)
        self.order: dict[str, Any] = {}
        for item in fields:
            if isinstance(item, tuple):
                field, direction = item[0], item[1]
                self.order[field] = _direction(direction)
            elif isinstance(item, str):
                if item.startswith("-"):
                    self.order[item[1:]] = -1
                else:
                    self.order[item] = 1
            else:
                self.order.update(item)

    def get_expression(self) -> dict[str, Any]:
        return {"$sort": dict(self.order)}


class Limit(Stage):
    """Pass only the first ``limit`` documents."""

    def __init__(self, builder: AggregationBuilder, limit: int) -> None:
        super().__init__(builder)
        self.value = limit

    def get_expression(self) -> dict[str, Any]:
        return {"$limit": self.value}


class Skip(Stage):
    """Skip the first ``skip`` documents."""

    def __init__(self, builder: AggregationBuilder, skip: int) -> None:
        super().__init__(builder)
        self.value = skip

    def get_expression(self) -> dict[str, Any]:
        return {"$skip": self.value}


class Unwind(Stage):
    """
    Output one document per element of an array field.

    Without options the short form ``{"$unwind": "$path"}`` is rendered.
    """

    def __init__(
        self,
        builder: AggregationBuilder,
        path: str,
        *,
        include_array_index: str | None = None,
        preserve_null_and_empty_arrays: bool | None = None,
    ) -> None:
        super().__init__(builder)
        self.path = path
        self.include_array_index = include_array_index
        self.preserve_null_and_empty_arrays = preserve_null_and_empty_arrays

    def get_expression(self) -> dict[str, Any]:
        if self.include_array_index is None and self.preserve_null_and_empty_arrays is None:
            return {"$unwind": self.path}
        options: dict[str, Any] = {"path": self.path}
        if self.include_array_index is not None:
            options["includeArrayIndex"] = self.include_array_index
        if self.preserve_null_and_empty_arrays is not None:
            options["preserveNullAndEmptyArrays"] = self.preserve_null_and_empty_arrays
        return {"$unwind": options}


class Count(Stage):
    """Replace the documents with a single ``{field: <count>}`` document."""

    def __init__(self, builder: AggregationBuilder, field: str) -> None:
        super().__init__(builder)
        self.field = field

    def get_expression(self) -> dict[str, Any]:
        return {"$count": self.field}


def _direction(value: Any) -> int:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return -1 if value < 0 else 1
    return -1 if str(value).lower() == "desc" else 1
