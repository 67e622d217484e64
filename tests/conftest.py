"""Shared fixtures for aggregation builder tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from cqrs_ddd_aggregation import AggregationBuilder


class RecordingExpr:
    """Small expression builder that assembles plain field documents."""

    def __init__(self) -> None:
        self._doc: dict[str, Any] = {}
        self._field: str | None = None

    def field(self, field_name: str) -> None:
        self._field = field_name

    def expression(self, value: Any) -> None:
        self._set(value)

    def add(self, *expressions: Any) -> None:
        self._set({"$add": list(expressions)})

    def sum(self, *expressions: Any) -> None:
        self._set({"$sum": expressions[0] if len(expressions) == 1 else list(expressions)})

    def to_upper(self, expression: Any) -> None:
        self._set({"$toUpper": expression})

    def get_expression(self) -> dict[str, Any]:
        return dict(self._doc)

    def _set(self, value: Any) -> None:
        if self._field is None:
            raise ValueError("Call field() before adding an expression")
        self._doc[self._field] = value


@pytest.fixture
def expr() -> MagicMock:
    """Mocked expression builder shared by every stage of ``builder``."""
    return MagicMock(name="expr")


@pytest.fixture
def builder(expr: MagicMock) -> AggregationBuilder:
    return AggregationBuilder(lambda: expr)


@pytest.fixture
def recording_builder() -> AggregationBuilder:
    """Builder whose stages assemble real documents."""
    return AggregationBuilder(RecordingExpr)
