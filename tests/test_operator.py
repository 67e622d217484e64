"""Tests for the Operator stage: forwarding, chaining and the fallback path."""

from __future__ import annotations

import logging
from typing import Any
from unittest.mock import MagicMock, call

import pytest

from cqrs_ddd_aggregation import (
    EXPRESSION_OPERATORS,
    AggregationBuilder,
    AggregationOptions,
    Operator,
    OperatorSignature,
    UnknownOperatorError,
)


class ExpressionStage(Operator):
    """Concrete operator stage used to exercise the forwarding behaviour."""

    def get_expression(self) -> dict[str, Any]:
        return {"$expr": self.expr.get_expression()}


@pytest.fixture
def stage(builder: AggregationBuilder) -> ExpressionStage:
    return ExpressionStage(builder)


@pytest.fixture
def strict_stage(expr: MagicMock) -> ExpressionStage:
    options = AggregationOptions().with_strict_operators()
    return ExpressionStage(AggregationBuilder(lambda: expr, options=options))


def _sample_args(signature: OperatorSignature) -> tuple[Any, ...]:
    return tuple(f"${param}" for param in signature.params)


# -- construction ------------------------------------------------------------


def test_operator_is_abstract(builder: AggregationBuilder):
    with pytest.raises(TypeError):
        Operator(builder)  # type: ignore[abstract]


def test_expression_builder_obtained_once(expr: MagicMock):
    factory = MagicMock(return_value=expr)
    stage = ExpressionStage(AggregationBuilder(factory))

    stage.add(1, 2).eq("$a", "$b").size("$items")

    factory.assert_called_once_with()
    assert stage.expr is expr


# -- declared operators ------------------------------------------------------


@pytest.mark.parametrize("signature", EXPRESSION_OPERATORS, ids=lambda s: s.name)
def test_declared_operator_forwards_and_returns_stage(
    stage: ExpressionStage, expr: MagicMock, signature: OperatorSignature
):
    args = _sample_args(signature)

    result = getattr(stage, signature.name)(*args)

    assert result is stage
    defaults = tuple(default for _, default in signature.defaults)
    getattr(expr, signature.name).assert_called_once_with(*args, *defaults)


def test_variadic_operator_forwards_every_argument(
    stage: ExpressionStage, expr: MagicMock
):
    stage.add(1, 2, 3, 4)
    stage.concat("a", "b", "c")
    stage.add_and({"$gt": ["$a", 1]})

    expr.add.assert_called_once_with(1, 2, 3, 4)
    expr.concat.assert_called_once_with("a", "b", "c")
    expr.add_and.assert_called_once_with({"$gt": ["$a", 1]})


def test_optional_arguments_are_forwarded(stage: ExpressionStage, expr: MagicMock):
    stage.range(0, 10)
    stage.index_of_array("$items", "x", end=3)
    stage.slice("$items", 5, 2)
    stage.zip(["$a", "$b"], True, [0, 0])

    assert expr.mock_calls == [
        call.range(0, 10, 1),
        call.index_of_array("$items", "x", None, 3),
        call.slice("$items", 5, 2),
        call.zip(["$a", "$b"], True, [0, 0]),
    ]


def test_keyword_arguments_are_forwarded_positionally(
    stage: ExpressionStage, expr: MagicMock
):
    stage.cond(if_={"$gte": ["$qty", 250]}, then=30, else_=20)

    expr.cond.assert_called_once_with({"$gte": ["$qty", 250]}, 30, 20)


@pytest.mark.parametrize(
    ("name", "args"),
    [
        ("abs", ()),
        ("abs", (1, 2)),
        ("add", (1,)),
        ("cond", (True, 1)),
        ("zip", ("$a", True, [], "extra")),
    ],
)
def test_wrong_arity_raises_type_error(
    stage: ExpressionStage, expr: MagicMock, name: str, args: tuple[Any, ...]
):
    with pytest.raises(TypeError):
        getattr(stage, name)(*args)
    getattr(expr, name).assert_not_called()


def test_chained_calls_forward_in_order(stage: ExpressionStage, expr: MagicMock):
    result = stage.add(1, 2).multiply(3, 4)

    assert result is stage
    assert expr.mock_calls == [call.add(1, 2), call.multiply(3, 4)]


def test_field_expressions_chain(stage: ExpressionStage, expr: MagicMock):
    (
        stage.field("total")
        .add("$price", "$tax")
        .field("label")
        .to_upper("$name")
        .field("day")
        .date_to_string("%Y-%m-%d", "$created_at")
    )

    assert expr.mock_calls == [
        call.field("total"),
        call.add("$price", "$tax"),
        call.field("label"),
        call.to_upper("$name"),
        call.field("day"),
        call.date_to_string("%Y-%m-%d", "$created_at"),
    ]


def test_expression_builder_errors_propagate(stage: ExpressionStage, expr: MagicMock):
    expr.divide.side_effect = ZeroDivisionError("divisor resolves to zero")

    with pytest.raises(ZeroDivisionError, match="divisor resolves to zero"):
        stage.divide("$a", 0)


def test_operator_without_collaborator_method_raises_attribute_error():
    expr = MagicMock(spec=["get_expression"])
    stage = ExpressionStage(AggregationBuilder(lambda: expr))

    with pytest.raises(AttributeError):
        stage.add(1, 2)


# -- fallback ----------------------------------------------------------------


def test_undeclared_operator_is_forwarded(stage: ExpressionStage, expr: MagicMock):
    result = stage.date_from_string("2024-01-01", format="%Y-%m-%d")

    assert result is stage
    expr.date_from_string.assert_called_once_with("2024-01-01", format="%Y-%m-%d")


def test_undeclared_operators_chain_with_declared_ones(
    stage: ExpressionStage, expr: MagicMock
):
    stage.field("n").convert("$raw", "int").add(1, 2).round("$price", 2)

    assert expr.mock_calls == [
        call.field("n"),
        call.convert("$raw", "int"),
        call.add(1, 2),
        call.round("$price", 2),
    ]


def test_undeclared_operator_missing_on_collaborator():
    expr = MagicMock(spec=["add", "get_expression"])
    stage = ExpressionStage(AggregationBuilder(lambda: expr))

    assert hasattr(stage, "add") is True
    assert hasattr(stage, "date_from_string") is False
    with pytest.raises(AttributeError):
        stage.date_from_string("2024-01-01")


def test_private_names_never_fall_back(stage: ExpressionStage, expr: MagicMock):
    with pytest.raises(AttributeError):
        stage._internal  # noqa: B018
    assert expr.mock_calls == []


def test_undeclared_operator_is_logged(
    stage: ExpressionStage, caplog: pytest.LogCaptureFixture
):
    with caplog.at_level(logging.DEBUG, logger="cqrs_ddd.aggregation"):
        stage.trim("$name")

    assert any(
        "Forwarding undeclared operator 'trim'" in rec.message for rec in caplog.records
    )


# -- strict operators --------------------------------------------------------


def test_strict_stage_rejects_undeclared_operator(
    strict_stage: ExpressionStage, expr: MagicMock
):
    with pytest.raises(UnknownOperatorError) as exc_info:
        strict_stage.date_from_string("2024-01-01")

    assert exc_info.value.operator == "date_from_string"
    expr.date_from_string.assert_not_called()


def test_strict_stage_suggests_declared_operators(strict_stage: ExpressionStage):
    with pytest.raises(UnknownOperatorError) as exc_info:
        strict_stage.ad(1, 2)

    assert "add" in exc_info.value.suggestions
    assert "Did you mean" in str(exc_info.value)


def test_strict_stage_still_forwards_declared_operators(
    strict_stage: ExpressionStage, expr: MagicMock
):
    assert strict_stage.add(1, 2) is strict_stage
    expr.add.assert_called_once_with(1, 2)


def test_strict_stage_hasattr_is_false_for_undeclared(strict_stage: ExpressionStage):
    assert hasattr(strict_stage, "date_from_string") is False


def test_strict_stage_builds_switch_branches(
    strict_stage: ExpressionStage, expr: MagicMock
):
    result = (
        strict_stage.field("grade")
        .switch()
        .case({"$gte": ["$score", 90]})
        .then("A")
        .case({"$gte": ["$score", 80]})
        .then("B")
        .default("F")
    )

    assert result is strict_stage
    assert expr.mock_calls == [
        call.field("grade"),
        call.switch(),
        call.case({"$gte": ["$score", 90]}),
        call.then("A"),
        call.case({"$gte": ["$score", 80]}),
        call.then("B"),
        call.default("F"),
    ]
