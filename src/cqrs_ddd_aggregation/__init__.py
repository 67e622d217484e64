"""Chainable MongoDB aggregation pipeline and expression operator builders."""

from .builder import AggregationBuilder
from .exceptions import AggregationError, StageNotFoundError, UnknownOperatorError
from .operators import EXPRESSION_OPERATORS, GROUP_ACCUMULATORS, PROJECT_ACCUMULATORS
from .options import AggregationOptions
from .ports import IExpressionBuilder
from .signatures import (
    OperatorRegistry,
    OperatorSignature,
    make_passthrough,
    passthrough_operators,
)
from .stages import (
    AddFields,
    Count,
    Group,
    Limit,
    Match,
    Operator,
    Project,
    Skip,
    Sort,
    Stage,
    Unwind,
)

__all__ = [
    # Builder
    "AggregationBuilder",
    "AggregationOptions",
    # Stages
    "Stage",
    "Operator",
    "AddFields",
    "Project",
    "Group",
    "Match",
    "Sort",
    "Limit",
    "Skip",
    "Unwind",
    "Count",
    # Operator table
    "OperatorSignature",
    "OperatorRegistry",
    "make_passthrough",
    "passthrough_operators",
    "EXPRESSION_OPERATORS",
    "GROUP_ACCUMULATORS",
    "PROJECT_ACCUMULATORS",
    # Ports
    "IExpressionBuilder",
    # Exceptions
    "AggregationError",
    "UnknownOperatorError",
    "StageNotFoundError",
]
