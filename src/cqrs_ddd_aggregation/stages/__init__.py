"""Aggregation pipeline stages."""

from __future__ import annotations

from .add_fields import AddFields
from .base import Stage
from .basic import Count, Limit, Match, Skip, Sort, Unwind
from .group import Group
from .operator import Operator
from .project import Project

__all__ = [
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
]
