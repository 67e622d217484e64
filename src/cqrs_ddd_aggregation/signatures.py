"""
Declarative operator signatures and passthrough generation.

Each aggregation operator is described once by an :class:`OperatorSignature`
(name, arity, optional and variadic parameters).  The
:func:`passthrough_operators` class decorator turns a batch of signatures
into real methods that forward to the stage's expression builder and
return the stage for chaining.

Example::

    @passthrough_operators(
        OperatorSignature("add", "$add", ("expression1", "expression2"),
                          variadic="expressions"),
    )
    class MyStage(Operator):
        ...

    MyStage(builder).add(1, 2, 3)   # → expr.add(1, 2, 3)
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

_POSITIONAL = inspect.Parameter.POSITIONAL_OR_KEYWORD

C = TypeVar("C", bound=type)


@dataclass(frozen=True)
class OperatorSignature:
    """
    Parameter shape of a single aggregation operator.

    Attributes:
        name: Method name on both the stage and the expression builder.
        operator: The MongoDB operator, e.g. ``"$dateToString"``.
        params: Required positional parameters.
        defaults: Optional trailing parameters as ``(name, default)`` pairs.
            Defaults are forwarded explicitly when omitted by the caller.
        variadic: Name of a ``*args`` tail, or ``None`` for fixed arity.
        doc: One-line description used as the method docstring.
    """

    name: str
    operator: str
    params: tuple[str, ...] = ()
    defaults: tuple[tuple[str, Any], ...] = ()
    variadic: str | None = None
    doc: str = ""

    @property
    def min_args(self) -> int:
        return len(self.params)

    @property
    def max_args(self) -> int | None:
        """Upper bound on positional arguments; ``None`` when variadic."""
        if self.variadic is not None:
            return None
        return len(self.params) + len(self.defaults)

    def to_signature(self) -> inspect.Signature:
        """Build the method signature, including the leading ``self``."""
        parameters = [inspect.Parameter("self", _POSITIONAL)]
        parameters.extend(inspect.Parameter(p, _POSITIONAL) for p in self.params)
        parameters.extend(
            inspect.Parameter(p, _POSITIONAL, default=d) for p, d in self.defaults
        )
        if self.variadic is not None:
            parameters.append(
                inspect.Parameter(self.variadic, inspect.Parameter.VAR_POSITIONAL)
            )
        return inspect.Signature(parameters)


class OperatorRegistry:
    """
    Registry of operator signatures keyed by method name.

    Each stage class owns its own registry; subclasses receive a copy
    so registering on a child never leaks into the parent.
    """

    def __init__(self) -> None:
        self._signatures: dict[str, OperatorSignature] = {}

    def register(self, signature: OperatorSignature) -> None:
        """Register (or replace) a signature."""
        self._signatures[signature.name] = signature

    def register_all(self, *signatures: OperatorSignature) -> None:
        for signature in signatures:
            self.register(signature)

    def get(self, name: str) -> OperatorSignature | None:
        """Return the registered signature or ``None``."""
        return self._signatures.get(name)

    def has(self, name: str) -> bool:
        return name in self._signatures

    def copy(self) -> OperatorRegistry:
        clone = OperatorRegistry()
        clone._signatures = dict(self._signatures)
        return clone

    @property
    def names(self) -> set[str]:
        return set(self._signatures)

    def __iter__(self) -> Iterator[OperatorSignature]:
        return iter(self._signatures.values())

    def __len__(self) -> int:
        return len(self._signatures)


def make_passthrough(signature: OperatorSignature, owner: str) -> Callable[..., Any]:
    """
    Build a method that forwards to the expression builder and returns ``self``.

    Arguments are bound against the operator's signature, declared
    defaults are filled in, and the full positional tuple is handed to
    ``self._forward``.
    """
    call_signature = signature.to_signature()
    name = signature.name

    def passthrough(self: Any, *args: Any, **kwargs: Any) -> Any:
        bound = call_signature.bind(self, *args, **kwargs)
        bound.apply_defaults()
        self._forward(name, bound.args[1:])
        return self

    passthrough.__name__ = name
    passthrough.__qualname__ = f"{owner}.{name}"
    passthrough.__signature__ = call_signature  # type: ignore[attr-defined]
    passthrough.__doc__ = signature.doc or f"Forward ``{signature.operator}``."
    return passthrough


def passthrough_operators(*signatures: OperatorSignature) -> Callable[[C], C]:
    """Class decorator installing one passthrough method per signature."""

    def decorate(cls: C) -> C:
        registry: OperatorRegistry = cls.operators.copy()  # type: ignore[attr-defined]
        registry.register_all(*signatures)
        for signature in signatures:
            setattr(cls, signature.name, make_passthrough(signature, cls.__qualname__))
        cls.operators = registry  # type: ignore[attr-defined]
        return cls

    return decorate
