"""Composable field validators.

A validator is any callable taking a single value and returning None, raising
SchemaError when the value does not fit. Validators hold no state besides
lazily resolved thunks, so running one twice on the same value always gives
the same outcome.

Example:
    names = array_of(assert_value_type(str))
    names(["a", "b"])  # ok
    names(["a", 1])    # SchemaError: expected str at index 1, got 1

"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeAlias

from scssforge.errors import SchemaError
from scssforge.nodes import Node

Validator: TypeAlias = Callable[[Any], None]
ValidatorThunk: TypeAlias = Callable[[], Validator]

_NUMBER_KINDS = frozenset({int, float})


def _describe_kinds(kinds: tuple[type, ...]) -> str:
    if _NUMBER_KINDS.issubset(kinds) and len(kinds) == len(_NUMBER_KINDS):
        return "number"
    return " | ".join(kind.__name__ for kind in kinds)


def assert_value_type(*kinds: type) -> Validator:
    """Require a primitive value of one of the given kinds.

    bool is a subclass of int in Python but never counts as a number here:
    it only passes when bool is listed explicitly.
    """
    if not kinds:
        msg = "assert_value_type needs at least one kind"
        raise ValueError(msg)
    expected = _describe_kinds(kinds)
    accepts_bool = bool in kinds

    def validate(value: Any) -> None:
        if isinstance(value, bool) and not accepts_bool:
            raise SchemaError(expected, value)
        if not isinstance(value, kinds):
            raise SchemaError(expected, value)

    return validate


def assert_type(node_cls: type[Node]) -> Validator:
    """Require a node whose tag matches node_cls."""

    def validate(value: Any) -> None:
        if not isinstance(value, Node) or value.tag != node_cls.tag:
            raise SchemaError(node_cls.tag, value)

    return validate


def assert_any(value: Any) -> None:  # noqa: ARG001
    """Accept any value, for intentionally untyped fields."""


def deferred(thunk: ValidatorThunk) -> Validator:
    """Resolve a validator on first use.

    Lets a variant refer to one declared later in the module, or to itself.
    """
    resolved: list[Validator] = []

    def validate(value: Any) -> None:
        if not resolved:
            resolved.append(thunk())
        resolved[0](value)

    return validate


def assert_one_of(
    alternatives: Iterable[Validator] | Callable[[], Iterable[Validator]],
) -> Validator:
    """Require the value to satisfy at least one alternative.

    `alternatives` may be a zero-argument callable returning the validators,
    resolved the first time the validator runs.
    """
    resolved: list[tuple[Validator, ...]] = []
    if not callable(alternatives):
        resolved.append(tuple(alternatives))

    def validate(value: Any) -> None:
        if not resolved:
            resolved.append(tuple(alternatives()))  # type: ignore[operator]
        attempted: list[str] = []
        for alternative in resolved[0]:
            try:
                alternative(value)
            except SchemaError as e:
                attempted.append(e.expected)
            else:
                return
        raise SchemaError(" | ".join(attempted), value)

    return validate


def array_of(validator: Validator) -> Validator:
    """Require a list or tuple whose every element satisfies validator."""

    def validate(value: Any) -> None:
        if not isinstance(value, list | tuple):
            raise SchemaError("sequence", value)
        for i, element in enumerate(value):
            try:
                validator(element)
            except SchemaError as e:
                raise SchemaError(e.expected, element, index=i) from e

    return validate


__all__ = [
    "Validator",
    "ValidatorThunk",
    "array_of",
    "assert_any",
    "assert_one_of",
    "assert_type",
    "assert_value_type",
    "deferred",
]
