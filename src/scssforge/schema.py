"""Schema extraction: field validators, type definitions and constructors."""

from __future__ import annotations

import logging
import types
from collections.abc import Callable, Mapping, Sequence
from dataclasses import MISSING, dataclass, fields
from functools import cache
from typing import (
    TYPE_CHECKING,
    TypeAlias,
    Annotated,
    Any,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

from scssforge.errors import SchemaError, SchemaValidationError
from scssforge.nodes import Node
from scssforge.validators import (
    Validator,
    array_of,
    assert_any,
    assert_one_of,
    assert_type,
    assert_value_type,
)

if TYPE_CHECKING:
    from scssforge.printer import Printer

logger = logging.getLogger(__name__)

EmitRoutine: TypeAlias = "Callable[[Any, Printer, Node | None], None]"


@dataclass(frozen=True)
class FieldSchema:
    """Schema for a node field."""

    name: str
    optional: bool
    validate: Validator


@dataclass(frozen=True)
class TypeDefinition:
    """Complete schema and emission routine for a node variant."""

    tag: str
    node_class: type[Node]
    fields: tuple[FieldSchema, ...]
    emit: EmitRoutine | None

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    def validate(self, node: Node) -> None:
        """Check every field of node, stopping at the first violation.

        Raises:
            SchemaValidationError: naming this type, the field and the value

        """
        for field in self.fields:
            self.validate_field(field, getattr(node, field.name))

    def validate_field(self, field: FieldSchema, value: Any) -> None:
        if value is None and field.optional:
            return
        try:
            field.validate(value)
        except SchemaError as e:
            raise SchemaValidationError(
                self.tag,
                field.name,
                e.value,
                e.expected,
                index=e.index,
            ) from e

    def check_field_names(self, values: Mapping[str, Any]) -> None:
        """Reject unknown fields and missing required fields by name."""
        known = self.field_names
        for name, value in values.items():
            if name not in known:
                expected = f"one of the fields {', '.join(known) or '(none)'}"
                raise SchemaValidationError(self.tag, name, value, expected)
        for field in self.fields:
            if not field.optional and field.name not in values:
                raise SchemaValidationError(self.tag, field.name, None, "a value")


def validator_for(hint: Any) -> Validator:
    """Convert a resolved type annotation to a field validator."""
    origin = get_origin(hint)
    args = get_args(hint)

    if hint is Any:
        return assert_any

    if origin is Annotated:
        explicit = [a for a in args[1:] if callable(a)]
        if not explicit:
            msg = f"Annotated field needs a validator: {hint}"
            raise TypeError(msg)
        return explicit[0]

    if hint is bool:
        return assert_value_type(bool)
    if hint is str:
        return assert_value_type(str)
    if hint is int:
        return assert_value_type(int)
    if hint is float:
        # Sass has a single number type
        return assert_value_type(int, float)

    if isinstance(hint, type) and issubclass(hint, Node) and hint is not Node:
        return assert_type(hint)

    if origin is tuple:
        if len(args) != 2 or args[1] is not Ellipsis:  # noqa: PLR2004
            msg = f"Only homogeneous tuple[X, ...] fields are supported: {hint}"
            raise TypeError(msg)
        return array_of(validator_for(args[0]))

    if origin in (list, Sequence):
        if not args:
            msg = f"{hint} must have an element type"
            raise TypeError(msg)
        return array_of(validator_for(args[0]))

    if isinstance(hint, types.UnionType) or origin is Union:
        options = [a for a in args if a is not type(None)]
        if len(options) == 1:
            return validator_for(options[0])
        return assert_one_of([validator_for(a) for a in options])

    msg = f"Cannot derive a validator from: {hint}"
    raise TypeError(msg)


@cache
def type_definition(cls: type[Node]) -> TypeDefinition:
    """Get the type definition for a node class.

    Annotations are resolved on first use rather than at class creation, so
    variants may reference each other (or themselves) in any order. The
    result is cached and never mutated afterwards.
    """
    hints = get_type_hints(cls, include_extras=True)
    field_schemas = tuple(
        FieldSchema(
            name=f.name,
            optional=f.default is not MISSING or f.default_factory is not MISSING,
            validate=validator_for(hints[f.name]),
        )
        for f in fields(cls)
        if not f.name.startswith("_")
    )
    definition = TypeDefinition(
        tag=cls.tag,
        node_class=cls,
        fields=field_schemas,
        emit=getattr(cls, "emit", None),
    )
    logger.debug(
        "Built type definition for %s with %d field(s)",
        cls.tag,
        len(field_schemas),
    )
    return definition


def make_constructor(cls: type[Node]) -> Callable[..., Node]:
    """Build a keyword-only factory for a node class.

    Unlike calling the class directly, unknown and missing fields are
    reported as SchemaValidationError rather than a bare TypeError.
    """

    def construct(**values: Any) -> Node:
        type_definition(cls).check_field_names(values)
        return cls(**values)

    construct.__name__ = cls.__name__
    construct.__qualname__ = cls.__qualname__
    construct.__doc__ = cls.__doc__
    return construct


def all_definitions() -> dict[str, TypeDefinition]:
    """Get the type definitions of all registered node classes."""
    return {tag: type_definition(cls) for tag, cls in Node.registry.items()}
