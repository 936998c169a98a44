"""Exception hierarchy for schema validation and SCSS generation."""

from __future__ import annotations

from typing import Any

_MAX_VALUE_REPR = 60  # Maximum length of an offending value in error messages


def _short_repr(value: Any) -> str:
    text = repr(value)
    if len(text) > _MAX_VALUE_REPR:
        return text[: _MAX_VALUE_REPR - 3] + "..."
    return text


class ScssForgeError(Exception):
    """Base class for all scssforge errors."""


class SchemaError(ScssForgeError, TypeError):
    """A value failed a field validator.

    Raised by the validators themselves; node construction wraps it into a
    SchemaValidationError that also names the type and field.
    """

    def __init__(self, expected: str, value: Any, index: int | None = None) -> None:
        self.expected = expected
        self.value = value
        self.index = index
        where = f" at index {index}" if index is not None else ""
        super().__init__(f"expected {expected}{where}, got {_short_repr(value)}")


class SchemaValidationError(SchemaError):
    """A node was constructed with a field value that violates its schema."""

    def __init__(
        self,
        type_name: str,
        field: str,
        value: Any,
        expected: str,
        index: int | None = None,
    ) -> None:
        self.type_name = type_name
        self.field = field
        self.value = value
        self.expected = expected
        self.index = index
        where = f"[{index}]" if index is not None else ""
        msg = (
            f"Invalid value for {type_name}.{field}{where}: "
            f"expected {expected}, got {_short_repr(value)}"
        )
        ScssForgeError.__init__(self, msg)


class GenerationError(ScssForgeError):
    """Base class for errors raised while walking a tree.

    `path` holds the tags of the nodes being emitted, root first.
    """

    path: tuple[str, ...]

    def describe_path(self) -> str:
        """Render the tree path as `StyleSheet > Rule > Declaration`."""
        return " > ".join(self.path) if self.path else "<root>"


class UnknownNodeType(GenerationError):
    """A node's tag has no registered emission routine."""

    def __init__(self, tag: str, path: tuple[str, ...] = ()) -> None:
        self.tag = tag
        self.path = path
        super().__init__(
            f"No emission routine registered for node type '{tag}' "
            f"(at {self.describe_path()})",
        )


class MalformedChildShape(GenerationError):
    """A child passed schema validation but cannot be emitted."""

    def __init__(
        self,
        type_name: str,
        field: str | None,
        value: Any,
        path: tuple[str, ...] = (),
    ) -> None:
        self.type_name = type_name
        self.field = field
        self.value = value
        self.path = path
        location = f"{type_name}.{field}" if field else type_name
        super().__init__(
            f"Cannot emit {_short_repr(value)} in {location} "
            f"(at {self.describe_path()})",
        )
