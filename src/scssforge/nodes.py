"""Core AST node infrastructure with automatic registration."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import ClassVar, dataclass_transform


@dataclass(frozen=True, kw_only=True)
@dataclass_transform(frozen_default=True, kw_only_default=True)
class Node:
    """Base for stylesheet AST nodes.

    Subclassing registers the variant under its tag. Instances are frozen,
    validated against the variant's schema on construction, and never hold
    a reference to their parent.
    """

    tag: ClassVar[str]
    registry: ClassVar[dict[str, type[Node]]] = {}

    def __init_subclass__(cls, tag: str | None = None) -> None:
        """Register node subclass with automatic tag derivation."""
        dataclass(frozen=True, kw_only=True)(cls)
        cls.tag = tag if tag is not None else cls.__name__

        if (existing := Node.registry.get(cls.tag)) and existing is not cls:
            msg = (
                f"Tag '{cls.tag}' already registered to {existing}. "
                "Choose a different tag."
            )
            raise ValueError(msg)

        Node.registry[cls.tag] = cls

    def __post_init__(self) -> None:
        from scssforge.schema import type_definition  # noqa: PLC0415

        type_definition(type(self)).validate(self)

        # Freeze sequences so a constructed tree cannot change underneath us
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, list):
                object.__setattr__(self, f.name, tuple(value))

