"""Token sink that accumulates formatted SCSS text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from scssforge.nodes import Node


@dataclass(frozen=True)
class PrinterOptions:
    """Formatting options for a single generation pass.

    Attributes:
        indent: Text written once per nesting level at the start of a line
        quote: Quote character wrapped around Sass strings and import paths
        trailing_newline: End the generated source with a newline

    """

    indent: str = "  "
    quote: str = "'"
    trailing_newline: bool = False


def format_value(value: Any) -> str:
    """Stringify a primitive the way Sass spells it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class Printer:
    """Stateful token sink.

    Owns the cursor state of a single generation pass: indent depth, whether
    the cursor sits at the start of a line, and the tags of the nodes being
    emitted. Not to be shared between passes.
    """

    def __init__(self, options: PrinterOptions | None = None) -> None:
        self.options = options or PrinterOptions()
        self._parts: list[str] = []
        self._depth = 0
        self._at_line_start = True
        self._last = ""
        self._path: list[str] = []
        self._positions: list[int | None] = []

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def at_line_start(self) -> bool:
        return self._at_line_start

    @property
    def path(self) -> tuple[str, ...]:
        """Tags of the nodes currently being emitted, root first."""
        return tuple(self._path)

    @property
    def position(self) -> int | None:
        """Index of the node being emitted among its siblings, if printed from a list."""
        return self._positions[-1] if self._positions else None

    def _append(self, text: str) -> None:
        self._parts.append(text)
        self._last = text[-1]

    def token(self, value: Any) -> None:
        """Append a literal, writing pending indentation first."""
        text = value if isinstance(value, str) else format_value(value)
        if not text:
            return
        if self._at_line_start:
            if indent := self.options.indent * self._depth:
                self._append(indent)
            self._at_line_start = False
        self._append(text)

    def quoted(self, value: str) -> None:
        """Append value as a string literal in the configured quote character.

        Backslashes and the quote character itself are escaped.
        """
        quote = self.options.quote
        escaped = value.replace("\\", "\\\\").replace(quote, f"\\{quote}")
        self.token(f"{quote}{escaped}{quote}")

    def space(self) -> None:
        """Append a single space unless one is already pending.

        No space is written at the start of a line or right after `(`.
        """
        if self._at_line_start or self._last.isspace() or self._last == "(":
            return
        self._append(" ")

    def newline(self) -> None:
        """End the current line. Calling twice leaves a blank line."""
        self._append("\n")
        self._at_line_start = True

    def maybe_newline(self) -> None:
        """End the current line unless the cursor is already at its start."""
        if not self._at_line_start:
            self.newline()

    def block_start(self, open_: str = "{") -> None:
        """Open an indented block on the current line."""
        self.space()
        self.token(open_)
        self._depth += 1
        self.newline()

    def block_end(self, close: str = "}") -> None:
        """Close the innermost block on its own line."""
        if self._depth == 0:
            msg = f"Cannot close block with '{close}': no block is open"
            raise RuntimeError(msg)
        self._depth -= 1
        self.maybe_newline()
        self.token(close)

    def print(
        self,
        node: Any,
        parent: Node | None = None,
        *,
        position: int | None = None,
    ) -> None:
        """Emit a child node, with parent as its context.

        position is the child's index in the parent's list it was printed
        from; the child reads it back through `Printer.position`.
        """
        from scssforge.generator import dispatch  # noqa: PLC0415

        self._positions.append(position)
        dispatch(self, node, parent)
        self._positions.pop()

    def enter(self, tag: str) -> None:
        self._path.append(tag)

    def leave(self) -> None:
        self._path.pop()

    def get(self) -> str:
        """Materialize the accumulated text."""
        text = "".join(self._parts)
        if self.options.trailing_newline and not text.endswith("\n"):
            text += "\n"
        return text
