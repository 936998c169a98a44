"""SCSS node variants and their emission routines.

Each variant is a frozen Node subclass whose annotations double as its
schema, and whose `emit` method renders it to a Printer. Children are always
emitted with an explicit parent argument; nodes never point back up the tree.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from scssforge.errors import MalformedChildShape
from scssforge.nodes import Node
from scssforge.schema import TypeDefinition, make_constructor, type_definition

if TYPE_CHECKING:
    from scssforge.printer import Printer


def _print_joined(
    printer: Printer,
    items: Sequence[Any],
    parent: Node,
    *,
    dollar_identifiers: bool = False,
) -> None:
    """Emit items separated by a comma and a space."""
    for i, item in enumerate(items):
        if dollar_identifiers and isinstance(item, Identifier):
            printer.token("$")
        printer.print(item, parent, position=i)
        if i != len(items) - 1:
            printer.token(",")
            printer.space()


def _print_lines(printer: Printer, items: Sequence[Any], parent: Node) -> None:
    """Emit items one per line."""
    for i, item in enumerate(items):
        printer.print(item, parent, position=i)
        if i != len(items) - 1:
            printer.newline()


# ============================================================================
# Comments and identifiers
# ============================================================================


class Comment(Node):
    """Line comment; one `//` line per line of value."""

    value: str | None = None

    def emit(self, printer: Printer, parent: Node | None = None) -> None:  # noqa: ARG002
        if not self.value:
            return

        lines = self.value.split("\n")
        for i, line in enumerate(lines):
            printer.token(f"// {line}" if line else "//")
            if i != len(lines) - 1:
                printer.newline()


class Identifier(Node):
    """A name, printed as a Sass variable in variable-consuming positions."""

    name: str

    def emit(self, printer: Printer, parent: Node | None = None) -> None:
        if parent is not None and parent.tag in _VARIABLE_CONTEXTS:
            printer.token("$")
        printer.token(self.name)


# ============================================================================
# Blocks
# ============================================================================


class BlockStatement(Node):
    body: tuple[Any, ...]

    def emit(self, printer: Printer, parent: Node | None = None) -> None:  # noqa: ARG002
        printer.block_start()
        _print_lines(printer, self.body, self)
        printer.block_end()


# ============================================================================
# Values
# ============================================================================


class SassBoolean(Node):
    value: bool

    def emit(self, printer: Printer, parent: Node | None = None) -> None:  # noqa: ARG002
        printer.token(self.value)


class SassColor(Node):
    """A colour literal such as `#ff0000` or `rebeccapurple`."""

    value: str

    def emit(self, printer: Printer, parent: Node | None = None) -> None:  # noqa: ARG002
        printer.token(self.value)


class SassNumber(Node):
    value: float

    def emit(self, printer: Printer, parent: Node | None = None) -> None:  # noqa: ARG002
        printer.token(self.value)


class SassString(Node):
    value: str

    def emit(self, printer: Printer, parent: Node | None = None) -> None:  # noqa: ARG002
        printer.quoted(self.value)


class SassValue(Node):
    """Raw value embedded verbatim, for anything the node types cannot express."""

    value: Any

    def emit(self, printer: Printer, parent: Node | None = None) -> None:  # noqa: ARG002
        printer.token(self.value)


class SassList(Node):
    elements: tuple[
        SassBoolean
        | SassColor
        | SassList
        | SassMap
        | SassNumber
        | SassString
        | SassValue
        | Identifier,
        ...,
    ]

    def emit(self, printer: Printer, parent: Node | None = None) -> None:  # noqa: ARG002
        printer.token("(")
        _print_joined(printer, self.elements, self)
        printer.token(")")


class SassMap(Node):
    properties: tuple[SassMapProperty, ...]

    def emit(self, printer: Printer, parent: Node | None = None) -> None:  # noqa: ARG002
        if not self.properties:
            printer.token("()")
            return

        printer.block_start("(")
        for i, prop in enumerate(self.properties):
            printer.print(prop, self, position=i)
            if i != len(self.properties) - 1:
                printer.token(",")
                printer.newline()
        printer.block_end(")")


class SassMapProperty(Node):
    key: Identifier
    value: SassBoolean | SassColor | SassList | SassMap | SassNumber | SassString | SassValue
    quoted: bool = False

    def emit(self, printer: Printer, parent: Node | None = None) -> None:  # noqa: ARG002
        if self.quoted:
            quote = printer.options.quote
            printer.token(quote)
            printer.print(self.key, self)
            printer.token(quote)
        else:
            printer.print(self.key, self)
        printer.token(":")
        printer.space()
        printer.print(self.value, self)


# ============================================================================
# Functions and mixins
# ============================================================================


class SassFunction(Node):
    """`@function name($params...) { ... }`."""

    id: Identifier
    body: BlockStatement
    params: tuple[AssignmentPattern | Identifier | RestPattern, ...] | None = None

    def emit(self, printer: Printer, parent: Node | None = None) -> None:
        printer.token("@function")
        printer.space()
        printer.print(self.id, parent)
        printer.token("(")
        _print_joined(printer, self.params or (), self)
        printer.token(")")
        printer.space()
        printer.print(self.body, self)


class SassMixin(Node):
    """`@mixin name($params...) { ... }`."""

    id: Identifier
    body: BlockStatement
    params: tuple[AssignmentPattern | Identifier | RestPattern, ...] | None = None

    def emit(self, printer: Printer, parent: Node | None = None) -> None:
        printer.token("@mixin")
        printer.space()
        printer.print(self.id, parent)
        printer.token("(")
        _print_joined(printer, self.params or (), self)
        printer.token(")")
        printer.space()
        printer.print(self.body, self)


# ============================================================================
# Calls
# ============================================================================


class SassFunctionCall(Node):
    id: Identifier
    params: (
        tuple[
            Identifier
            | SassBoolean
            | SassColor
            | SassList
            | SassMap
            | SassNumber
            | SassString
            | SassValue,
            ...,
        ]
        | None
    ) = None

    def emit(self, printer: Printer, parent: Node | None = None) -> None:  # noqa: ARG002
        printer.space()
        printer.print(self.id)
        printer.token("(")
        _print_joined(printer, self.params or (), self, dollar_identifiers=True)
        printer.token(")")


class SassMixinCall(Node):
    """`@include name(args)`, optionally passing a content block."""

    id: Identifier
    params: (
        tuple[
            Identifier
            | SassBoolean
            | SassColor
            | SassList
            | SassMap
            | SassNumber
            | SassString
            | SassValue,
            ...,
        ]
        | None
    ) = None
    body: BlockStatement | None = None

    def emit(self, printer: Printer, parent: Node | None = None) -> None:  # noqa: ARG002
        printer.token("@include")
        printer.space()
        printer.print(self.id)
        printer.token("(")
        _print_joined(printer, self.params or (), self, dollar_identifiers=True)
        printer.token(")")

        if self.body is not None:
            printer.print(self.body, self)

        printer.token(";")


class CallExpression(Node):
    """Plain CSS or Sass function call: `callee(args)`."""

    callee: Identifier
    arguments: tuple[Any, ...] | None = None

    def emit(self, printer: Printer, parent: Node | None = None) -> None:  # noqa: ARG002
        printer.print(self.callee)
        printer.token("(")
        _print_joined(printer, self.arguments or (), self)
        printer.token(")")


# ============================================================================
# Rules
# ============================================================================


class Declaration(Node):
    """`property: value;` where value is raw text or a call."""

    property: str
    value: str | CallExpression | SassFunctionCall

    def emit(self, printer: Printer, parent: Node | None = None) -> None:  # noqa: ARG002
        printer.token(self.property)
        printer.token(":")
        printer.space()
        if isinstance(self.value, str):
            printer.token(self.value)
        elif isinstance(self.value, CallExpression | SassFunctionCall):
            printer.print(self.value, self)
        else:
            raise MalformedChildShape(self.tag, "value", self.value, printer.path)
        printer.token(";")


class Rule(Node):
    """Style rule: selectors followed by a block of declarations."""

    selectors: tuple[str, ...]
    declarations: tuple[Declaration | Comment | SassMixinCall | Rule, ...]

    def emit(self, printer: Printer, parent: Node | None = None) -> None:  # noqa: ARG002
        printer.token(", ".join(self.selectors))
        printer.space()
        printer.block_start()
        _print_lines(printer, self.declarations, self)
        printer.block_end()


# ============================================================================
# At-rules and directives
# ============================================================================


class AtRule(Node):
    """`@name media { rules }`; the block is left out when there are no rules."""

    name: str
    media: str
    children: tuple[Rule, ...]

    def emit(self, printer: Printer, parent: Node | None = None) -> None:  # noqa: ARG002
        printer.token(f"@{self.name}")
        if self.media:
            printer.space()
            printer.token(self.media)

        if self.children:
            printer.block_start()
            _print_lines(printer, self.children, self)
            printer.block_end()


def _siblings(parent: Node | None) -> tuple[Any, ...]:
    """The statement list of parent, or an empty tuple if it holds a single node."""
    for name in ("children", "body"):
        collection = getattr(parent, name, None)
        if isinstance(collection, tuple):
            return collection
    return ()


class AtContent(Node):
    def emit(self, printer: Printer, parent: Node | None = None) -> None:  # noqa: ARG002
        if printer.position != 0:
            printer.maybe_newline()
        printer.token("@content;")


class AtReturn(Node):
    argument: Any

    def emit(self, printer: Printer, parent: Node | None = None) -> None:  # noqa: ARG002
        if printer.position != 0:
            printer.maybe_newline()
        printer.token("@return")
        printer.space()
        printer.print(self.argument, self)
        printer.token(";")


# ============================================================================
# Assignment
# ============================================================================


class Assignment(Node):
    """Variable declaration: `$id: init [!default] [!global];`."""

    id: Identifier
    init: (
        CallExpression
        | Identifier
        | SassBoolean
        | SassColor
        | SassFunctionCall
        | SassList
        | SassMap
        | SassNumber
        | SassString
        | SassValue
    )
    default: bool = False
    global_: bool = False

    def emit(self, printer: Printer, parent: Node | None = None) -> None:
        printer.print(self.id, self)
        printer.token(":")
        printer.space()
        printer.print(self.init, self)

        if self.default:
            printer.space()
            printer.token("!default")
        if self.global_:
            printer.space()
            printer.token("!global")

        printer.token(";")

        if _ends_group(printer.position, _siblings(parent)):
            printer.newline()


def _ends_group(position: int | None, siblings: tuple[Any, ...]) -> bool:
    """Whether a blank line should follow to close a run of assignments.

    True for the last assignment of a run of sibling assignments, or a lone
    one, but only when some other statement follows it.
    """
    if position is None or position >= len(siblings) - 1:
        return False
    return not isinstance(siblings[position + 1], Assignment | Newline)


class AssignmentPattern(Node):
    """Parameter with a default value: `$left: right`."""

    left: Identifier
    right: Any

    def emit(self, printer: Printer, parent: Node | None = None) -> None:  # noqa: ARG002
        printer.print(self.left, self)
        printer.token(":")
        printer.space()
        printer.print(self.right, self)


class RestPattern(Node):
    """Variable-length parameter: `$id...`."""

    id: Identifier

    def emit(self, printer: Printer, parent: Node | None = None) -> None:
        printer.print(self.id, parent)
        printer.token("...")


# ============================================================================
# Imports
# ============================================================================


class SassImport(Node):
    path: str

    def emit(self, printer: Printer, parent: Node | None = None) -> None:  # noqa: ARG002
        printer.token("@import")
        printer.space()
        printer.quoted(self.path)
        printer.token(";")


class SassModule(Node):
    path: str

    def emit(self, printer: Printer, parent: Node | None = None) -> None:  # noqa: ARG002
        printer.token("@use")
        printer.space()
        printer.quoted(self.path)
        printer.token(";")


class SassForward(Node):
    path: str

    def emit(self, printer: Printer, parent: Node | None = None) -> None:  # noqa: ARG002
        printer.token("@forward")
        printer.space()
        printer.quoted(self.path)
        printer.token(";")


# ============================================================================
# Control flow and expressions
# ============================================================================


class IfStatement(Node):
    """`@if` with an optional `@else if` / `@else` chain.

    An IfStatement that is the alternate of another prints as `if`, so
    chains come out as `@else if` rather than nested blocks.
    """

    test: Any
    consequent: BlockStatement | None = None
    alternate: IfStatement | BlockStatement | None = None

    def emit(self, printer: Printer, parent: Node | None = None) -> None:
        if parent is not None and parent.tag == IfStatement.tag:
            printer.space()
            printer.token("if")
        else:
            printer.token("@if")

        printer.space()
        printer.print(self.test, self)

        if self.consequent is None:
            printer.block_start()
            printer.block_end()
        else:
            printer.print(self.consequent, self)

        if self.alternate is not None:
            printer.space()
            printer.token("@else")
            printer.print(self.alternate, self)


class LogicalExpression(Node):
    """Binary expression such as `$a == 1` or `$n * 2`."""

    left: Any
    operator: str
    right: Any

    def emit(self, printer: Printer, parent: Node | None = None) -> None:  # noqa: ARG002
        printer.print(self.left, self)
        printer.space()
        printer.token(self.operator)
        printer.space()
        printer.print(self.right, self)


# ============================================================================
# Formatting and the stylesheet root
# ============================================================================


class Newline(Node):
    """Forces an extra line break; between siblings this leaves two blank lines."""

    def emit(self, printer: Printer, parent: Node | None = None) -> None:  # noqa: ARG002
        printer.newline()


class StyleSheet(Node):
    children: tuple[
        Assignment
        | AtRule
        | Comment
        | IfStatement
        | Newline
        | Rule
        | SassForward
        | SassFunction
        | SassImport
        | SassMixin
        | SassMixinCall
        | SassModule,
        ...,
    ]

    def emit(self, printer: Printer, parent: Node | None = None) -> None:  # noqa: ARG002
        _print_lines(printer, self.children, self)


# Parents under which an Identifier reads as a Sass variable
_VARIABLE_CONTEXTS = frozenset(
    {
        Assignment.tag,
        AssignmentPattern.tag,
        CallExpression.tag,
        LogicalExpression.tag,
        RestPattern.tag,
        SassFunction.tag,
        SassList.tag,
        SassMixin.tag,
    },
)

_VARIANTS: tuple[type[Node], ...] = (
    Assignment,
    AssignmentPattern,
    AtContent,
    AtReturn,
    AtRule,
    BlockStatement,
    CallExpression,
    Comment,
    Declaration,
    Identifier,
    IfStatement,
    LogicalExpression,
    Newline,
    RestPattern,
    Rule,
    SassBoolean,
    SassColor,
    SassForward,
    SassFunction,
    SassFunctionCall,
    SassImport,
    SassList,
    SassMap,
    SassMapProperty,
    SassMixin,
    SassMixinCall,
    SassModule,
    SassNumber,
    SassString,
    SassValue,
    StyleSheet,
)

CONSTRUCTORS: Mapping[str, Callable[..., Node]] = MappingProxyType(
    {cls.tag: make_constructor(cls) for cls in _VARIANTS},
)
TYPE_DEFINITIONS: Mapping[str, TypeDefinition] = MappingProxyType(
    {cls.tag: type_definition(cls) for cls in _VARIANTS},
)
