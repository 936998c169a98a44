"""Tree walking: dispatch nodes to their emission routines."""

from __future__ import annotations

import logging
from typing import Any

from scssforge.errors import MalformedChildShape, UnknownNodeType
from scssforge.nodes import Node
from scssforge.printer import Printer, PrinterOptions
from scssforge.schema import type_definition

logger = logging.getLogger(__name__)


def dispatch(printer: Printer, node: Any, parent: Node | None = None) -> None:
    """Emit node through its variant's emission routine.

    Traversal is depth-first: each routine calls back into the printer for
    its children, passing itself as their parent.

    Raises:
        MalformedChildShape: If node is not a Node at all
        UnknownNodeType: If node's tag has no registered emission routine

    """
    if not isinstance(node, Node):
        type_name = parent.tag if parent is not None else "<root>"
        raise MalformedChildShape(type_name, None, node, printer.path)

    node_cls = Node.registry.get(node.tag)
    if node_cls is not type(node):
        raise UnknownNodeType(node.tag, (*printer.path, node.tag))

    definition = type_definition(node_cls)
    if definition.emit is None:
        raise UnknownNodeType(node.tag, (*printer.path, node.tag))

    printer.enter(node.tag)
    definition.emit(node, printer, parent)
    printer.leave()


def generate(
    node: Node,
    parent: Node | None = None,
    *,
    options: PrinterOptions | None = None,
) -> str:
    """Render a tree to SCSS source.

    Each call uses a fresh Printer, so nothing carries over between calls.

    Args:
        node: Root of the tree, usually a StyleSheet
        parent: Optional context the root is rendered under
        options: Formatting options

    Returns:
        The generated SCSS source

    Example:
        rule = Rule(selectors=[".box"], declarations=[
            Declaration(property="color", value="red"),
        ])
        generate(rule)  # ".box {\\n  color: red;\\n}"

    """
    printer = Printer(options)
    logger.debug("Generating SCSS from %s", getattr(node, "tag", type(node).__name__))
    dispatch(printer, node, parent)
    source = printer.get()
    logger.debug("Generated %d character(s) of SCSS", len(source))
    return source
