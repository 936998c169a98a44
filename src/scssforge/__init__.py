"""scssforge - Typed SCSS syntax trees and a deterministic SCSS generator."""

from scssforge.definitions import (
    CONSTRUCTORS,
    TYPE_DEFINITIONS,
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
from scssforge.errors import (
    GenerationError,
    MalformedChildShape,
    SchemaError,
    SchemaValidationError,
    ScssForgeError,
    UnknownNodeType,
)
from scssforge.generator import dispatch, generate
from scssforge.nodes import Node
from scssforge.printer import Printer, PrinterOptions
from scssforge.schema import (
    FieldSchema,
    TypeDefinition,
    all_definitions,
    make_constructor,
    type_definition,
)

__all__ = [
    # Registry
    "CONSTRUCTORS",
    "TYPE_DEFINITIONS",
    # Node variants
    "Assignment",
    "AssignmentPattern",
    "AtContent",
    "AtReturn",
    "AtRule",
    "BlockStatement",
    "CallExpression",
    "Comment",
    "Declaration",
    # Schema
    "FieldSchema",
    # Errors
    "GenerationError",
    "Identifier",
    "IfStatement",
    "LogicalExpression",
    "MalformedChildShape",
    "Newline",
    # Core types
    "Node",
    # Generation
    "Printer",
    "PrinterOptions",
    "RestPattern",
    "Rule",
    "SassBoolean",
    "SassColor",
    "SassForward",
    "SassFunction",
    "SassFunctionCall",
    "SassImport",
    "SassList",
    "SassMap",
    "SassMapProperty",
    "SassMixin",
    "SassMixinCall",
    "SassModule",
    "SassNumber",
    "SassString",
    "SassValue",
    "SchemaError",
    "SchemaValidationError",
    "ScssForgeError",
    "StyleSheet",
    "TypeDefinition",
    "UnknownNodeType",
    "all_definitions",
    "dispatch",
    "generate",
    "make_constructor",
    "type_definition",
]
