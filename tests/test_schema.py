"""Tests for scssforge.schema module."""

from typing import Any

import pytest

from scssforge.definitions import (
    CONSTRUCTORS,
    TYPE_DEFINITIONS,
    Comment,
    Identifier,
    Rule,
    SassFunction,
    SassNumber,
    StyleSheet,
)
from scssforge.errors import SchemaError, SchemaValidationError
from scssforge.nodes import Node
from scssforge.schema import (
    TypeDefinition,
    all_definitions,
    make_constructor,
    type_definition,
    validator_for,
)

ALL_TAGS = {
    "Assignment",
    "AssignmentPattern",
    "AtContent",
    "AtReturn",
    "AtRule",
    "BlockStatement",
    "CallExpression",
    "Comment",
    "Declaration",
    "Identifier",
    "IfStatement",
    "LogicalExpression",
    "Newline",
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
    "StyleSheet",
}


class TestValidatorFor:
    """Test deriving validators from annotations."""

    @pytest.mark.parametrize(
        ("hint", "good", "bad"),
        [
            (str, "a", 1),
            (bool, True, "true"),
            (int, 1, 1.5),
            (float, 1.5, True),
            (Identifier, Identifier(name="x"), "x"),
            (tuple[str, ...], ["a"], "a"),
            (list[int], [1, 2], [1, "2"]),
            (str | int, 1, 1.5),
            (str | None, "a", None),
        ],
    )
    def test_derived_validator(self, hint: Any, good: Any, bad: Any) -> None:
        """Test that the derived validator accepts good and rejects bad values."""
        validate = validator_for(hint)
        validate(good)
        with pytest.raises(SchemaError):
            validate(bad)

    def test_any_accepts_everything(self) -> None:
        """Test that Any fields are untyped."""
        validate = validator_for(Any)
        validate(None)
        validate(object())

    @pytest.mark.parametrize("hint", [dict[str, int], tuple[int, str], Node, bytes])
    def test_unsupported_annotation(self, hint: Any) -> None:
        """Test that annotations without a validator mapping are rejected."""
        with pytest.raises(TypeError):
            validator_for(hint)


class TestTypeDefinition:
    """Test type definitions built from node classes."""

    def test_fields_in_declaration_order(self) -> None:
        """Test that field schemas follow the class annotations."""
        definition = type_definition(Rule)
        assert definition.tag == "Rule"
        assert definition.node_class is Rule
        assert definition.field_names == ("selectors", "declarations")

    def test_optional_fields(self) -> None:
        """Test that fields with defaults are optional."""
        optional = {f.name: f.optional for f in type_definition(SassFunction).fields}
        assert optional == {"id": False, "body": False, "params": True}
        assert type_definition(Comment).fields[0].optional is True

    def test_emit_routine_attached(self) -> None:
        """Test that the variant's emit method is the emission routine."""
        assert type_definition(Rule).emit is Rule.emit

    def test_definition_is_cached(self) -> None:
        """Test that definitions are built once and shared."""
        assert type_definition(Rule) is type_definition(Rule)
        assert TYPE_DEFINITIONS["Rule"] is type_definition(Rule)

    def test_definition_is_frozen(self) -> None:
        """Test that definitions cannot be modified."""
        definition = type_definition(Rule)
        with pytest.raises(AttributeError):
            definition.tag = "Other"  # type: ignore[misc]

    def test_check_field_names(self) -> None:
        """Test name checks against the schema."""
        definition = type_definition(SassNumber)
        definition.check_field_names({"value": 1})

        with pytest.raises(SchemaValidationError) as exc_info:
            definition.check_field_names({})
        assert exc_info.value.field == "value"

        with pytest.raises(SchemaValidationError) as exc_info:
            definition.check_field_names({"value": 1, "unit": "px"})
        assert exc_info.value.field == "unit"


class TestRegistryMappings:
    """Test the exposed constructor and definition mappings."""

    def test_every_variant_exposed(self) -> None:
        """Test that each variant has a constructor and a definition."""
        assert set(CONSTRUCTORS) == ALL_TAGS
        assert set(TYPE_DEFINITIONS) == ALL_TAGS
        assert all(isinstance(d, TypeDefinition) for d in TYPE_DEFINITIONS.values())

    def test_mappings_are_read_only(self) -> None:
        """Test that the registry cannot be mutated."""
        with pytest.raises(TypeError):
            CONSTRUCTORS["Extra"] = make_constructor(Rule)  # type: ignore[index]
        with pytest.raises(TypeError):
            del TYPE_DEFINITIONS["Rule"]  # type: ignore[attr-defined]

    def test_all_definitions_covers_variants(self) -> None:
        """Test that all_definitions includes every variant."""
        assert ALL_TAGS <= set(all_definitions())

    def test_match_by_tag(self) -> None:
        """Test variant matching through the definitions mapping."""
        node = CONSTRUCTORS["StyleSheet"](children=[])
        assert node.tag == TYPE_DEFINITIONS["StyleSheet"].tag
        assert isinstance(node, StyleSheet)


class TestMakeConstructor:
    """Test constructor factories."""

    def test_constructs_node(self) -> None:
        """Test that the constructor builds a validated node."""
        rule = CONSTRUCTORS["Rule"](selectors=[".a"], declarations=[])
        assert isinstance(rule, Rule)
        assert rule.selectors == (".a",)

    def test_named_after_class(self) -> None:
        """Test that the constructor carries the variant's name."""
        assert make_constructor(Rule).__name__ == "Rule"

    def test_missing_required_field(self) -> None:
        """Test that a missing field is a schema error, not a TypeError."""
        with pytest.raises(SchemaValidationError) as exc_info:
            CONSTRUCTORS["Rule"](selectors=[".a"])
        assert exc_info.value.type_name == "Rule"
        assert exc_info.value.field == "declarations"

    def test_unknown_field(self) -> None:
        """Test that unknown fields are rejected by name."""
        with pytest.raises(SchemaValidationError) as exc_info:
            CONSTRUCTORS["SassNumber"](value=1, unit="px")
        assert exc_info.value.field == "unit"

    def test_invalid_value(self) -> None:
        """Test that field validators run through the constructor."""
        with pytest.raises(SchemaValidationError) as exc_info:
            CONSTRUCTORS["SassNumber"](value="not-a-number")
        assert exc_info.value.type_name == "SassNumber"
        assert exc_info.value.field == "value"
