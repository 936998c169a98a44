"""
Color Palette Example
=====================

Generates a Sass colour module from a shade table, demonstrating:
- Building nodes from plain data
- Maps, functions and mixins
- Rendering with generate()
"""

from scssforge import (
    Assignment,
    AssignmentPattern,
    AtReturn,
    BlockStatement,
    CallExpression,
    Comment,
    Declaration,
    Identifier,
    Rule,
    SassColor,
    SassFunction,
    SassFunctionCall,
    SassMap,
    SassMapProperty,
    SassModule,
    SassNumber,
    SassString,
    StyleSheet,
    generate,
)


# ============================================================================
# Design tokens
# ============================================================================

SHADES = {
    "primary": {"100": "#dbeafe", "300": "#93c5fd", "500": "#3b82f6", "700": "#1d4ed8"},
    "neutral": {"100": "#f3f4f6", "500": "#6b7280", "900": "#111827"},
}


# ============================================================================
# Build the tree
# ============================================================================

def shade_map(shades: dict[str, dict[str, str]]) -> SassMap:
    return SassMap(properties=[
        SassMapProperty(
            key=Identifier(name=name),
            value=SassMap(properties=[
                SassMapProperty(key=Identifier(name=step), value=SassColor(value=hex_))
                for step, hex_ in steps.items()
            ]),
        )
        for name, steps in shades.items()
    ])


color_fn = SassFunction(
    id=Identifier(name="color"),
    params=[
        Identifier(name="name"),
        AssignmentPattern(left=Identifier(name="shade"), right=SassNumber(value=500)),
    ],
    body=BlockStatement(body=[
        AtReturn(argument=CallExpression(
            callee=Identifier(name="map.get"),
            arguments=[Identifier(name="colors"), Identifier(name="name"), Identifier(name="shade")],
        )),
    ]),
)

sheet = StyleSheet(children=[
    Comment(value="Generated from design tokens.\nDo not edit by hand."),
    SassModule(path="sass:map"),
    Assignment(id=Identifier(name="colors"), init=shade_map(SHADES), default=True),
    color_fn,
    Rule(selectors=[".link"], declarations=[
        Declaration(
            property="color",
            value=SassFunctionCall(id=Identifier(name="color"), params=[SassString(value="primary")]),
        ),
    ]),
])


# ============================================================================
# Render
# ============================================================================

if __name__ == "__main__":
    print(generate(sheet))
