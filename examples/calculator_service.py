#!/usr/bin/env python3
"""Proto generation example for idlproto.

This example demonstrates:
1. Building a schema document in Python
2. Generating the .proto source
3. Filtering services and saving the document as a JSON AST
"""

from __future__ import annotations

from pathlib import Path

from idlproto import EmitterConfig, to_proto
from idlproto.models import (
    Annotation,
    Argument,
    Document,
    EnumDefinition,
    EnumValue,
    FieldDefinition,
    ListType,
    Named,
    Namespace,
    OperationDefinition,
    ParameterDefinition,
    RoleDefinition,
    TypeDefinition,
    UnionDefinition,
)


def fieldnum(value: int) -> list[Annotation]:
    return [Annotation(name="fieldnum", arguments=[Argument(value=value)])]


def build_document() -> Document:
    """Build a small calculator schema."""
    add = OperationDefinition(
        name="add",
        description="Adds two numbers.",
        parameters=[
            ParameterDefinition(name="left", type=Named(name="f64"), annotations=fieldnum(1)),
            ParameterDefinition(name="right", type=Named(name="f64"), annotations=fieldnum(2)),
        ],
        type=Named(name="f64"),
    )
    history = OperationDefinition(
        name="get_history",
        description="Returns previous results for a session.",
        parameters=[ParameterDefinition(name="session", type=Named(name="string"))],
        type=ListType(type=Named(name="Result")),
        unary=True,
    )

    return Document(
        namespace=Namespace(name="calculator.v1"),
        roles=[
            RoleDefinition(
                name="Calculator",
                description="Stateless arithmetic over doubles.",
                operations=[add, history],
            ),
            RoleDefinition(
                name="Maintenance",
                description="Operator-only endpoints.",
                operations=[
                    OperationDefinition(
                        name="flush",
                        parameters=[
                            ParameterDefinition(
                                name="session", type=Named(name="string"), annotations=fieldnum(1)
                            )
                        ],
                    )
                ],
            ),
        ],
        types=[
            TypeDefinition(
                name="result",
                description="A computed value.",
                fields=[
                    FieldDefinition(name="value", type=Named(name="f64"), annotations=fieldnum(1)),
                    FieldDefinition(
                        name="computedAt", type=Named(name="datetime"), annotations=fieldnum(2)
                    ),
                    FieldDefinition(name="op", type=Named(name="Operator"), annotations=fieldnum(3)),
                ],
            )
        ],
        enums=[
            EnumDefinition(
                name="operator",
                values=[
                    EnumValue(name="unspecified", index=0),
                    EnumValue(name="add", index=1),
                    EnumValue(name="subtract", index=2),
                ],
            )
        ],
        unions=[
            UnionDefinition(
                name="operand",
                description="Either a literal or a previous result.",
                types=[Named(name="f64"), Named(name="Result")],
            )
        ],
    )


def main() -> None:
    """Run the proto generation example."""
    document = build_document()

    print("=" * 70)
    print("Full schema")
    print("=" * 70)
    print(to_proto(document))

    print("=" * 70)
    print("Public services only")
    print("=" * 70)
    public = to_proto(document, config=EmitterConfig(exclude_roles=("Maintenance",)))
    print(public)

    output = Path("calculator.json")
    output.write_text(document.model_dump_json(indent=2), encoding="utf-8")
    print(f"Saved JSON AST to {output}; regenerate with: idlproto {output}")


if __name__ == "__main__":
    main()
