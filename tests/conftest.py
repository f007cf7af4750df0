"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from idlproto.models import (
    Annotation,
    Argument,
    Document,
    EnumDefinition,
    EnumValue,
    FieldDefinition,
    ListType,
    MapType,
    Named,
    Namespace,
    OperationDefinition,
    OptionalType,
    ParameterDefinition,
    RoleDefinition,
    TypeDefinition,
    UnionDefinition,
)


def fieldnum(value: int) -> list[Annotation]:
    """Annotation list carrying a single @fieldnum(value)."""
    return [Annotation(name="fieldnum", arguments=[Argument(value=value)])]


@pytest.fixture
def add_operation() -> OperationDefinition:
    """Two-parameter operation Add(a: i32, b: i32): i32."""
    return OperationDefinition(
        name="add",
        description="Adds two numbers.",
        parameters=[
            ParameterDefinition(name="a", type=Named(name="i32"), annotations=fieldnum(1)),
            ParameterDefinition(name="b", type=Named(name="i32"), annotations=fieldnum(2)),
        ],
        type=Named(name="i32"),
    )


@pytest.fixture
def demo_document(add_operation: OperationDefinition) -> Document:
    """Document exercising every section of the output."""
    return Document(
        namespace=Namespace(name="pkg.demo"),
        roles=[
            RoleDefinition(
                name="Admin",
                description="Internal administration.",
                annotations=[Annotation(name="nocode")],
                operations=[
                    OperationDefinition(
                        name="reset",
                        parameters=[
                            ParameterDefinition(name="force", type=Named(name="boolean")),
                        ],
                    )
                ],
            ),
            RoleDefinition(
                name="Calculator",
                description="Arithmetic service.",
                operations=[
                    add_operation,
                    OperationDefinition(
                        name="get_user",
                        parameters=[
                            ParameterDefinition(name="id", type=Named(name="string")),
                        ],
                        type=Named(name="User"),
                        unary=True,
                    ),
                    OperationDefinition(
                        name="ping",
                        parameters=[
                            ParameterDefinition(name="id", type=Named(name="Ping")),
                        ],
                        unary=True,
                    ),
                ],
            ),
        ],
        types=[
            TypeDefinition(
                name="user",
                description="A registered user.",
                fields=[
                    FieldDefinition(
                        name="userId",
                        description="Unique identifier.",
                        type=Named(name="u64"),
                        annotations=fieldnum(1),
                    ),
                    FieldDefinition(
                        name="nickName",
                        type=OptionalType(type=Named(name="string")),
                        annotations=fieldnum(2),
                    ),
                    FieldDefinition(
                        name="tags",
                        type=ListType(type=Named(name="string")),
                        annotations=fieldnum(3),
                    ),
                    FieldDefinition(
                        name="scores",
                        type=MapType(key_type=Named(name="string"), value_type=Named(name="f64")),
                        annotations=fieldnum(5),
                    ),
                ],
            ),
        ],
        enums=[
            EnumDefinition(
                name="status",
                description="Account status.",
                values=[
                    EnumValue(name="unknown", index=0),
                    EnumValue(name="active", description="Can log in.", index=1),
                    EnumValue(name="lockedOut", index=5),
                ],
            ),
        ],
        unions=[
            UnionDefinition(
                name="principal",
                description="Who performed an action.",
                types=[Named(name="User"), Named(name="string")],
            ),
        ],
    )
