"""Schema definitions: the nodes of a parsed interface document.

The document is produced by an external parser and handed to the emitter
already validated. The only structural rule enforced here is the one the
emitter relies on: a unary operation has exactly one parameter.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, model_validator

from .base import AnnotatedNode, SchemaNode
from .types import VOID, Type


class Namespace(SchemaNode):
    """The document namespace, emitted as the proto package."""

    name: str


class FieldDefinition(AnnotatedNode):
    """A field of a message type. Requires a ``@fieldnum`` annotation to be emitted."""

    name: str
    description: str = ""
    type: Type
    default: Any | None = None


class ParameterDefinition(AnnotatedNode):
    """A parameter of an operation."""

    name: str
    description: str = ""
    type: Type
    default: Any | None = None


class OperationDefinition(AnnotatedNode):
    """An operation of a role.

    Attributes:
        name: Operation name
        description: Documentation comment
        parameters: Parameters in declaration order
        type: Return type (``void`` when the operation returns nothing)
        unary: Whether the single parameter is used directly as the request type
    """

    name: str
    description: str = ""
    parameters: list[ParameterDefinition] = Field(default_factory=list)
    type: Type = VOID
    unary: bool = False

    @model_validator(mode="after")
    def _check_unary(self) -> OperationDefinition:
        if self.unary and len(self.parameters) != 1:
            raise ValueError(
                f"unary operation {self.name} must have exactly one parameter, "
                f"got {len(self.parameters)}"
            )
        return self


class RoleDefinition(AnnotatedNode):
    """A role (service) grouping operations."""

    name: str
    description: str = ""
    operations: list[OperationDefinition] = Field(default_factory=list)


class TypeDefinition(AnnotatedNode):
    """A message type."""

    name: str
    description: str = ""
    fields: list[FieldDefinition] = Field(default_factory=list)


class EnumValue(SchemaNode):
    """An enum value with its explicit index."""

    name: str
    description: str = ""
    index: int


class EnumDefinition(AnnotatedNode):
    """An enumeration."""

    name: str
    description: str = ""
    values: list[EnumValue] = Field(default_factory=list)


class UnionDefinition(AnnotatedNode):
    """A tagged union over member types."""

    name: str
    description: str = ""
    types: list[Type] = Field(default_factory=list)


class Document(SchemaNode):
    """Root of a schema document."""

    namespace: Namespace
    roles: list[RoleDefinition] = Field(default_factory=list)
    types: list[TypeDefinition] = Field(default_factory=list)
    enums: list[EnumDefinition] = Field(default_factory=list)
    unions: list[UnionDefinition] = Field(default_factory=list)
