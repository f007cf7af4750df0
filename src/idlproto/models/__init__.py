"""Pydantic schema AST for idlproto.

This module provides the immutable node classes the emitter consumes: type
expressions, definitions, and the Document root.
"""

from __future__ import annotations

from .base import AnnotatedNode, Annotation, Argument, SchemaNode
from .definitions import (
    Document,
    EnumDefinition,
    EnumValue,
    FieldDefinition,
    Namespace,
    OperationDefinition,
    ParameterDefinition,
    RoleDefinition,
    TypeDefinition,
    UnionDefinition,
)
from .types import VOID, ListType, MapType, Named, OptionalType, Type

__all__ = [
    "SchemaNode",
    "AnnotatedNode",
    "Annotation",
    "Argument",
    # Types
    "Type",
    "Named",
    "ListType",
    "MapType",
    "OptionalType",
    "VOID",
    # Definitions
    "Document",
    "Namespace",
    "RoleDefinition",
    "OperationDefinition",
    "ParameterDefinition",
    "TypeDefinition",
    "FieldDefinition",
    "EnumDefinition",
    "EnumValue",
    "UnionDefinition",
]
