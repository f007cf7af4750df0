"""idlproto: Interface schema to Protocol Buffers IDL

A Python library that turns a parsed interface schema (types, enums, unions
and services with operations) into proto3 source. Operations with several
parameters get a synthesized request message, unions become oneof groups, and
schema scalars are mapped to protobuf scalars.

Quick Start:
    >>> from idlproto import Document, Namespace, to_proto
    >>> from idlproto.models import (
    ...     Annotation, Argument, FieldDefinition, Named, TypeDefinition,
    ... )
    >>>
    >>> point = TypeDefinition(
    ...     name="point",
    ...     fields=[
    ...         FieldDefinition(
    ...             name="x",
    ...             type=Named(name="f64"),
    ...             annotations=[Annotation(name="fieldnum", arguments=[Argument(value=1)])],
    ...         ),
    ...     ],
    ... )
    >>> doc = Document(namespace=Namespace(name="geo"), types=[point])
    >>> print(to_proto(doc))
    syntax = "proto3";

    package geo;

    message Point {
      double x = 1;
    }
"""

from __future__ import annotations

from .config import EmitterConfig
from .exceptions import (
    IdlProtoError,
    MissingFieldNumberError,
    SchemaError,
    UnsupportedTypeError,
)
from .models import Document, Namespace
from .proto import ProtoEmitter, TextWriter, to_proto, type_signature, write_proto
from .utils import HandlerFilter, format_comment, pascal_case, snake_case

__version__ = "0.1.0"

__all__ = [
    # Core API
    "to_proto",
    "write_proto",
    "ProtoEmitter",
    "TextWriter",
    "type_signature",
    # Models
    "Document",
    "Namespace",
    # Configuration
    "EmitterConfig",
    "HandlerFilter",
    # Naming
    "pascal_case",
    "snake_case",
    "format_comment",
    # Exceptions
    "IdlProtoError",
    "SchemaError",
    "MissingFieldNumberError",
    "UnsupportedTypeError",
    # Version
    "__version__",
]
