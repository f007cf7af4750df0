"""Exception hierarchy for idlproto.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from IdlProtoError for easy catching of any idlproto-specific error.
"""

from __future__ import annotations


class IdlProtoError(Exception):
    """Base exception for all idlproto errors."""

    pass


class SchemaError(IdlProtoError):
    """Raised when a schema document cannot be emitted as protobuf.

    Examples:
        - Field without a @fieldnum annotation
        - Type value of an unknown kind
    """

    pass


class MissingFieldNumberError(SchemaError):
    """Raised when a message field or request parameter lacks @fieldnum.

    Attributes:
        type_name: Name of the message being emitted
        field_name: Name of the offending field
    """

    def __init__(self, type_name: str, field_name: str) -> None:
        self.type_name = type_name
        self.field_name = field_name
        super().__init__(f"{type_name}.{field_name} requires a @fieldnum")


class UnsupportedTypeError(SchemaError):
    """Raised when a type value is not one of the known type kinds.

    Examples:
        - An object that is not a Named, ListType, MapType or OptionalType
        - A union member that is not a named type
    """

    pass
