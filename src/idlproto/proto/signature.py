"""Type signature resolution.

Maps schema type expressions to their protobuf spelling.
"""

from __future__ import annotations

from typing import Any

from ..exceptions import UnsupportedTypeError
from ..models import ListType, MapType, Named, OptionalType

SCALAR_TYPE_MAP: dict[str, str] = {
    "i8": "int32",
    "i16": "int32",
    "i32": "int32",
    "i64": "int64",
    "u8": "uint32",
    "u16": "uint32",
    "u32": "uint32",
    "u64": "uint64",
    "f32": "float",
    "f64": "double",
    "string": "string",
    "bytes": "bytes",
    "boolean": "bool",
    "date": "google.protobuf.Timestamp",
    "datetime": "google.protobuf.Timestamp",
    "raw": "google.protobuf.Any",
}


def type_signature(type_: Any) -> str:
    """Convert a schema type to its protobuf type signature.

    Named scalars are looked up in SCALAR_TYPE_MAP; any other name is taken
    to reference a message or enum and is returned unchanged.

    Args:
        type_: Named, ListType, MapType or OptionalType

    Returns:
        Protobuf type string, e.g. ``"repeated int32"``

    Raises:
        UnsupportedTypeError: If type_ is not one of the four type kinds
    """
    if isinstance(type_, Named):
        return SCALAR_TYPE_MAP.get(type_.name, type_.name)

    if isinstance(type_, ListType):
        return f"repeated {type_signature(type_.type)}"

    if isinstance(type_, MapType):
        # TODO: reject float/double, bytes and message keys, and repeated values
        return f"map<{type_signature(type_.key_type)}, {type_signature(type_.value_type)}>"

    if isinstance(type_, OptionalType):
        return f"optional {type_signature(type_.type)}"

    raise UnsupportedTypeError(f"unexpected kind: {type(type_).__name__}")


def is_void(type_: Any) -> bool:
    """Return True if type_ denotes "no value" (the named type ``void``)."""
    return isinstance(type_, Named) and type_.name == "void"
