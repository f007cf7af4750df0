"""Schema type expressions.

A type is a closed union over four kinds. In JSON the kind is carried by the
``kind`` tag so documents can be loaded with ``Document.model_validate_json``:

    {"kind": "named", "name": "i32"}
    {"kind": "list", "type": {...}}
    {"kind": "map", "key_type": {...}, "value_type": {...}}
    {"kind": "optional", "type": {...}}
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field

from .base import SchemaNode


class Named(SchemaNode):
    """A scalar name (``i32``, ``string``...) or a reference to a message or enum."""

    kind: Literal["named"] = "named"
    name: str


class ListType(SchemaNode):
    """A list of ``type``."""

    kind: Literal["list"] = "list"
    type: Type


class MapType(SchemaNode):
    """A map from ``key_type`` to ``value_type``."""

    kind: Literal["map"] = "map"
    key_type: Type
    value_type: Type


class OptionalType(SchemaNode):
    """An optional ``type``."""

    kind: Literal["optional"] = "optional"
    type: Type


Type = Annotated[
    Named | ListType | MapType | OptionalType,
    Field(discriminator="kind"),
]

VOID = Named(name="void")

ListType.model_rebuild()
MapType.model_rebuild()
OptionalType.model_rebuild()
