"""Base node class and shared Pydantic configuration for schema AST models.

Every node of the schema AST inherits from SchemaNode. Nodes are immutable:
types are shared by reference across the document and are never mutated.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SchemaNode(BaseModel):
    """Base class for all schema AST nodes."""

    model_config = ConfigDict(
        # Nodes are read-only views over the parsed schema
        frozen=True,
        # Forbid extra fields not defined in the AST
        extra="forbid",
    )


class Argument(SchemaNode):
    """A single annotation argument.

    A positional argument (``@fieldnum(3)``) is stored under the name ``value``.
    """

    name: str = "value"
    value: Any


class Annotation(SchemaNode):
    """An annotation attached to a definition, e.g. ``@fieldnum(1)``."""

    name: str
    arguments: list[Argument] = Field(default_factory=list)

    def convert(self) -> dict[str, Any]:
        """Return the annotation arguments as a name -> value mapping.

        Example:
            >>> Annotation(name="fieldnum", arguments=[Argument(value=3)]).convert()
            {'value': 3}
        """
        return {arg.name: arg.value for arg in self.arguments}


class AnnotatedNode(SchemaNode):
    """Base class for definitions that carry annotations."""

    annotations: list[Annotation] = Field(default_factory=list)

    def annotation(self, name: str) -> Annotation | None:
        """Return the first annotation called ``name``, or None."""
        for annotation in self.annotations:
            if annotation.name == name:
                return annotation
        return None
