"""Synthesized request messages for operations with bundled parameters."""

from __future__ import annotations

from ..models import FieldDefinition, OperationDefinition, TypeDefinition
from ..utils.naming import pascal_case


def request_type_name(operation: OperationDefinition) -> str:
    """Return the name of the request message synthesized for an operation."""
    return f"{pascal_case(operation.name)}Request"


def operation_to_request_type(operation: OperationDefinition) -> TypeDefinition:
    """Build the request message carrying a non-unary operation's parameters.

    Each parameter becomes a field with the same name, description, type,
    default and annotations, so its ``@fieldnum`` is the field number.

    Example:
        >>> request = operation_to_request_type(add)  # add(a: i32, b: i32)
        >>> request.name, [f.name for f in request.fields]
        ('AddRequest', ['a', 'b'])
    """
    fields = [
        FieldDefinition(
            name=param.name,
            description=param.description,
            type=param.type,
            default=param.default,
            annotations=param.annotations,
        )
        for param in operation.parameters
    ]
    return TypeDefinition(
        name=request_type_name(operation),
        description=f"Request for the {pascal_case(operation.name)} operation.",
        annotations=operation.annotations,
        fields=fields,
    )
