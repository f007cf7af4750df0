"""Protobuf IDL emission.

This module walks a schema Document and writes the equivalent proto3 source.
Sections are always written in the same order: syntax, package, services,
messages, enums, unions, and finally the request messages synthesized for
operations whose parameters are bundled into one message.
"""

from __future__ import annotations

import logging
from typing import TextIO

from ..config import EmitterConfig
from ..exceptions import MissingFieldNumberError, UnsupportedTypeError
from ..models import (
    Document,
    EnumDefinition,
    EnumValue,
    FieldDefinition,
    Named,
    Namespace,
    OperationDefinition,
    RoleDefinition,
    TypeDefinition,
    UnionDefinition,
)
from ..utils.handlers import HandlerFilter, IncludePredicate
from ..utils.naming import format_comment, pascal_case, snake_case
from .requests import operation_to_request_type, request_type_name
from .signature import is_void, type_signature
from .writer import TextWriter

logger = logging.getLogger(__name__)

_FIELDNUM = "fieldnum"


class ProtoEmitter:
    """Single-pass emitter from a schema Document to proto3 source.

    An emitter accumulates the request messages it synthesizes while visiting
    operations, so use a new instance for every document.

    Example:
        >>> writer = TextWriter()
        >>> ProtoEmitter(writer).emit(document)
        >>> print(writer.getvalue())
        syntax = "proto3";

        package pkg.demo;
        ...
    """

    def __init__(
        self,
        writer: TextWriter | None = None,
        *,
        config: EmitterConfig | None = None,
        include: IncludePredicate | None = None,
    ) -> None:
        """Initialize the emitter.

        Args:
            writer: Output sink (default: a new in-memory TextWriter)
            config: Emission configuration (default: EmitterConfig())
            include: Handler-inclusion predicate (default: HandlerFilter(config))
        """
        self.writer = writer if writer is not None else TextWriter()
        self.config = config if config is not None else EmitterConfig()
        self.include = include if include is not None else HandlerFilter(self.config)
        self.request_types: list[TypeDefinition] = []
        self._services = 0

    def emit(self, document: Document) -> None:
        """Write the proto source for a document.

        Raises:
            MissingFieldNumberError: If a field or bundled parameter has no @fieldnum
            UnsupportedTypeError: If a type is not one of the known type kinds
        """
        self.visit_document_before(document)
        self.visit_namespace(document.namespace)
        for role in document.roles:
            self.visit_role(role)
        for type_def in document.types:
            self.visit_type(type_def)
        for enum_def in document.enums:
            self.visit_enum(enum_def)
        for union in document.unions:
            self.visit_union(union)
        self.visit_document_after(document)

    # Document

    def visit_document_before(self, document: Document) -> None:
        self.writer.write('syntax = "proto3";\n\n')

    def visit_document_after(self, document: Document) -> None:
        for request in self.request_types:
            self.visit_type(request)

        logger.info(
            "Emitted package %s: %d service(s), %d message(s), %d enum(s), "
            "%d union(s), %d request message(s), %d character(s)",
            document.namespace.name,
            self._services,
            len(document.types),
            len(document.enums),
            len(document.unions),
            len(self.request_types),
            self.writer.chars_written,
        )

    def visit_namespace(self, namespace: Namespace) -> None:
        self.writer.write(f"package {namespace.name};\n\n")

    # Roles and operations

    def visit_role(self, role: RoleDefinition) -> None:
        if not self.include(role, None):
            logger.debug("Skipping excluded role %s", role.name)
            return

        self.visit_role_before(role)
        for operation in role.operations:
            if self.include(role, operation):
                self.visit_operation(operation)
            else:
                logger.debug("Skipping excluded operation %s.%s", role.name, operation.name)
        self.visit_role_after(role)
        self._services += 1

    def visit_role_before(self, role: RoleDefinition) -> None:
        logger.debug("Emitting service %s", role.name)
        self.writer.write(self._comment("// ", role.description))
        self.writer.write(f"service {role.name} {{\n")

    def visit_role_after(self, role: RoleDefinition) -> None:
        self.writer.write("}\n\n")

    def visit_operation(self, operation: OperationDefinition) -> None:
        self.writer.write(self._comment("  // ", operation.description))

        if operation.unary:
            request = type_signature(operation.parameters[0].type)
        else:
            self.request_types.append(operation_to_request_type(operation))
            request = request_type_name(operation)

        if is_void(operation.type):
            response = "Empty"
        else:
            response = type_signature(operation.type)

        self.writer.write(f"  rpc {pascal_case(operation.name)}({request}) returns ({response});\n")

    # Messages

    def visit_type(self, type_def: TypeDefinition) -> None:
        logger.debug("Emitting message %s", type_def.name)
        self.visit_type_before(type_def)
        for field in type_def.fields:
            self.visit_type_field(type_def, field)
        self.visit_type_after(type_def)

    def visit_type_before(self, type_def: TypeDefinition) -> None:
        self.writer.write(self._comment("// ", type_def.description))
        self.writer.write(f"message {pascal_case(type_def.name)} {{\n")

    def visit_type_field(self, type_def: TypeDefinition, field: FieldDefinition) -> None:
        fieldnum = self._field_number(type_def, field)
        self.writer.write(self._comment("  // ", field.description))
        self.writer.write(
            f"  {type_signature(field.type)} {snake_case(field.name)} = {fieldnum};\n"
        )

    def visit_type_after(self, type_def: TypeDefinition) -> None:
        self.writer.write("}\n\n")

    # Enums

    def visit_enum(self, enum_def: EnumDefinition) -> None:
        logger.debug("Emitting enum %s", enum_def.name)
        self.writer.write(self._comment("// ", enum_def.description))
        self.writer.write(f"enum {pascal_case(enum_def.name)} {{\n")
        for value in enum_def.values:
            self.visit_enum_value(value)
        self.writer.write("}\n\n")

    def visit_enum_value(self, value: EnumValue) -> None:
        self.writer.write(self._comment("  // ", value.description))
        self.writer.write(f"  {snake_case(value.name).upper()} = {value.index};\n")

    # Unions

    def visit_union(self, union: UnionDefinition) -> None:
        logger.debug("Emitting union %s", union.name)
        self.writer.write(self._comment("// ", union.description))
        self.writer.write(f"message {pascal_case(union.name)} {{\n")
        self.writer.write("  oneof oneof {\n")
        for i, member in enumerate(union.types, start=1):
            if not isinstance(member, Named):
                raise UnsupportedTypeError(
                    f"{union.name}: union members must be named types, "
                    f"got {type(member).__name__}"
                )
            self.writer.write(
                f"    {type_signature(member)} {snake_case(member.name)}_value = {i};\n"
            )
        self.writer.write("  }\n")
        self.writer.write("}\n\n")

    # Helpers

    def _comment(self, prefix: str, text: str | None) -> str:
        return format_comment(prefix, text, self.config.comment_width)

    @staticmethod
    def _field_number(type_def: TypeDefinition, field: FieldDefinition) -> object:
        annotation = field.annotation(_FIELDNUM)
        if annotation is None:
            raise MissingFieldNumberError(type_def.name, field.name)

        value = annotation.convert().get("value")
        if value is None:
            raise MissingFieldNumberError(type_def.name, field.name)
        return value


def to_proto(
    document: Document,
    *,
    config: EmitterConfig | None = None,
    include: IncludePredicate | None = None,
) -> str:
    """Generate proto3 source for a schema document.

    Args:
        document: Parsed schema document
        config: Emission configuration
        include: Handler-inclusion predicate (default: HandlerFilter(config))

    Returns:
        The complete .proto file as a string

    Raises:
        MissingFieldNumberError: If a field or bundled parameter has no @fieldnum
        UnsupportedTypeError: If a type is not one of the known type kinds

    Example:
        >>> doc = Document(namespace=Namespace(name="pkg.demo"))
        >>> print(to_proto(doc))
        syntax = "proto3";

        package pkg.demo;
    """
    writer = TextWriter()
    ProtoEmitter(writer, config=config, include=include).emit(document)
    return writer.getvalue()


def write_proto(
    document: Document,
    stream: TextIO,
    *,
    config: EmitterConfig | None = None,
    include: IncludePredicate | None = None,
) -> None:
    """Write proto3 source for a schema document to a text stream.

    Output is appended as it is produced; when emission fails the stream
    holds everything written before the failing definition's closing brace.
    """
    ProtoEmitter(TextWriter(stream), config=config, include=include).emit(document)
