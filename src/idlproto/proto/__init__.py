"""Protobuf IDL generation for idlproto.

This module provides the emitter that turns a schema Document into proto3
source, along with the type signature resolver and request synthesizer it uses.
"""

from __future__ import annotations

from .emitter import ProtoEmitter, to_proto, write_proto
from .requests import operation_to_request_type, request_type_name
from .signature import SCALAR_TYPE_MAP, is_void, type_signature
from .writer import TextWriter

__all__ = [
    "ProtoEmitter",
    "TextWriter",
    "to_proto",
    "write_proto",
    # Types
    "type_signature",
    "is_void",
    "SCALAR_TYPE_MAP",
    # Requests
    "operation_to_request_type",
    "request_type_name",
]
