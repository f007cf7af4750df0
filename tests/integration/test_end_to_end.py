"""End-to-end tests for schema to proto generation."""

from __future__ import annotations

import io
import json
from pathlib import Path

from conftest import fieldnum

from idlproto import EmitterConfig, to_proto, write_proto
from idlproto.models import (
    Document,
    Named,
    Namespace,
    OperationDefinition,
    ParameterDefinition,
    RoleDefinition,
)

DEMO_PROTO = """\
syntax = "proto3";

package pkg.demo;

// Arithmetic service.
service Calculator {
  // Adds two numbers.
  rpc Add(AddRequest) returns (int32);
  rpc GetUser(string) returns (User);
  rpc Ping(Ping) returns (Empty);
}

// A registered user.
message User {
  // Unique identifier.
  uint64 user_id = 1;
  optional string nick_name = 2;
  repeated string tags = 3;
  map<string, double> scores = 5;
}

// Account status.
enum Status {
  UNKNOWN = 0;
  // Can log in.
  ACTIVE = 1;
  LOCKED_OUT = 5;
}

// Who performed an action.
message Principal {
  oneof oneof {
    User user_value = 1;
    string string_value = 2;
  }
}

// Request for the Add operation.
message AddRequest {
  int32 a = 1;
  int32 b = 2;
}

"""


class TestEndToEnd:
    """Full documents through the emitter."""

    def test_demo_document(self, demo_document: Document) -> None:
        """Test the complete output for a document using every section."""
        assert to_proto(demo_document) == DEMO_PROTO

    def test_write_proto_matches_to_proto(self, demo_document: Document) -> None:
        stream = io.StringIO()
        write_proto(demo_document, stream)

        assert stream.getvalue() == to_proto(demo_document)

    def test_json_document(self, tmp_path: Path, demo_document: Document) -> None:
        """Test a document loaded from its JSON form emits identically."""
        path = tmp_path / "demo.json"
        path.write_text(json.dumps(demo_document.model_dump(mode="json")), encoding="utf-8")

        loaded = Document.model_validate_json(path.read_text(encoding="utf-8"))
        assert to_proto(loaded) == DEMO_PROTO

    def test_fresh_emitter_per_call(self, demo_document: Document) -> None:
        """Test repeated calls do not leak request messages between documents."""
        first = to_proto(demo_document)
        second = to_proto(demo_document)

        assert first == second
        assert second.count("message AddRequest {") == 1

    def test_excluded_and_included_roles(self) -> None:
        """Test the two-role scenario: one excluded, one with a bundled operation."""
        add = OperationDefinition(
            name="Add",
            parameters=[
                ParameterDefinition(name="a", type=Named(name="i32"), annotations=fieldnum(10)),
                ParameterDefinition(name="b", type=Named(name="i32"), annotations=fieldnum(20)),
            ],
            type=Named(name="i32"),
        )
        doc = Document(
            namespace=Namespace(name="pkg.demo"),
            roles=[
                RoleDefinition(name="Hidden", operations=[add]),
                RoleDefinition(name="Math", operations=[add]),
            ],
        )
        proto = to_proto(doc, config=EmitterConfig(exclude_roles=("Hidden",)))

        assert "package pkg.demo;" in proto
        assert "Hidden" not in proto
        assert "service Math {\n  rpc Add(AddRequest) returns (int32);\n}\n" in proto
        assert proto.endswith("message AddRequest {\n  int32 a = 10;\n  int32 b = 20;\n}\n\n")
