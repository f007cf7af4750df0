"""Unit tests for naming and comment helpers."""

from __future__ import annotations

import pytest

from idlproto.utils import format_comment, pascal_case, snake_case


class TestPascalCase:
    """Test PascalCase conversion."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("add", "Add"),
            ("get_user", "GetUser"),
            ("getUser", "GetUser"),
            ("GetUser", "GetUser"),
            ("get-user-by-id", "GetUserById"),
            ("getHTTPStatus", "GetHTTPStatus"),
            ("v2_api", "V2Api"),
        ],
    )
    def test_pascal_case(self, name: str, expected: str) -> None:
        assert pascal_case(name) == expected


class TestSnakeCase:
    """Test snake_case conversion."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("id", "id"),
            ("userId", "user_id"),
            ("UserProfile", "user_profile"),
            ("HTTPServer", "http_server"),
            ("already_snake", "already_snake"),
            ("i32", "i32"),
            ("lockedOut", "locked_out"),
            ("kebab-case", "kebab_case"),
        ],
    )
    def test_snake_case(self, name: str, expected: str) -> None:
        assert snake_case(name) == expected


class TestFormatComment:
    """Test comment block formatting."""

    def test_empty_description(self) -> None:
        """Test no comment for missing descriptions."""
        assert format_comment("// ", "") == ""
        assert format_comment("// ", None) == ""
        assert format_comment("// ", "   \n ") == ""

    def test_single_line(self) -> None:
        """Test a short description fits on one line."""
        assert format_comment("  // ", "Adds two numbers.") == "  // Adds two numbers.\n"

    def test_newlines_folded(self) -> None:
        """Test source line breaks are re-wrapped."""
        assert format_comment("// ", "first line\nsecond line") == "// first line second line\n"

    def test_wrapping(self) -> None:
        """Test long descriptions wrap at the given width."""
        comment = format_comment("// ", "alpha beta gamma delta", wrap_length=14)

        assert comment == "// alpha beta\n// gamma delta\n"

    def test_long_word_kept_whole(self) -> None:
        """Test a word longer than the width is not split."""
        url = "https://example.com/a/very/long/path"
        comment = format_comment("// ", f"See {url} for details", wrap_length=20)

        assert f"// {url}\n" in comment
        assert comment.startswith("// See\n")
