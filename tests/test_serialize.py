"""Tests for rendering schemas as @typedef comments."""

import re

from jsdoc_typedef.schema import render_schema, serialize, wrap_typedef_comment


class TestRenderSchema:
    """Tests for render_schema()."""

    def test_primitive_and_named(self):
        assert render_schema("number") == "number"
        assert render_schema("User") == "User"
        assert render_schema("(string|null)") == "(string|null)"

    def test_array(self):
        assert render_schema(["string"]) == "Array<string>"
        assert render_schema([["number"]]) == "Array<Array<number>>"

    def test_nested_object(self):
        schema = {"a": "number", "b": {"c": ["string"]}}
        assert render_schema(schema) == (
            "{\n" "  a: number\n" "  b: {\n" "    c: Array<string>\n" "  }\n" "}"
        )

    def test_array_of_objects_keeps_indent(self):
        schema = {"items": [{"x": "number"}]}
        assert render_schema(schema) == (
            "{\n" "  items: Array<{\n" "    x: number\n" "  }>\n" "}"
        )

    def test_empty_object(self):
        assert render_schema({}) == "{\n}"


class TestWrapTypedefComment:
    """Tests for wrap_typedef_comment()."""

    def test_single_line(self):
        assert wrap_typedef_comment("URI", "A URL", "string") == (
            "/**\n * A URL\n * @typedef {string} URI\n */"
        )

    def test_multi_line_description(self):
        comment = wrap_typedef_comment("N", "first\nsecond", "number")
        assert comment.splitlines()[1:3] == [" * first", " * second"]


class TestSerialize:
    """Tests for serialize()."""

    def test_single_block(self):
        value = {"id": 1, "name": "a", "tags": ["x"]}
        assert serialize("T", "d", value, {}) == (
            "/**\n"
            " * d\n"
            " * @typedef {{\n"
            " *   id: number\n"
            " *   name: string\n"
            " *   tags: Array<string>\n"
            " * }} T\n"
            " */"
        )

    def test_pull_request(self, pull_request, registry, pull_request_typedefs):
        """Root block first, then string subtypes, then structural subtypes."""
        comment = serialize(
            "PullRequest", "A GitHub Pull Request", pull_request, registry
        )
        assert comment == pull_request_typedefs

    def test_block_order_ignores_registry_interleaving(self, registry):
        reordered = {
            "User": registry["User"],
            "URI": registry["URI"],
            "Label": registry["Label"],
            "DateTime": registry["DateTime"],
        }
        comment = serialize("Root", "d", 1, reordered)
        names = re.findall(r"\} (\w+)\n \*/", comment)
        assert names == ["Root", "URI", "DateTime", "User", "Label"]

    def test_structural_subtypes_keep_names(self, registry):
        comment = serialize("Root", "d", "x", registry)
        assert " *   html_url: URI" in comment
