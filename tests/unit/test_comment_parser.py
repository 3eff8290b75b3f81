"""Tests for the docu comment block parser."""

import pytest

from docucomment.core.exceptions import FormatError, FormatErrorKind
from docucomment.features.parsing.comment_parser import (
    is_comment_line,
    parse_doc_comment,
    strip_comment_marker,
    strip_comment_markers,
)
from docucomment.models.doc_comment import DocComment, DocParam


class TestMarkerStripping:
    """Tests for comment marker removal."""

    def test_strips_marker_and_space(self):
        assert strip_comment_marker("/// Show a document") == "Show a document"

    def test_strips_leading_indentation(self):
        assert strip_comment_marker("    ///   @param x y  ") == "@param x y"

    def test_line_without_marker_is_kept(self):
        assert strip_comment_marker("already stripped") == "already stripped"

    def test_bare_marker_is_blank(self):
        assert strip_comment_marker("///") == ""

    def test_custom_marker(self):
        assert strip_comment_marker("## Show", marker="##") == "Show"

    def test_leading_blank_lines_dropped_with_numbers_kept(self):
        lines = strip_comment_markers("\n   \n/// desc\n///\n")
        assert lines == [(3, "desc"), (4, "")]

    def test_is_comment_line(self):
        assert is_comment_line("  /// text")
        assert not is_comment_line("func void f() {};")


class TestParseDocComment:
    """Tests for parse_doc_comment."""

    def test_description_and_separator_only(self):
        """A block with only a description and blank line has no params or return."""
        doc = parse_doc_comment("/// Display the document\n///\n")

        assert doc.description == "Display the document"
        assert doc.params == ()
        assert doc.return_description is None

    def test_params_in_order_and_return(self, full_comment):
        doc = parse_doc_comment(full_comment)

        assert doc.description == "Blend two colors"
        assert doc.params == (
            DocParam("first", "first color"),
            DocParam("second", "second color"),
        )
        assert doc.return_description == "the blended color"
        assert doc.param_names == ["first", "second"]

    def test_param_unpacks_as_pair(self, full_comment):
        doc = parse_doc_comment(full_comment)
        assert [tuple(p) for p in doc.params] == [("first", "first color"), ("second", "second color")]

    def test_param_description_keeps_inline_markup(self):
        doc = parse_doc_comment("/// d\n///\n/// @param body_mesh mesh e.g. `HUN_BODY_NAKED0`\n")
        assert doc.params[0].description == "mesh e.g. `HUN_BODY_NAKED0`"

    def test_already_stripped_input(self):
        doc = parse_doc_comment("Show it\n\n@param id the id\n@return nothing\n")
        assert doc == DocComment("Show it", (DocParam("id", "the id"),), "nothing")

    def test_crlf_line_endings(self):
        doc = parse_doc_comment("/// Show it\r\n///\r\n/// @param id the id\r\n")
        assert doc.params == (DocParam("id", "the id"),)

    def test_extra_blank_lines_ignored(self):
        doc = parse_doc_comment("/// d\n///\n///\n/// @param a x\n///\n/// @return r\n\n")
        assert doc.params == (DocParam("a", "x"),)
        assert doc.return_description == "r"

    def test_return_before_param_is_accepted(self):
        doc = parse_doc_comment("/// d\n///\n/// @return r\n/// @param a x\n")
        assert doc.params == (DocParam("a", "x"),)
        assert doc.return_description == "r"

    def test_result_is_immutable(self):
        doc = parse_doc_comment("/// d\n///\n")
        with pytest.raises(AttributeError):
            doc.description = "changed"


class TestParseErrors:
    """Tests for rejected blocks."""

    def test_empty_text(self):
        with pytest.raises(FormatError) as exc_info:
            parse_doc_comment("")
        assert exc_info.value.kind == FormatErrorKind.MISSING_DESCRIPTION

    def test_empty_description(self):
        with pytest.raises(FormatError) as exc_info:
            parse_doc_comment("///\n///\n/// @param a x\n")
        assert exc_info.value.kind == FormatErrorKind.MISSING_DESCRIPTION
        assert exc_info.value.line_number == 1

    def test_tag_in_description_position(self):
        with pytest.raises(FormatError) as exc_info:
            parse_doc_comment("/// @param a x\n///\n")
        assert exc_info.value.kind == FormatErrorKind.MISSING_DESCRIPTION

    def test_missing_separator(self):
        with pytest.raises(FormatError) as exc_info:
            parse_doc_comment("/// Display the document\n/// @param docID document manager ID\n")
        err = exc_info.value
        assert err.kind == FormatErrorKind.MISSING_SEPARATOR
        assert err.line_number == 2
        assert "missing separator" in str(err)

    def test_description_only_missing_separator(self):
        with pytest.raises(FormatError) as exc_info:
            parse_doc_comment("/// Display the document\n")
        assert exc_info.value.kind == FormatErrorKind.MISSING_SEPARATOR

    @pytest.mark.parametrize(
        "line",
        [
            "/// @param",
            "/// @param docID",
            "/// @param 1st first",
            "/// @param doc-id the id",
        ],
    )
    def test_malformed_param(self, line):
        with pytest.raises(FormatError) as exc_info:
            parse_doc_comment(f"/// d\n///\n{line}\n")
        assert exc_info.value.kind == FormatErrorKind.MALFORMED_PARAM
        assert exc_info.value.line_number == 3

    def test_duplicate_return_rejects_block(self):
        with pytest.raises(FormatError) as exc_info:
            parse_doc_comment("/// d\n///\n/// @return first\n/// @return second\n")
        err = exc_info.value
        assert err.kind == FormatErrorKind.DUPLICATE_RETURN
        assert err.line_number == 4
        assert str(err).startswith("FormatError: duplicate return line")

    def test_empty_return(self):
        with pytest.raises(FormatError) as exc_info:
            parse_doc_comment("/// d\n///\n/// @return   \n")
        assert exc_info.value.kind == FormatErrorKind.MALFORMED_RETURN

    @pytest.mark.parametrize("line", ["/// a second description", "/// @throws nothing", "/// @parameter a x"])
    def test_unexpected_line(self, line):
        with pytest.raises(FormatError) as exc_info:
            parse_doc_comment(f"/// d\n///\n{line}\n")
        assert exc_info.value.kind == FormatErrorKind.UNEXPECTED_LINE

    def test_with_offset_shifts_line(self):
        err = FormatError(FormatErrorKind.MALFORMED_PARAM, 3, "@param")
        shifted = err.with_offset(10)
        assert shifted.line_number == 13
        assert shifted.kind == err.kind
        assert "(line 13)" in str(shifted)
