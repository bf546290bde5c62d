import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))

from gts.exceptions import ErrorCode, GoSpeechError
from gts.parser.utils.helpers import insert_semicolons, pre_parsing_checks


@pytest.mark.parametrize(
    "source, expected",
    [
        pytest.param("package main\n", "package main;\n", id="identifier_at_line_end"),
        pytest.param("x := 1 // one\n", "x := 1; // one\n", id="before_line_comment"),
        pytest.param("return\n", "return;\n", id="return_keyword"),
        pytest.param("break\n", "break;\n", id="break_keyword"),
        pytest.param("x++\n", "x++;\n", id="increment"),
        pytest.param("f(\n\ta,\n\tb,\n)\n", "f(\n\ta,\n\tb,\n);\n", id="trailing_commas"),
        pytest.param("if x {\n}\n", "if x {\n};\n", id="opening_brace"),
        pytest.param("s := `a\nb`\n", "s := `a\nb`;\n", id="raw_string_spans_lines"),
        pytest.param("r := 'x'\n", "r := 'x';\n", id="rune"),
        pytest.param('s := "}"\n', 's := "}";\n', id="brace_inside_string"),
        pytest.param("x := 1 /* a\nb */ y := 2", "x := 1; /* a\nb */ y := 2;", id="multiline_block_comment"),
        pytest.param("x := 1 /* a */\n", "x := 1; /* a */\n", id="inline_block_comment"),
        pytest.param("x := 1", "x := 1;", id="end_of_file"),
        pytest.param("func f() {", "func f() {", id="no_insertion_after_brace_at_eof"),
        pytest.param("a := b +\n\tc\n", "a := b +\n\tc;\n", id="continued_expression"),
        pytest.param("import (\n\t\"fmt\"\n)\n", "import (\n\t\"fmt\";\n);\n", id="import_group"),
        pytest.param("", "", id="empty"),
    ],
)
def test_insert_semicolons(source, expected):
    assert insert_semicolons(source) == expected


def test_insertion_keeps_line_count():
    source = "package main\n\nfunc main() {\n\tx := 1\n\tx++\n}\n"
    assert insert_semicolons(source).count("\n") == source.count("\n")


@pytest.mark.parametrize(
    "code",
    [
        pytest.param("package main\nfunc f() {", id="unclosed_brace"),
        pytest.param("x := )", id="unopened_paren"),
        pytest.param("f(]", id="mismatched_pair"),
        pytest.param("xs := []int{1, 2", id="unclosed_literal"),
    ],
)
def test_unmatched_brackets(code):
    with pytest.raises(GoSpeechError) as excinfo:
        pre_parsing_checks(code, "main.go")

    assert excinfo.value.code == ErrorCode.SYNTAX_UNMATCHED_BRACKET


def test_unclosed_bracket_location():
    with pytest.raises(GoSpeechError) as excinfo:
        pre_parsing_checks("package main\nfunc f() {\n", "main.go")

    span = excinfo.value.span
    assert (span.s_line, span.s_col) == (2, 10)
    assert "Line: 2" in str(excinfo.value)


@pytest.mark.parametrize(
    "code",
    [
        pytest.param('s := "(("', id="string"),
        pytest.param("s := `]]`", id="raw_string"),
        pytest.param("r := '('", id="rune"),
        pytest.param("x := 1 // (", id="line_comment"),
        pytest.param("x := 1 /* { */", id="block_comment"),
    ],
)
def test_brackets_in_literals_and_comments_are_ignored(code):
    pre_parsing_checks(code, "main.go")
