import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))

from gts.parser.core.classes import *
from gts.parser.utils.factory_helpers import *
from gts.speech.core.expression_speaker import ExpressionSpeaker
from gts.speech.sinks import RecordingSink


def speak_expression(node):
    sink = RecordingSink()
    ExpressionSpeaker(sink).speak(node)
    return sink.utterances


@pytest.mark.parametrize(
    "node, expected",
    [
        pytest.param(get_identifier("fmt"), ["fumt"], id="identifier_translated"),
        pytest.param(get_identifier("count"), ["count"], id="identifier_plain"),
        pytest.param(get_identifier("utf8"), ["you tee f 8"], id="identifier_split"),
        pytest.param(get_string_lit("hello, world"), ['"hello, world"'], id="string_literal_verbatim"),
        pytest.param(get_basic_lit("3.14", kind="FLOAT"), ["3.14"], id="float_literal"),
        pytest.param(get_array_type("int"), ["slice of", "int"], id="slice_type"),
        pytest.param(get_array_type("byte", length=get_basic_lit("4")), ["array of", "byte"], id="array_length_not_spoken"),
        pytest.param(get_pointer_type("Node"), ["pointer to", "Node"], id="pointer_type"),
        pytest.param(get_map_type("string", "int"), ["map with", "string", "key and", "int", "value"], id="map_type"),
        pytest.param(
            get_map_type("string", get_array_type(get_pointer_type("Node"))),
            ["map with", "string", "key and", "slice of", "pointer to", "Node", "value"],
            id="nested_types",
        ),
        pytest.param(get_selector("fmt", "Println"), ["fumt", "dot", "print line"], id="selector"),
        pytest.param(get_binary("==", "a", "b"), ["a", "equals", "b"], id="binary_equals"),
        pytest.param(get_binary("&^", "x", "mask"), ["x", "bitwise and not", "mask"], id="binary_and_not"),
        pytest.param(
            get_binary("&&", get_binary("<", "i", "n"), get_unary("!", "done")),
            ["i", "is less than", "n", "and", "not", "done"],
            id="nested_binary",
        ),
        pytest.param(get_unary("-", get_basic_lit("1")), ["negative", "1"], id="unary_minus"),
        pytest.param(get_unary("<-", "ch"), ["receive from channel", "ch"], id="unary_receive"),
        pytest.param(get_unary("~", "x"), ["x"], id="unary_unmapped_operator"),
        pytest.param(get_paren(get_binary("+", "a", "b")), ["left paren", "a", "plus", "b", "right paren"], id="paren"),
        pytest.param(IndexExpr(base=get_identifier("xs"), index=get_basic_lit("0")), [], id="unhandled_variant_is_silent"),
        pytest.param(CompositeLit(literal_type=get_identifier("Point"), elements=[get_basic_lit("1")]), [], id="composite_literal_is_silent"),
        pytest.param(None, [], id="absent_expression"),
    ],
)
def test_speak_expression(node, expected):
    assert speak_expression(node) == expected


def test_unmapped_binary_operator_emits_only_operands():
    assert speak_expression(get_binary("<-", "a", "b")) == ["a", "b"]


@pytest.mark.parametrize(
    "node, expected",
    [
        pytest.param(get_call("run"), ["call", "run"], id="no_arguments"),
        pytest.param(get_call(get_selector("wg", "Wait")), ["call", "wg", "dot", "Wait"], id="no_arguments_selector"),
        pytest.param(get_call("max", ["a", "b"]), ["max", "of", "a", "comma", "b"], id="two_arguments"),
        pytest.param(
            get_call(get_selector("fmt", "Println"), [get_string_lit("hi")]),
            ["fumt", "dot", "print line", "of", '"hi"'],
            id="selector_callee",
        ),
        pytest.param(get_call("append", ["xs", "ys"], ellipsis=1), ["append", "of", "xs", "comma", "ellipsis", "ys"], id="spread_last_argument"),
        pytest.param(get_call("f", ["args"], ellipsis=0), ["f", "of", "ellipsis", "args"], id="spread_first_argument"),
        pytest.param(
            get_call("g", ["a", "b", "c"], ellipsis=1),
            ["g", "of", "a", "comma", "ellipsis", "b", "comma", "c"],
            id="ellipsis_announced_once",
        ),
        pytest.param(
            get_call("outer", [get_call("inner")]),
            ["outer", "of", "call", "inner"],
            id="nested_call",
        ),
    ],
)
def test_speak_call(node, expected):
    assert speak_expression(node) == expected


def test_speaking_does_not_mutate_the_tree():
    node = get_call("append", ["xs", "ys"], ellipsis=1)
    before = node.model_dump()
    speak_expression(node)
    assert node.model_dump() == before
