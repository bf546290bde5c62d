import re
from typing import Dict, Iterator, List, Optional, Tuple

from lark.exceptions import LarkError, UnexpectedCharacters, UnexpectedEOF, UnexpectedToken

from gts.config.config import GO_KEYWORDS, SEMICOLON_KEYWORDS, TOKEN_FRIENDLY_NAMES
from gts.exceptions import ErrorCode, GoSpeechError
from gts.parser.core.classes import Span

# --- Constants for the checks ---
BRACKET_PAIRS = {"(": ")", "[": "]", "{": "}"}
OPENING_BRACKETS = set(BRACKET_PAIRS.keys())
CLOSING_BRACKETS = set(BRACKET_PAIRS.values())

# A coarse Go scanner: enough to know where strings, comments and line ends are.
GO_LEXEME_REGEX = re.compile(
    r"""
      (?P<raw_string>`[^`]*`)
    | (?P<string>"(?:\\.|[^"\\\n])*")
    | (?P<char>'(?:\\.|[^'\\\n])*')
    | (?P<line_comment>//[^\n]*)
    | (?P<block_comment>/\*[\s\S]*?\*/)
    | (?P<newline>\n)
    | (?P<space>[ \t\r\f\v]+)
    | (?P<word>[^\W\d]\w*)
    | (?P<number>\.?\d[\w.]*)
    | (?P<op>\+\+|--|[^\s\w])
    | (?P<other>.)
    """,
    re.VERBOSE,
)

LITERAL_LEXEMES = {"raw_string", "string", "char", "number"}
CLOSING_OPERATORS = {"++", "--", ")", "]", "}"}


def _scan(source: str) -> Iterator[Tuple[str, str, int, int]]:
    """Yields (kind, text, line, column) for every lexeme of the source, whitespace included."""
    line, line_start = 1, 0
    for match in GO_LEXEME_REGEX.finditer(source):
        kind, text = match.lastgroup, match.group()
        yield kind, text, line, match.start() - line_start + 1
        newlines = text.count("\n")
        if newlines:
            line += newlines
            line_start = match.start() + text.rfind("\n") + 1


def _ends_statement(kind: str, text: str) -> bool:
    if kind in LITERAL_LEXEMES:
        return True
    if kind == "word":
        return text not in GO_KEYWORDS or text in SEMICOLON_KEYWORDS
    return kind == "op" and text in CLOSING_OPERATORS


def insert_semicolons(script_content: str) -> str:
    """
    Applies Go's automatic semicolon insertion so the grammar can treat newlines as whitespace.
    A ';' is placed right after the last token of a line when that token is an identifier,
    a literal, one of the keywords break/continue/fallthrough/return, '++', '--', or a
    closing bracket. Only text after the insertion point on the same line is shifted,
    so line numbers reported by the parser stay accurate.
    """
    pieces: List[str] = []
    insertion_point = None  # index in `pieces` just after a statement-ending token

    for kind, text, _, _ in _scan(script_content):
        line_break = kind == "newline" or (kind == "block_comment" and "\n" in text)
        if line_break and insertion_point is not None:
            pieces.insert(insertion_point, ";")
            insertion_point = None

        pieces.append(text)

        if kind in ("space", "newline", "line_comment", "block_comment"):
            continue
        insertion_point = len(pieces) if _ends_statement(kind, text) else None

    if insertion_point is not None:
        pieces.insert(insertion_point, ";")

    return "".join(pieces)


def pre_parsing_checks(script_content: str, file_path: str):
    """
    Performs a simple pre-parsing check for mismatched or unclosed brackets across the
    whole file, ignoring strings, runes and comments, to give a better message than Lark.
    """
    bracket_stack = []  # A stack of (char, line_num, col_num)
    for kind, text, line_num, col_num in _scan(script_content):
        if kind != "op":
            continue

        if text in OPENING_BRACKETS:
            bracket_stack.append((text, line_num, col_num))
        elif text in CLOSING_BRACKETS:
            if not bracket_stack:
                span = Span(s_line=line_num, s_col=col_num, e_line=line_num, e_col=col_num + 1, file_path=file_path)
                raise GoSpeechError(code=ErrorCode.SYNTAX_UNMATCHED_BRACKET, span=span, char=text)

            opening_char, _, _ = bracket_stack.pop()
            if BRACKET_PAIRS[opening_char] != text:
                span = Span(s_line=line_num, s_col=col_num, e_line=line_num, e_col=col_num + 1, file_path=file_path)
                raise GoSpeechError(code=ErrorCode.SYNTAX_UNMATCHED_BRACKET, span=span, char=text)

    if bracket_stack:
        opening_char, line_num, col_num = bracket_stack[-1]
        span = Span(s_line=line_num, s_col=col_num, e_line=line_num, e_col=col_num + 1, file_path=file_path)
        raise GoSpeechError(code=ErrorCode.SYNTAX_UNMATCHED_BRACKET, span=span, char=opening_char)


def _friendly_terminal(name: str, terminal_literals: Dict[str, str]) -> str:
    if name in TOKEN_FRIENDLY_NAMES:
        return TOKEN_FRIENDLY_NAMES[name]
    literal = terminal_literals.get(name)
    if literal is None:
        return name
    # Anonymous terminals (e.g. "__ANON_3" for "&&") are shown as the text they match.
    return f"the '{literal}' keyword" if literal in GO_KEYWORDS else f"'{literal}'"


def _describe_expected(expected, terminal_literals: Optional[Dict[str, str]] = None) -> str:
    terminal_literals = terminal_literals or {}
    friendly_expected = sorted({_friendly_terminal(e, terminal_literals) for e in expected})
    if len(friendly_expected) > 1:
        return f"Expected one of: {', '.join(friendly_expected[:-1])} or {friendly_expected[-1]}"
    if friendly_expected:
        return f"Expected {friendly_expected[0]}"
    return ""


def _translate_lark_error(err: LarkError, file_path: str, terminal_literals: Optional[Dict[str, str]] = None) -> GoSpeechError:
    """
    Translates a generic LarkError into a user-friendly GoSpeechError.
    `terminal_literals` maps terminal names to the literal text of string terminals.
    """

    if isinstance(err, UnexpectedEOF):
        return GoSpeechError(code=ErrorCode.SYNTAX_UNEXPECTED_EOF, file_path=file_path, details=_describe_expected(err.expected, terminal_literals))

    if isinstance(err, UnexpectedToken):
        expected_str = _describe_expected(err.expected or [], terminal_literals)

        found_token = err.token
        found_str = f"but found '{found_token.value}' instead."
        if found_token.type == "$END":
            found_str = "but reached the end of the file instead."
        elif found_token.type == "SEMICOLON":
            found_str = "but the line ended instead."

        details = f"{expected_str}, {found_str}" if expected_str else f"Found unexpected token '{found_token.value}'."

        span = None
        if getattr(found_token, "line", None) is not None:
            span = Span(s_line=found_token.line, s_col=found_token.column, e_line=found_token.end_line, e_col=found_token.end_column, file_path=file_path)
        return GoSpeechError(code=ErrorCode.SYNTAX_UNEXPECTED_TOKEN, span=span, file_path=file_path, details=details)

    elif isinstance(err, UnexpectedCharacters):
        span = Span(s_line=err.line, s_col=err.column, e_line=err.line, e_col=err.column, file_path=file_path)
        return GoSpeechError(code=ErrorCode.SYNTAX_INVALID_CHARACTER, span=span, char=err.char)

    # Fallback for any other Lark error
    return GoSpeechError(code=ErrorCode.SYNTAX_PARSING_ERROR, file_path=file_path, details=str(err))
