"""
Custom exception types for the Go speaker.
"""

from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from gts.parser.core.classes import Span


class ErrorCode(Enum):

    # --- Input Errors ---
    SOURCE_FILE_NOT_FOUND = "File {path} does not exist"

    # --- Speech Output Errors ---
    SPEECH_COMMAND_FAILED = "Unable to run {command}: {error}"

    # --- Syntax Pre-Parsing Errors ---
    SYNTAX_UNMATCHED_BRACKET = "Syntax Error: Unmatched bracket '{char}'."

    # This code is for when the parser finds a token that is valid, but not in the right place.
    SYNTAX_UNEXPECTED_TOKEN = "Syntax Error: Invalid syntax. {details}"

    # The source ended in the middle of a declaration or statement.
    SYNTAX_UNEXPECTED_EOF = "Syntax Error: Unexpected end of file. {details}"

    # This code is for when the lexer finds a character that doesn't belong to any token.
    SYNTAX_INVALID_CHARACTER = "Syntax Error: Invalid character '{char}' found."

    # This is a fallback for any other, less common parsing errors from Lark.
    SYNTAX_PARSING_ERROR = "Syntax Error: A general parsing error occurred. Details: {details}"


class GoSpeechError(Exception):
    def __init__(
        self,
        code: ErrorCode,
        span: Optional["Span"] = None,
        file_path: Optional[str] = None,
        **kwargs,
    ):
        self.code = code
        self.span = span
        self.details = kwargs

        # The format string (e.g., "Unmatched bracket '{char}'") is populated
        # with any extra data it needs from kwargs.
        core_message = code.value.format(**kwargs)

        location_prefix = ""
        if span:
            location_prefix = f"Error in '{span.file_path or file_path}' (Line: {span.s_line}, Column: {span.s_col}):\n"
        elif file_path:
            location_prefix = f"Error in '{file_path}': "

        self.message = location_prefix + core_message

        super().__init__(self.message)


class InternalSpeakerError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
