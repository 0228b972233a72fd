"""Reading args files into argument lists."""

import enum
from typing import Optional, TextIO

from . import shlex_parser

MAX_LINE_LENGTH = 4096

# str.isspace() treats these as whitespace, blank line detection does not
INFORMATION_SEPARATORS = "\x1c\x1d\x1e\x1f"


# Custom exceptions
class ArgsFileException(Exception):
    """Base exception for args file errors."""

    pass


class LineTooLong(ArgsFileException):
    """Raised when a line exceeds the maximum line length."""

    def __init__(self, lineno: int, max_line_length: int):
        super().__init__(
            f"line {lineno} is longer than {max_line_length} characters"
        )
        self.lineno = lineno


class DanglingContinuation(ArgsFileException):
    """Raised when a continuation line has no previous argument to extend."""

    def __init__(self, lineno: int, line: str):
        super().__init__(
            f"line {lineno}: continuation {line!r} without a previous argument"
        )
        self.lineno = lineno


class LineKind(enum.Enum):
    BLANK = "blank"
    COMMENT = "comment"
    SHELL = "shell"
    CONTINUATION = "continuation"
    LITERAL = "literal"


class JoinMode(enum.Enum):
    """Separator placed between an argument and its continuation."""

    NONE = ""
    EQUALS = "="
    SPACE = " "
    TAB = "\t"
    NEWLINE = "\n"


# Checked in order, the first matching prefix wins
DIRECTIVES = [
    ("#", LineKind.COMMENT, None),
    ("$ ", LineKind.SHELL, None),
    ("|= ", LineKind.CONTINUATION, JoinMode.EQUALS),
    ("|s ", LineKind.CONTINUATION, JoinMode.SPACE),
    ("|t ", LineKind.CONTINUATION, JoinMode.TAB),
    ("|n ", LineKind.CONTINUATION, JoinMode.NEWLINE),
    ("| ", LineKind.CONTINUATION, JoinMode.NONE),
]


def classify(line: str) -> tuple[LineKind, Optional[JoinMode], str]:
    """
    Classify a single args file line.

    Args:
        line: The line without its line terminator

    Returns:
        (kind, join_mode, remainder): The line kind, the join mode for
        continuation lines (None otherwise) and the line without its directive
        prefix
    """
    if all(c.isspace() and c not in INFORMATION_SEPARATORS for c in line):
        return LineKind.BLANK, None, line

    for prefix, kind, join_mode in DIRECTIVES:
        if line.startswith(prefix):
            return kind, join_mode, line[len(prefix) :]

    return LineKind.LITERAL, None, line


def read(stream: TextIO, max_line_length: int = MAX_LINE_LENGTH) -> list[str]:
    """
    Read all arguments from a text stream.

    Reading stops at the end of the stream, a last line without a line
    terminator is processed like any other line.

    Args:
        stream: The stream to read the args file content from
        max_line_length: Maximum number of characters per line

    Returns:
        List of arguments in file order

    Raises:
        LineTooLong: If a line exceeds max_line_length
        DanglingContinuation: If a continuation line comes before any argument
    """
    args = []

    for lineno, line in enumerate(stream, start=1):
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]

        if len(line) > max_line_length:
            raise LineTooLong(lineno, max_line_length)

        kind, join_mode, remainder = classify(line)

        if kind == LineKind.SHELL:
            args.extend(shlex_parser.split(remainder))
        elif kind == LineKind.CONTINUATION:
            if not args:
                raise DanglingContinuation(lineno, line)
            args[-1] = args[-1] + join_mode.value + remainder
        elif kind == LineKind.LITERAL:
            args.append(remainder)

    return args


def read_file(filepath: str, max_line_length: int = MAX_LINE_LENGTH) -> list[str]:
    """
    Read all arguments from the args file at filepath.

    The file is decoded as UTF-8, undecodable bytes are kept as surrogate
    escapes the same way Python decodes sys.argv.
    """
    with open(filepath, "r", encoding="utf-8", errors="surrogateescape") as f:
        return read(f, max_line_length)
