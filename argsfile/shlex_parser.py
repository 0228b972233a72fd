"""Shell-like lexer for the `$ ` lines of args files."""

WHITESPACE = (" ", "\t", "\r", "\n")


def split(line: str) -> list[str]:
    """
    Split a line into words, handling quotes and escapes.

    Rules:
    - Whitespace separates words unless it is inside a quoted region
    - Single ('), double (") and back (`) quotes group words
    - A quote character is literal inside a region of another quote type
    - Backslash (\\) escapes the next character, except inside single quotes
    - Quotes and escaping backslashes are removed from words
    - Unterminated quotes are closed at the end of the line

    Args:
        line: The line to split

    Returns:
        List of parsed words, never containing empty strings
    """
    words = []
    word_chars = []
    escaped = False
    single_quoted = False
    double_quoted = False
    back_quoted = False

    for c in line:
        if escaped:
            word_chars.append(c)
            escaped = False
        elif c == "\\":
            if single_quoted:
                word_chars.append(c)
            else:
                escaped = True
        elif c in WHITESPACE:
            if single_quoted or double_quoted or back_quoted:
                word_chars.append(c)
            elif word_chars:
                words.append("".join(word_chars))
                word_chars = []
        elif c == "`":
            if single_quoted or double_quoted:
                word_chars.append(c)
            else:
                back_quoted = not back_quoted
        elif c == '"':
            if single_quoted or back_quoted:
                word_chars.append(c)
            else:
                double_quoted = not double_quoted
        elif c == "'":
            if double_quoted or back_quoted:
                word_chars.append(c)
            else:
                single_quoted = not single_quoted
        else:
            word_chars.append(c)

    if word_chars:
        words.append("".join(word_chars))

    return words
