"""Character classes and line splitting shared by both layout tokenizers."""

# Punctuation that ends a token in line mode.
SPECIAL_CHARS = frozenset('(),:;/#[]{}*"\\')

# Same set as C isspace().
WHITESPACE = frozenset(' \t\n\r\v\f')

DELIMITERS = SPECIAL_CHARS | WHITESPACE

DEFAULT_COMMENT_MARKER = '#'


def is_special_char(c):
    return c in SPECIAL_CHARS


def is_whitespace(c):
    return c in WHITESPACE


def is_delimiter(c):
    """Return ``True`` if *c* terminates a token in line mode.

    Total over all inputs: anything that is not a single delimiter character,
    including the empty string, is not a delimiter.
    """
    return c in DELIMITERS


def split_line(line):
    """Split one line into its maximal delimiter-free runs.

    Consecutive delimiters never produce empty tokens.
    """
    tokens = []
    current = []
    for ch in line:
        if ch in DELIMITERS:
            if current:
                tokens.append(''.join(current))
                current = []
        else:
            current.append(ch)
    if current:
        tokens.append(''.join(current))
    return tokens
