"""layout_lexer - tokenizers and diagnostic dumps for placement layout files."""

from .tokens import (
    SPECIAL_CHARS, WHITESPACE, DELIMITERS, DEFAULT_COMMENT_MARKER,
    is_special_char, is_whitespace, is_delimiter, split_line,
)
from .lexer import (
    LineTokenizer, CommentAwareTokenReader, TokenBatch,
    iter_line_tokens, read_tokens, iter_tokens, next_token, next_n_tokens,
)
from .errors import LayoutLexError, ClosedStreamError
from .records import Record, Cell, Row, Site, DensityBin
from .printer import RecordPrinter
from .diagnostics import dump_record, dump_records, log_record
from .logging_config import setup_logging


def open_layout(path):
    """Open a layout file for reading. The caller closes it."""
    return open(path, 'r', encoding='utf-8', errors='replace')


def tokenize_file(path):
    """Return the token list of every non-empty line of the file at *path*."""
    with open_layout(path) as f:
        return list(iter_line_tokens(f))


def read_all_tokens(path, comment_marker=DEFAULT_COMMENT_MARKER):
    """Return every non-comment stream-mode token of the file at *path*."""
    with open_layout(path) as f:
        return list(iter_tokens(f, comment_marker))
