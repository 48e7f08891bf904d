"""Tokenizers for layout description streams.

Two reading modes share one character classification:

* line mode (``iter_line_tokens`` / ``read_tokens``) splits each line on
  whitespace and the special punctuation set, skipping lines without tokens;
* stream mode (``iter_tokens`` / ``next_token`` / ``next_n_tokens``) reads
  whitespace-delimited tokens across lines and drops comments.

Neither mode buffers input between calls, so a caller may switch modes on
the same stream. The stream always belongs to the caller.
"""

import logging

from .errors import ClosedStreamError
from .tokens import DEFAULT_COMMENT_MARKER, WHITESPACE, split_line

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
# Stream access
# ----------------------------------------------------------------------
def _check_open(stream):
    if getattr(stream, 'closed', False):
        raise ClosedStreamError(stream)


def _as_text(data):
    # binary streams are read as ASCII, one byte per character
    if isinstance(data, (bytes, bytearray)):
        return data.decode('ascii', errors='replace')
    return data


def _readline(stream):
    _check_open(stream)
    try:
        return _as_text(stream.readline())
    except ValueError as exc:
        # io raises a bare ValueError for I/O on a closed file
        if getattr(stream, 'closed', False):
            raise ClosedStreamError(stream) from exc
        raise


def _readchar(stream):
    _check_open(stream)
    try:
        return _as_text(stream.read(1))
    except ValueError as exc:
        if getattr(stream, 'closed', False):
            raise ClosedStreamError(stream) from exc
        raise


# ----------------------------------------------------------------------
# Line mode
# ----------------------------------------------------------------------
def iter_line_tokens(stream):
    """Yield the token list of every line that has at least one token.

    Blank lines and lines made only of delimiters are skipped. One line is
    read per step, and the generator ends when the stream is exhausted.
    """
    skipped = 0
    while True:
        line = _readline(stream)
        if not line:
            if skipped:
                logger.debug("Reached end of input after skipping %d empty line(s)", skipped)
            return
        tokens = split_line(line)
        if tokens:
            skipped = 0
            yield tokens
        else:
            skipped += 1


def read_tokens(stream):
    """Read the next non-empty line as tokens.

    Returns ``(tokens, found)``. ``found`` is ``False`` only when the stream
    ran out before any line produced a token.
    """
    tokens = next(iter_line_tokens(stream), None)
    if tokens is None:
        return [], False
    return tokens, True


class LineTokenizer:
    """Line-mode tokenizer bound to one stream."""

    def __init__(self, stream):
        self.stream = stream

    def __iter__(self):
        return iter_line_tokens(self.stream)

    def read_tokens(self):
        return read_tokens(self.stream)


# ----------------------------------------------------------------------
# Stream mode
# ----------------------------------------------------------------------
def _check_marker(comment_marker):
    if not comment_marker:
        raise ValueError("comment marker must be a non-empty string")


def _is_comment(token, comment_marker):
    # a token shorter than the marker never matches
    return token.startswith(comment_marker)


def _scan_word(stream):
    """Read one whitespace-delimited word.

    Returns ``(word, end)`` where *end* is the whitespace character that
    terminated the word, or ``''`` at end of input. *word* is empty only at
    end of input.
    """
    ch = _readchar(stream)
    while ch and ch in WHITESPACE:
        ch = _readchar(stream)
    chars = []
    while ch and ch not in WHITESPACE:
        chars.append(ch)
        ch = _readchar(stream)
    return ''.join(chars), ch


def _generate_tokens(stream, comment_marker):
    while True:
        word, end = _scan_word(stream)
        if not word:
            return
        if _is_comment(word, comment_marker):
            rest = ''
            if end and end != '\n':
                rest = _readline(stream)
            logger.debug("Discarded comment %r and %d trailing char(s)", word, len(rest))
            continue
        yield word


def iter_tokens(stream, comment_marker=DEFAULT_COMMENT_MARKER):
    """Yield whitespace-delimited tokens, dropping comments.

    A token starting with *comment_marker* is discarded together with the
    rest of its line. The generator is lazy and ends at end of input.
    """
    _check_marker(comment_marker)
    return _generate_tokens(stream, comment_marker)


def next_token(stream, comment_marker=DEFAULT_COMMENT_MARKER):
    """Return the next non-comment token, or ``''`` if the stream is exhausted."""
    return next(iter_tokens(stream, comment_marker), '')


class TokenBatch(list):
    """Tokens read by ``next_n_tokens`` together with the count requested."""

    def __init__(self, tokens=(), requested=0):
        super().__init__(tokens)
        self.requested = requested

    @property
    def short(self):
        """``True`` when the stream ran out before *requested* tokens were read."""
        return len(self) < self.requested

    def __repr__(self):
        return f"TokenBatch({list(self)!r}, requested={self.requested})"


def next_n_tokens(stream, n, comment_marker=DEFAULT_COMMENT_MARKER):
    """Read up to *n* non-comment tokens.

    Returns a ``TokenBatch``; check ``batch.short`` (or compare its length
    with *n*) to detect that the stream was exhausted first.
    """
    tokens = iter_tokens(stream, comment_marker)
    batch = TokenBatch(requested=n)
    if n <= 0:
        return batch
    for token in tokens:
        batch.append(token)
        if len(batch) >= n:
            break
    if batch.short:
        logger.debug("Short read: got %d of %d token(s)", len(batch), n)
    return batch


class CommentAwareTokenReader:
    """Stream-mode reader bound to one stream and comment marker."""

    def __init__(self, stream, comment_marker=DEFAULT_COMMENT_MARKER):
        _check_marker(comment_marker)
        self.stream = stream
        self.comment_marker = comment_marker

    def __iter__(self):
        return iter_tokens(self.stream, self.comment_marker)

    def next_token(self):
        return next_token(self.stream, self.comment_marker)

    def next_n_tokens(self, n):
        return next_n_tokens(self.stream, n, self.comment_marker)
