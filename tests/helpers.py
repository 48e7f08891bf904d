"""Shared test utility functions for layout lexer tests."""

import io
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from layout_lexer import (
    iter_line_tokens, iter_tokens, next_token, next_n_tokens, read_tokens,
    DELIMITERS, WHITESPACE,
)
from layout_lexer.records import Cell, Row, Site


def line_tokens(text):
    """Tokenize *text* in line mode, returning one list per non-empty line."""
    return list(iter_line_tokens(io.StringIO(text)))


def flat_line_tokens(text):
    return [tok for line in line_tokens(text) for tok in line]


def stream_tokens(text, comment_marker='#'):
    """Tokenize *text* in stream mode."""
    return list(iter_tokens(io.StringIO(text), comment_marker))


def assert_clean_line_token(token):
    """Line-mode tokens are non-empty and contain no delimiter."""
    assert token, "empty token emitted"
    bad = [c for c in token if c in DELIMITERS]
    assert not bad, f"token {token!r} contains delimiter(s) {bad!r}"


def assert_clean_stream_token(token):
    assert token, "empty token emitted"
    bad = [c for c in token if c in WHITESPACE]
    assert not bad, f"token {token!r} contains whitespace {bad!r}"


# ----------------------------------------------------------------------
# Minimal record builders, standing in for the real design database loader
# ----------------------------------------------------------------------
def build_row(tokens):
    """ROW <name> <site> <x> <y> <orient> DO <n> BY 1 STEP <sx> <sy>"""
    assert tokens[0] == 'ROW', tokens
    return Row(
        name=tokens[1],
        site=tokens[2],
        orig_x=int(tokens[3]),
        orig_y=int(tokens[4]),
        orient=tokens[5],
        num_sites=int(tokens[7]),
        step_x=int(tokens[11]),
        step_y=int(tokens[12]),
    )


def build_cell(tokens, ports=None):
    """- <name> <type> + PLACED|FIXED ( <x> <y> ) <orient>"""
    assert tokens[0] == '-', tokens
    x, y = float(tokens[5]), float(tokens[6])
    return Cell(
        name=tokens[1],
        type=tokens[2],
        is_fixed=tokens[4] == 'FIXED',
        init_x=x, init_y=y, x=x, y=y,
        orient=tokens[7],
        ports=ports,
    )


def build_rows_and_cells(stream):
    """Read ROW and component lines until END, using line mode."""
    rows, cells = [], []
    while True:
        tokens, found = read_tokens(stream)
        if not found or tokens[0] == 'END':
            return rows, cells
        if tokens[0] == 'ROW':
            rows.append(build_row(tokens))
        elif tokens[0] == '-':
            cells.append(build_cell(tokens))


def build_site(stream, comment_marker='#'):
    """Read one SITE ... END block in stream mode."""
    assert next_token(stream, comment_marker) == 'SITE'
    site = Site(name=next_token(stream, comment_marker))
    while True:
        keyword = next_token(stream, comment_marker)
        if keyword in ('', 'END'):
            next_token(stream, comment_marker)
            return site
        if keyword == 'CLASS':
            site.type = next_token(stream, comment_marker)
            assert next_token(stream, comment_marker) == ';'
        elif keyword == 'SYMMETRY':
            sym = next_token(stream, comment_marker)
            while sym not in (';', ''):
                site.symmetries.append(sym)
                sym = next_token(stream, comment_marker)
        elif keyword == 'SIZE':
            batch = next_n_tokens(stream, 4, comment_marker)
            assert not batch.short, batch
            site.width, site.height = float(batch[0]), float(batch[2])
