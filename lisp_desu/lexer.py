"""Positional character tokenizer for lisp-desu source text."""

import copy
import logging
from typing import Iterator, Optional

from .types import Span, Token, TokenKind

_logger = logging.getLogger("lisp_desu.lexer")

KEYWORDS = frozenset(["defun", "and", "or", "not", "cond", "nil", "if", "case"])
KEYWORD_PREFIXES = frozenset(w[0] for w in KEYWORDS)

WHITESPACE = frozenset(" \t\n")
STRING_QUOTES = frozenset('"')

_SINGLE = {
    "'": TokenKind.BACKQUOTE,
    "`": TokenKind.BACKQUOTE,
    "&": TokenKind.AMPERSAND,
    "=": TokenKind.EQUALS,
    "!": TokenKind.BANG,
    "<": TokenKind.OPEN_ANGLE_BRACKET,
    ">": TokenKind.CLOSE_ANGLE_BRACKET,
    "(": TokenKind.OPEN_PAREN,
    ")": TokenKind.CLOSE_PAREN,
    ",": TokenKind.COMMA,
}


def is_end_ident(ch: str) -> bool:
    return ch in "()" or ch in WHITESPACE


class Cursor:
    """Pulls classified tokens off a source string.

    Never raises: malformed input gets a best-effort classification and an
    exhausted cursor keeps returning END_OF_INPUT.
    """

    def __init__(self, src: str):
        self.src = src
        self._pos = 0
        self._row = 1
        self._col = 1

    def clone(self) -> "Cursor":
        return copy.copy(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next_token()
            if tok.kind is TokenKind.END_OF_INPUT:
                return
            yield tok

    def next_token(self) -> Token:
        start = self._pos
        ch = self._bump()
        if ch is None:
            return Token(TokenKind.END_OF_INPUT, Span(start=start, end=start), 0)

        if ch == ";":
            kind = self._line_comment()
        elif ch in _SINGLE:
            kind = _SINGLE[ch]
        elif ch in WHITESPACE:
            self._eat_while(lambda c: c in WHITESPACE)
            kind = TokenKind.WHITESPACE
        elif ch in KEYWORD_PREFIXES:
            kind = self._keyword(start)
        elif ch in STRING_QUOTES:
            kind = self._string_literal(ch)
        else:
            self._eat_while(lambda c: not is_end_ident(c))
            kind = TokenKind.IDENTIFIER

        tok = Token(kind, self._make_span(start), self._pos - start)
        if _logger.isEnabledFor(logging.DEBUG):
            _logger.debug(tok.describe(self.src))
        return tok

    # --- Scanners ---

    def _line_comment(self) -> TokenKind:
        self._eat_while(lambda c: c != "\n")
        return TokenKind.LINE_COMMENT

    def _keyword(self, start: int) -> TokenKind:
        self._eat_while(lambda c: not is_end_ident(c))
        if self.src[start:self._pos] in KEYWORDS:
            return TokenKind.KEYWORD
        return TokenKind.IDENTIFIER

    def _string_literal(self, quote: str) -> TokenKind:
        # No escapes; an unterminated literal runs to end of input.
        while True:
            ch = self._bump()
            if ch is None or ch == quote:
                return TokenKind.LITERAL

    # --- Character cursor ---

    def _peek(self) -> Optional[str]:
        if self._pos < len(self.src):
            return self.src[self._pos]
        return None

    def _bump(self) -> Optional[str]:
        ch = self._peek()
        if ch is not None:
            self._pos += 1
        return ch

    def _eat_while(self, pred) -> None:
        while True:
            ch = self._peek()
            if ch is None or not pred(ch):
                return
            self._pos += 1

    def _make_span(self, start: int) -> Span:
        """Replay the consumed characters to find the end row/column.

        The end position is that of the last consumed character; the cursor
        row/column advances past it.
        """
        start_row, start_col = self._row, self._col
        row, col = start_row, start_col
        end_row, end_col = row, col
        for ch in self.src[start:self._pos]:
            end_row, end_col = row, col
            if ch == "\n":
                row += 1
                col = 1
            else:
                col += 1
        self._row, self._col = row, col
        return Span(start_row, start_col, end_row, end_col, start, self._pos)


def tokenize(src: str) -> list[Token]:
    return list(Cursor(src))
