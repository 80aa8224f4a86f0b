"""Recursive-descent reader building syntax trees from lexer tokens.

Line comments are skipped inside forms as well as between them, so
`(a ; note\\n b)` reads as `(a b)`. Nesting deeper than MAX_DEPTH raises
NestingTooDeep rather than exhausting the interpreter stack.
"""

import logging
from typing import Iterable, Iterator

from .lexer import Cursor
from .types import (
    Atom, AtomKind, EmptyList, EndOfInput, Form, Node, Span, Token, TokenKind,
)

_logger = logging.getLogger("lisp_desu.parser")

MAX_DEPTH = 128

# Kinds that may open a cell inside a form.
FORM_KINDS = (
    TokenKind.IDENTIFIER,
    TokenKind.KEYWORD,
    TokenKind.BACKQUOTE,
    TokenKind.LITERAL,
    TokenKind.OPEN_PAREN,
    TokenKind.CLOSE_PAREN,
    TokenKind.OPEN_ANGLE_BRACKET,
    TokenKind.CLOSE_ANGLE_BRACKET,
    TokenKind.EQUALS,
    TokenKind.BANG,
    TokenKind.AMPERSAND,
)

TOP_LEVEL_KINDS = (
    TokenKind.WHITESPACE,
    TokenKind.LINE_COMMENT,
    TokenKind.OPEN_PAREN,
    TokenKind.END_OF_INPUT,
)

_TRIVIA = (TokenKind.WHITESPACE, TokenKind.LINE_COMMENT)


class ParseError(SyntaxError):
    pass


class UnexpectedToken(ParseError):
    prefix = "expected one of"

    def __init__(self, expected: Iterable[TokenKind], token: Token):
        self.expected = tuple(expected)
        self.token = token
        names = ", ".join(k.value for k in self.expected)
        super().__init__(
            f"{self.prefix} [{names}], got {token.kind.value} "
            f"at {token.span.start_row}:{token.span.start_col}"
        )


class UnsupportedConstruct(UnexpectedToken):
    """Only parenthesized forms are readable at top level."""

    prefix = "unsupported top-level construct; expected one of"

    def __init__(self, token: Token):
        super().__init__(TOP_LEVEL_KINDS, token)


class NestingTooDeep(ParseError):
    def __init__(self, token: Token):
        self.token = token
        super().__init__(
            f"forms nested deeper than {MAX_DEPTH} "
            f"at {token.span.start_row}:{token.span.start_col}"
        )


class Reader:
    def __init__(self, src: str):
        self.src = src
        self.cursor = Cursor(src)
        self._depth = 0

    def __iter__(self) -> Iterator[Node]:
        while True:
            node = self.next_node()
            if isinstance(node, EndOfInput):
                return
            yield node

    def next_node(self) -> Node:
        """Read one complete top-level form, or EndOfInput once exhausted."""
        while True:
            tok = self.cursor.next_token()
            if tok.kind not in _TRIVIA:
                break
        if tok.kind is TokenKind.END_OF_INPUT:
            return EndOfInput(Span())
        if tok.kind is not TokenKind.OPEN_PAREN:
            raise UnsupportedConstruct(tok)
        node = self._parse_form(tok)
        if _logger.isEnabledFor(logging.DEBUG):
            _logger.debug("read top-level node:\n%s", format_node(node, self.src))
        return node

    def _parse_form(self, open_tok: Token) -> Node:
        self._depth += 1
        if self._depth > MAX_DEPTH:
            self._depth -= 1
            raise NestingTooDeep(open_tok)
        try:
            return self._parse_form_inner(open_tok)
        finally:
            self._depth -= 1

    def _parse_form_inner(self, open_tok: Token) -> Node:
        first = self._expect(FORM_KINDS)
        if first.kind is TokenKind.CLOSE_PAREN:
            return EmptyList(open_tok.span.union(first.span))

        head = self._parse_cell(first)
        tail: list[Node] = []
        while True:
            tok = self._expect(FORM_KINDS)
            if tok.kind is TokenKind.CLOSE_PAREN:
                break
            tail.append(self._parse_cell(tok))
        return Form(head, tuple(tail), open_tok.span.union(tok.span))

    def _parse_cell(self, tok: Token) -> Node:
        if tok.kind is TokenKind.OPEN_PAREN:
            return self._parse_form(tok)
        if tok.kind in (TokenKind.IDENTIFIER, TokenKind.KEYWORD):
            return Atom(AtomKind.SYMBOL, tok, tok.span)
        return Atom(AtomKind.LITERAL, tok, tok.span)

    def _expect(self, kinds: tuple[TokenKind, ...]) -> Token:
        while True:
            tok = self.cursor.next_token()
            if tok.kind not in _TRIVIA:
                break
        if tok.kind not in kinds:
            raise UnexpectedToken(kinds, tok)
        return tok


def parse(src: str) -> list[Node]:
    """Parse every top-level form in src."""
    return list(Reader(src))


def format_node(node: Node, src: str) -> str:
    """Debug dump: one line per atom in source order."""
    lines: list[str] = []

    def walk(n: Node) -> None:
        if isinstance(n, Form):
            walk(n.head)
            for t in n.tail:
                walk(t)
        elif isinstance(n, Atom):
            lines.append(n.token.describe(src))
        elif isinstance(n, EmptyList):
            lines.append(f"{n.span.start_row:02}, {n.span.start_col:02} => "
                         f"{n.span.end_row:02}, {n.span.end_col:02}: EmptyList '()'")
        else:
            lines.append("EndOfInput")

    walk(node)
    return "\n".join(lines)
