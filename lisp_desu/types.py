from dataclasses import dataclass
from enum import Enum
from typing import Union


class TokenKind(Enum):
    KEYWORD = "Keyword"
    IDENTIFIER = "Identifier"
    WHITESPACE = "Whitespace"
    COMMA = "Comma"
    OPEN_PAREN = "OpenParen"
    CLOSE_PAREN = "CloseParen"
    OPEN_ANGLE_BRACKET = "OpenAngleBracket"
    CLOSE_ANGLE_BRACKET = "CloseAngleBracket"
    EQUALS = "Equals"
    BANG = "Bang"
    AMPERSAND = "Ampersand"
    BACKQUOTE = "Backquote"
    LITERAL = "Literal"
    LINE_COMMENT = "LineComment"
    DUMMY = "Dummy"  # reserved, never produced by the lexer
    END_OF_INPUT = "EndOfInput"


class AtomKind(Enum):
    LITERAL = "Literal"
    SYMBOL = "Symbol"


@dataclass(frozen=True)
class Span:
    """Inclusive 1-indexed row/column range plus half-open char offsets.

    The all-zero span marks end of input.
    """
    start_row: int = 0
    start_col: int = 0
    end_row: int = 0
    end_col: int = 0
    start: int = 0
    end: int = 0

    def union(self, other: "Span") -> "Span":
        return Span(
            self.start_row, self.start_col,
            other.end_row, other.end_col,
            self.start, other.end,
        )

    @property
    def is_empty(self) -> bool:
        return self.start_row == 0


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    span: Span
    length: int

    def text(self, src: str) -> str:
        if self.kind is TokenKind.END_OF_INPUT:
            return ""
        return src[self.span.start:self.span.end]

    def describe(self, src: str) -> str:
        s = self.span
        return (
            f"{s.start_row:02}, {s.start_col:02} => {s.end_row:02}, {s.end_col:02}: "
            f"{self.kind.value} {self.text(src)!r}"
        )


# Syntax nodes. A form's tail holds data only; the closing paren ends it.

@dataclass(frozen=True)
class Atom:
    kind: AtomKind
    token: Token
    span: Span

    def text(self, src: str) -> str:
        return self.token.text(src)


@dataclass(frozen=True)
class EmptyList:
    span: Span


@dataclass(frozen=True)
class EndOfInput:
    span: Span = Span()


@dataclass(frozen=True)
class Form:
    head: "Node"
    tail: tuple["Node", ...]
    span: Span


Node = Union[Form, Atom, EmptyList, EndOfInput]
