import pytest
from lisp_desu.lexer import Cursor, KEYWORDS, tokenize
from lisp_desu.types import Span, TokenKind as K


def kinds(src):
    return [t.kind for t in tokenize(src)]


def texts(src):
    return [t.text(src) for t in tokenize(src)]


def test_simple_form():
    assert kinds("(add 1 2)") == [
        K.OPEN_PAREN, K.IDENTIFIER, K.WHITESPACE, K.IDENTIFIER,
        K.WHITESPACE, K.IDENTIFIER, K.CLOSE_PAREN,
    ]
    assert texts("(add 1 2)") == ["(", "add", " ", "1", " ", "2", ")"]


def test_single_char_kinds():
    assert kinds(",<>=!&'`") == [
        K.COMMA, K.OPEN_ANGLE_BRACKET, K.CLOSE_ANGLE_BRACKET, K.EQUALS,
        K.BANG, K.AMPERSAND, K.BACKQUOTE, K.BACKQUOTE,
    ]


def test_whitespace_run_is_one_token():
    toks = tokenize(" \t\n ")
    assert len(toks) == 1
    assert toks[0].kind is K.WHITESPACE
    assert toks[0].length == 4


def test_identifier_ends_at_paren():
    assert texts("foo(bar") == ["foo", "(", "bar"]


def test_identifier_keeps_punctuation():
    assert texts("a,b<c") == ["a,b<c"]


class TestKeywords:
    @pytest.mark.parametrize("word", sorted(KEYWORDS))
    def test_exact_match(self, word):
        assert kinds(word) == [K.KEYWORD]

    @pytest.mark.parametrize("word", ["defx", "nilly", "an", "iff", "conde"])
    def test_prefix_only_is_identifier(self, word):
        assert kinds(word) == [K.IDENTIFIER]

    def test_keyword_before_paren(self):
        assert kinds("and)") == [K.KEYWORD, K.CLOSE_PAREN]


class TestLiterals:
    def test_quoted_literal(self):
        src = '"hi there"'
        toks = tokenize(src)
        assert [t.kind for t in toks] == [K.LITERAL]
        assert toks[0].text(src) == '"hi there"'

    def test_no_escape_processing(self):
        src = r'"a\"b'
        assert texts(src) == [r'"a\"', "b"]

    def test_unterminated_consumes_to_end(self):
        src = '(f "abc def'
        toks = tokenize(src)
        assert toks[-1].kind is K.LITERAL
        assert toks[-1].text(src) == '"abc def'

    def test_backquote_is_not_a_literal(self):
        assert kinds("'x") == [K.BACKQUOTE, K.IDENTIFIER]


class TestComments:
    def test_stops_before_newline(self):
        src = "; hi\n(x)"
        assert texts(src) == ["; hi", "\n", "(", "x", ")"]
        assert kinds(src)[0] is K.LINE_COMMENT

    def test_at_end_of_input(self):
        assert kinds("; end") == [K.LINE_COMMENT]

    def test_empty_comment(self):
        assert texts(";\n") == [";", "\n"]


class TestSpans:
    def test_rows_and_columns(self):
        toks = tokenize("(a\n  bc)")
        spans = [(t.span.start_row, t.span.start_col, t.span.end_row, t.span.end_col) for t in toks]
        assert spans == [
            (1, 1, 1, 1),
            (1, 2, 1, 2),
            (1, 3, 2, 2),
            (2, 3, 2, 4),
            (2, 5, 2, 5),
        ]

    def test_offsets_slice_source(self):
        src = '(defun f (x)\n  ; doc\n  (print "a\nb" x))\n'
        assert "".join(t.text(src) for t in tokenize(src)) == src

    def test_literal_spanning_lines(self):
        src = '"a\nb"'
        span = tokenize(src)[0].span
        assert (span.start_row, span.start_col, span.end_row, span.end_col) == (1, 1, 2, 2)

    def test_end_not_before_start(self):
        for tok in tokenize("(a (b\n c)\n\n d)"):
            s = tok.span
            assert (s.end_row, s.end_col) >= (s.start_row, s.start_col)


class TestCursor:
    def test_end_of_input_repeats(self):
        c = Cursor("x")
        assert c.next_token().kind is K.IDENTIFIER
        for _ in range(2):
            tok = c.next_token()
            assert tok.kind is K.END_OF_INPUT
            assert tok.length == 0
            assert tok.text("x") == ""

    def test_empty_source(self):
        assert tokenize("") == []
        assert Cursor("").next_token().span == Span(start=0, end=0)

    def test_clone_is_independent(self):
        c = Cursor("(a b)")
        c.next_token()
        ahead = c.clone()
        peeked = ahead.next_token()
        assert peeked.kind is K.IDENTIFIER
        assert c.next_token() == peeked
        assert ahead.next_token().kind is K.WHITESPACE

    def test_describe(self):
        src = "(a)"
        assert tokenize(src)[0].describe(src) == "01, 01 => 01, 01: OpenParen '('"
