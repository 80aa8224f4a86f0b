from .lexer import Cursor, tokenize, KEYWORDS
from .parser import Reader, parse, ParseError, UnexpectedToken, UnsupportedConstruct
from .render import Renderer, render
from .transpile import transpile, transpile_file, TranspileError, TranspileIOError

__all__ = [
    "Cursor", "tokenize", "KEYWORDS",
    "Reader", "parse", "ParseError", "UnexpectedToken", "UnsupportedConstruct",
    "Renderer", "render",
    "transpile", "transpile_file", "TranspileError", "TranspileIOError",
]
