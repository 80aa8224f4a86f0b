"""Tree walk rendering forms into call-expression text.

Symbol- and literal-headed forms render statement style, with a leading
newline. A form in operator position keeps that newline, so `((f 1) 2)`
renders as "\\nf(1)(2)".
"""

from .parser import Reader
from .types import Atom, AtomKind, EmptyList, EndOfInput, Form, Node


class Renderer:
    def __init__(self, src: str):
        self.src = src
        self.reader = Reader(src)

    def render(self) -> str:
        """Render every top-level form, in source order."""
        return "".join(self.render_node(node, "") for node in self.reader)

    def render_node(self, node: Node, acc: str) -> str:
        if not isinstance(node, Form):
            return self._render_non_form(node, acc)

        head = node.head
        if isinstance(head, Form):
            return f"{self.render_node(head, acc)}({self._render_args(node)})"
        if isinstance(head, Atom):
            if head.kind is AtomKind.LITERAL:
                return f"{acc}\n{head.text(self.src)}"
            return f"{acc}\n{head.text(self.src)}({self._render_args(node)})"
        if isinstance(head, EmptyList):
            return f"{acc}()"
        return acc

    def _render_non_form(self, node: Node, acc: str) -> str:
        if isinstance(node, Atom):
            return node.text(self.src)
        if isinstance(node, EmptyList):
            return "()"
        if isinstance(node, EndOfInput):
            return acc
        raise TypeError(f"cannot render {type(node).__name__}")

    def _render_args(self, form: Form) -> str:
        args = [self.render_node(t, "") for t in form.tail]
        return " ".join(args).strip()


def render(src: str) -> str:
    return Renderer(src).render()
