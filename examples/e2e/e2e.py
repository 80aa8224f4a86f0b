"""
lisp-desu End-to-End Example

Demonstrates the full pipeline:
1. Tokenize a small program
2. Read it into syntax trees
3. Render call-expression text
4. Show how a malformed program is reported

Run: pip install -e . && python examples/e2e/e2e.py
"""

from lisp_desu import UnexpectedToken, parse, render, tokenize
from lisp_desu.types import TokenKind

print("=== lisp-desu E2E Demo ===\n")

program = """; squares and sums
(defun square (x) (mul x x))
(print "total" (add (square 3) 4))
"""

# 1. Tokens
tokens = tokenize(program)
significant = [t for t in tokens if t.kind not in (TokenKind.WHITESPACE, TokenKind.LINE_COMMENT)]
print(f"1. Tokenized {len(tokens)} tokens ({len(significant)} significant)")
for tok in significant[:5]:
    print(f"   {tok.describe(program)}")
print("   ...\n")

# 2. Trees
forms = parse(program)
print(f"2. Read {len(forms)} top-level forms")
for form in forms:
    print(f"   {form.head.text(program)}: {len(form.tail)} args, rows {form.span.start_row}-{form.span.end_row}")
print()

# 3. Render
print("3. Rendered output:")
print(render(program))
print()

# 4. Errors
try:
    render("(print 1 , 2)")
except UnexpectedToken as exc:
    print("4. Malformed input")
    print(f"   {exc}")

print("\n=== Done ===")
