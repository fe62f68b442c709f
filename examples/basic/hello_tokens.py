"""Tokenize a small program and dump it, no config needed."""

from sangrado import render_tokens, tokenize

source = """\
def fib(n):
    if n <= 1:
        return n
    return fib(n - 1) + fib(n - 2)

fib(10)
"""

print(render_tokens(tokenize(source)), end="")
