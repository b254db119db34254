"""Tokens of the encoded arithmetic notation.

A token is either a number (a plain python `int`) or an `Op`. Operators are
written as single letters: a=+, b=-, c=*, d=/, e=(, f=).
"""
import re
import operator
from typing import Callable, NamedTuple, Optional

import numpy as np

INT32 = np.iinfo(np.int32)
INT32_MIN, INT32_MAX = int(INT32.min), int(INT32.max)


class ExpressionError(ValueError):
    """Base class for everything that can go wrong evaluating an expression."""

    def __init__(self, msg, expr=None, pos=None):
        super().__init__(msg)
        self.expr = expr
        self.pos = pos

    def __str__(self):
        msg = super().__str__()
        if self.pos is not None:
            msg = f"{msg} at position {self.pos}"
        if self.expr is not None:
            shown = repr(self.expr[:40]) + ("..." if len(self.expr) > 40 else "")
            msg = f"{msg} in {shown}"
        return msg


class InvalidCharacter(ExpressionError):
    pass


class MissingLeftParen(ExpressionError):
    pass


class MissingRightParen(ExpressionError):
    pass


class MalformedExpression(ExpressionError):
    """The postfix sequence doesn't reduce to exactly one value."""


class DivisionByZero(ExpressionError, ZeroDivisionError):
    pass


class NumericOverflow(ExpressionError, OverflowError):
    pass


def check_int32(n, expr=None, pos=None):
    """Return `n` unchanged if it fits a signed 32 bit int.

    >>> check_int32(-2**31)
    -2147483648
    >>> check_int32(2**31)
    Traceback (most recent call last):
    ...
    tokens.NumericOverflow: 2147483648 does not fit in 32 bits
    """
    if not INT32_MIN <= n <= INT32_MAX:
        raise NumericOverflow(f"{n} does not fit in 32 bits", expr, pos)
    return n


def trunc_div(n1, n2):
    """Integer division rounding towards zero (unlike python's `//`).

    >>> trunc_div(7, 2), trunc_div(-7, 2), trunc_div(7, -2)
    (3, -3, -3)
    """
    if n2 == 0:
        raise DivisionByZero(f"{n1} divided by zero")
    q = abs(n1) // abs(n2)
    return q if (n1 < 0) == (n2 < 0) else -q


class Op(NamedTuple):
    char: str
    name: str
    fun: Optional[Callable]  # None for parentheses

    def __call__(self, n1, n2):
        return check_int32(self.fun(n1, n2))

    def __repr__(self):
        return f"op({self.char!r:})"

    def is_paren(self):
        return self.fun is None


# char, name, function (`-` for parentheses)
OP_TABLE = """
a ADD add
b SUB sub
c MUL mul
d DIV trunc_div
e LPAREN -
f RPAREN -
""".strip()
_FUNS = {"-": None, "trunc_div": trunc_div}
OPS = {
    char: Op(char, name, _FUNS[fun] if fun in _FUNS else getattr(operator, fun))
    for [(char, name, fun)] in map(
        re.compile(r"^(\w) (\w+) (\S+)$").findall, OP_TABLE.split("\n")
    )
}
ADD, SUB, MUL, DIV, LPAREN, RPAREN = OPS.values()


def op_for(char, expr=None, pos=None):
    """Return the `Op` encoded by `char`.

    >>> op_for("c")
    op('c')
    >>> op_for("+")
    Traceback (most recent call last):
    ...
    tokens.InvalidCharacter: invalid character '+'
    """
    try:
        return OPS[char]
    except KeyError:
        raise InvalidCharacter(f"invalid character {char!r}", expr, pos) from None
