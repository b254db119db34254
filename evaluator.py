"""Evaluate encoded arithmetic expressions to a 32 bit signed integer.

>>> parse("3a2c4")
20
>>> parse("3c4d2aee2a4c41fc4f")
990
"""
import logging

from parser import format_postfix, to_postfix
from tokens import ExpressionError, MalformedExpression

logger = logging.getLogger(__name__)


def evaluate_postfix(tokens):
    """Reduce a postfix sequence of ints and `Op`s to a single int.

    An empty sequence evaluates to 0.
    """
    stack = []
    for t in tokens:
        if type(t) is int:
            stack.append(t)
            continue
        if len(stack) < 2:
            raise MalformedExpression(f"not enough operands for {t.char!r}")
        n2 = stack.pop()
        n1 = stack.pop()
        stack.append(t(n1, n2))
    if len(stack) > 1:
        raise MalformedExpression(f"{len(stack)} values left on the stack")
    (ans,) = stack or [0]
    return ans


def parse(s):
    """Return the value of the encoded expression `s`.

    Raises a subclass of `tokens.ExpressionError` if `s` is malformed or
    can't be evaluated.

    >>> parse("32a2d2")
    17
    >>> parse("")
    0
    >>> parse("5d0")
    Traceback (most recent call last):
    ...
    tokens.DivisionByZero: 5 divided by zero in '5d0'
    """
    postfix = to_postfix(s)
    try:
        ans = evaluate_postfix(postfix)
    except ExpressionError as e:
        if e.expr is None:
            e.expr = s
        raise
    logger.debug("%s = %d", format_postfix(postfix), ans)
    return ans
