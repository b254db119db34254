"""Shunting yard conversion of encoded infix expressions to postfix order.

All four arithmetic operators share a single precedence level and associate
to the left, so `3a2c4` means `(3+2)*4`. Only parentheses change grouping.
"""
import logging

from tokens import (
    INT32_MAX,
    LPAREN,
    MissingLeftParen,
    MissingRightParen,
    NumericOverflow,
    check_int32,
    op_for,
)

logger = logging.getLogger(__name__)


def to_postfix(s):
    """Convert the encoded expression `s` to a postfix list of ints and `Op`s.

    >>> to_postfix("3a2c4")
    [3, 2, op('a'), 4, op('c')]
    >>> to_postfix("3ae4c66fb32")
    [3, 4, 66, op('c'), op('a'), 32, op('b')]
    >>> to_postfix("")
    []
    """
    out = []
    ops = []
    opens = []  # positions of the unmatched "e"s on `ops`
    digits = ""

    def flush(pos):
        nonlocal digits
        if digits:
            start = pos - len(digits)
            significant = digits.lstrip("0") or "0"
            if len(significant) > len(str(INT32_MAX)):
                shown = digits if len(digits) <= 20 else digits[:20] + "..."
                raise NumericOverflow(f"{shown} does not fit in 32 bits", s, start)
            out.append(check_int32(int(significant), s, start))
            digits = ""

    for pos, char in enumerate(s):
        if "0" <= char <= "9":
            digits += char
            continue
        o = op_for(char, s, pos)
        if o is LPAREN:
            # NB: a pending number isn't flushed here, "1e2f" reads as 12.
            ops.append(o)
            opens.append(pos)
            continue
        flush(pos)
        while ops and ops[-1] is not LPAREN:
            out.append(ops.pop())
        if o.is_paren():
            if not ops:
                raise MissingLeftParen("missing left parenthesis", s, pos)
            ops.pop()
            opens.pop()
        else:
            ops.append(o)
    flush(len(s))

    while ops:
        o = ops.pop()
        if o is LPAREN:
            raise MissingRightParen("missing right parenthesis", s, opens[-1])
        out.append(o)
    logger.debug("%r -> %s", s, format_postfix(out))
    return out


def format_postfix(tokens):
    """Render postfix `tokens` space separated, in the encoded alphabet.

    >>> format_postfix(to_postfix("3ae4c66fb32"))
    '3 4 66 c a 32 b'
    """
    return " ".join(str(t) if type(t) is int else t.char for t in tokens)
