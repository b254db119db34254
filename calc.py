"""Command line calculator for encoded arithmetic expressions.

    $ python calc.py 3a2c4 3ae4c66fb32
    20
    235
    $ python calc.py --rpn 3ae4c66fb32
    3 4 66 c a 32 b

Set DEBUG=1 in the environment to log the postfix form of each expression.
"""
import argparse
import logging
import os
import sys

from evaluator import parse
from parser import format_postfix, to_postfix
from tokens import ExpressionError

DEBUG = bool(os.getenv("DEBUG", False))

logger = logging.getLogger(__name__)


def main(argv=None):
    ap = argparse.ArgumentParser(
        description="Evaluate expressions where a=+ b=- c=* d=/ e=( f=)."
    )
    ap.add_argument("exprs", nargs="+", metavar="EXPR")
    ap.add_argument(
        "--rpn", action="store_true", help="print the postfix form instead of the value"
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if DEBUG else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    for s in args.exprs:
        try:
            print(format_postfix(to_postfix(s)) if args.rpn else parse(s))
        except ExpressionError as e:
            logger.debug("failed on %r", s, exc_info=True)
            print(f"error: {e}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
