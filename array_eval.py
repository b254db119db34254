# Evaluating many encoded expressions at once into numpy arrays.
import numpy as np

from evaluator import parse
from tokens import ExpressionError


def parse_array(exprs, errors="raise"):
    """Evaluate each expression in `exprs` into an int32 numpy array.

    With `errors="mask"`, expressions that fail are masked out of the
    returned `numpy.ma.MaskedArray` instead of raising.

    >>> parse_array(["3a2c4", "32a2d2", ""])
    array([20, 17,  0], dtype=int32)
    >>> parse_array(["1a1", "1d0"], errors="mask").tolist()
    [2, None]
    """
    if errors not in ("raise", "mask"):
        raise ValueError(f"errors must be 'raise' or 'mask', not {errors!r}")
    exprs = list(exprs)
    ans = np.zeros(len(exprs), dtype=np.int32)
    if errors == "raise":
        for i, s in enumerate(exprs):
            ans[i] = parse(s)
        return ans

    mask = np.zeros(len(exprs), dtype=bool)
    for i, s in enumerate(exprs):
        try:
            ans[i] = parse(s)
        except ExpressionError:
            mask[i] = True
    return np.ma.masked_array(ans, mask=mask)
