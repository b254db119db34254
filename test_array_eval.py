import numpy as np
import pytest

from array_eval import parse_array
from tokens import DivisionByZero, MissingRightParen


def test_parse_array():
    ans = parse_array(["3a2c4", "32a2d2", "500a10b66c32", "3ae4c66fb32"])
    assert ans.dtype == np.int32
    assert ans.tolist() == [20, 17, 14208, 235]
    assert parse_array([]).shape == (0,)
    assert parse_array(iter(["1", "2b3"])).tolist() == [1, -1]


def test_parse_array_raises():
    with pytest.raises(DivisionByZero):
        parse_array(["1", "1d0"])
    with pytest.raises(MissingRightParen):
        parse_array(["e1"])
    with pytest.raises(ValueError):
        parse_array(["1"], errors="ignore")


def test_parse_array_mask():
    ans = parse_array(["1a1", "1d0", "e1", "2147483647", "zz"], errors="mask")
    assert isinstance(ans, np.ma.MaskedArray)
    assert ans.mask.tolist() == [False, True, True, False, True]
    assert ans.compressed().tolist() == [2, 2**31 - 1]
