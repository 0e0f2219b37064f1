import math
import struct

import pytest
from hypothesis import given
from hypothesis import strategies as st

from avlcourse.workloads import (
    fun,
    linear_workload,
    main_linear,
    main_quadratic,
    quadratic_workload,
)


def test_fun_is_finite_negative_for_source_inputs():
    value = fun(1.23, 4.56)
    assert math.isfinite(value)
    assert value < 0


def test_fun_is_single_precision():
    value = fun(1.23, 4.56)
    assert struct.unpack("f", struct.pack("f", value))[0] == value


@given(st.floats(min_value=-10, max_value=10), st.floats(min_value=-10, max_value=10))
def test_fun_symmetric(x, y):
    a = fun(x, y)
    b = fun(y, x)
    assert math.isnan(a) == math.isnan(b)
    if not math.isnan(a):
        assert a == b
        assert a < 0


def test_fun_nan_for_negative_log_argument():
    assert math.isnan(fun(math.pi, 1.0))


def test_linear_workload_writes_value(tmp_path):
    path = tmp_path / "out.txt"
    value = linear_workload(3, path)
    assert value == fun(1.23, 4.56)
    assert float(path.read_text()) == pytest.approx(value, rel=1e-5)


def test_linear_workload_zero_writes_nothing(tmp_path):
    path = tmp_path / "out.txt"
    assert linear_workload(0, path) is None
    assert not path.exists()


@pytest.mark.parametrize("n", [0, 1, 2, 5, 30])
def test_quadratic_workload_counts_pairs(n):
    assert quadratic_workload(n) == n * (n - 1) // 2


def test_main_linear_creates_default_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main_linear(["2"]) == 0
    assert float((tmp_path / "blah.txt").read_text()) == pytest.approx(fun(1.23, 4.56), rel=1e-5)


def test_main_quadratic_returns_zero():
    assert main_quadratic(["10"]) == 0


@pytest.mark.parametrize("main", [main_linear, main_quadratic])
def test_mains_require_argument(main):
    with pytest.raises(SystemExit):
        main([])