import pytest

from avlcourse.fibonacci import fib_iterative, fib_recursive, main_iterative, main_recursive


@pytest.mark.parametrize("n", range(21))
def test_iterative_matches_recursive(n):
    assert fib_iterative(n) == fib_recursive(n)


def test_base_cases():
    assert fib_iterative(0) == 0
    assert fib_iterative(1) == 1
    assert fib_recursive(0) == 0
    assert fib_recursive(1) == 1


def test_known_value():
    assert fib_iterative(10) == 55


@pytest.mark.parametrize("n", range(2, 120))
def test_recurrence_mod_32_bits(n):
    expected = (fib_iterative(n - 1) + fib_iterative(n - 2)) % 2**32
    assert fib_iterative(n) == expected
    assert 0 <= fib_iterative(n) < 2**32


@pytest.mark.parametrize("func", [fib_iterative, fib_recursive])
def test_negative_rejected(func):
    with pytest.raises(ValueError):
        func(-1)


def test_main_iterative_prints(capsys):
    assert main_iterative(["10"]) == 0
    assert capsys.readouterr().out == "55\n"


def test_main_recursive_agrees(capsys):
    assert main_recursive(["15"]) == 0
    assert capsys.readouterr().out.strip() == str(fib_iterative(15))


def test_main_non_numeric_is_zero(capsys):
    assert main_iterative(["zz"]) == 0
    assert capsys.readouterr().out == "0\n"


@pytest.mark.parametrize("main", [main_iterative, main_recursive])
def test_main_requires_argument(main):
    with pytest.raises(SystemExit):
        main([])