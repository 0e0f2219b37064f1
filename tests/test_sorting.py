import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from avlcourse.sorting import main, merge_sort, random_data


@given(st.lists(st.integers()))
def test_merge_sort_matches_sorted(values):
    assert merge_sort(values) == sorted(values)


def test_merge_sort_leaves_input_unchanged():
    values = [5, 2, 9, 2]
    merge_sort(values)
    assert values == [5, 2, 9, 2]


def test_merge_sort_empty():
    assert merge_sort([]) == []


@given(st.integers(min_value=1, max_value=200))
def test_random_data_in_range(size):
    data = random_data(size, random.Random(size))
    assert len(data) == size
    assert all(0 <= v < size for v in data)


def test_random_data_deterministic_with_seed():
    first = random_data(30, random.Random(7))
    second = random_data(30, random.Random(7))
    assert len(first) == 30
    assert all(0 <= v < 30 for v in first)
    assert first == second


def test_random_data_zero():
    assert random_data(0) == []


def test_random_data_negative():
    with pytest.raises(ValueError):
        random_data(-1)


def test_main_without_args(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_main_prints_sorted(capsys):
    assert main(["25"]) == 0
    values = [int(line) for line in capsys.readouterr().out.splitlines()]
    assert len(values) == 25
    assert values == sorted(values)
    assert all(0 <= v < 25 for v in values)


def test_main_non_numeric_is_zero(capsys):
    assert main(["abc"]) == 0
    assert capsys.readouterr().out == ""