import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.allocation import (
    allocate_pages,
    allocate_pages_brute_force,
    is_feasible,
    min_candies,
    min_candies_constant_space,
    n_choose_r,
    pascal_element,
)

ratings_lists = st.lists(st.integers(min_value=0, max_value=6), max_size=25)


def test_min_candies_example():
    assert min_candies([1, 0, 2]) == 5
    assert min_candies_constant_space([1, 0, 2]) == 5


@given(ratings_lists)
def test_candy_methods_agree(ratings):
    assert min_candies(ratings) == min_candies_constant_space(ratings)


@given(ratings_lists)
def test_candies_at_least_one_each(ratings):
    assert min_candies(ratings) >= len(ratings)


@given(st.integers(min_value=0, max_value=20), st.integers(min_value=0, max_value=9))
def test_equal_ratings_one_candy_each(n, rating):
    assert min_candies([rating] * n) == n
    assert min_candies_constant_space([rating] * n) == n


@given(st.integers(min_value=1, max_value=20))
def test_strictly_increasing_ratings(n):
    ratings = list(range(n))
    assert min_candies(ratings) == math.comb(n + 1, 2)
    assert min_candies_constant_space(ratings[::-1]) == math.comb(n + 1, 2)


@given(st.integers(min_value=0, max_value=40), st.integers(min_value=0, max_value=40))
def test_n_choose_r_matches_comb(n, r):
    assert n_choose_r(n, r) == math.comb(n, r)


@given(st.integers(min_value=1, max_value=30), st.data())
def test_pascal_element_matches_comb(row, data):
    col = data.draw(st.integers(min_value=1, max_value=row))
    assert pascal_element(row, col) == math.comb(row - 1, col - 1)
    assert pascal_element(row, col) == pascal_element(row, row - col + 1)


def test_allocate_example():
    assert allocate_pages([10, 20, 30, 40], 2) == 60
    assert allocate_pages_brute_force([10, 20, 30, 40], 2) == 60


@given(st.lists(st.integers(min_value=1, max_value=30), min_size=1, max_size=7), st.data())
def test_allocation_methods_agree(pages, data):
    students = data.draw(st.integers(min_value=1, max_value=len(pages)))
    assert allocate_pages(pages, students) == allocate_pages_brute_force(pages, students)


@given(st.lists(st.integers(min_value=1, max_value=30), min_size=1, max_size=12), st.data())
def test_allocation_is_tightest_feasible(pages, data):
    students = data.draw(st.integers(min_value=1, max_value=len(pages)))
    result = allocate_pages(pages, students)
    assert is_feasible(pages, students, result)
    assert max(pages) <= result <= sum(pages)
    assert result == max(pages) or not is_feasible(pages, students, result - 1)


@given(st.lists(st.integers(min_value=1, max_value=30), min_size=1, max_size=12))
def test_allocation_extremes(pages):
    assert allocate_pages(pages, 1) == sum(pages)
    assert allocate_pages(pages, len(pages)) == max(pages)


def test_more_students_than_books_raises():
    with pytest.raises(ValueError):
        allocate_pages([10, 20], 3)


@pytest.mark.parametrize("func", [allocate_pages, allocate_pages_brute_force])
def test_invalid_allocation_inputs(func):
    with pytest.raises(ValueError):
        func([], 1)
    with pytest.raises(ValueError):
        func([10, 20], 0)


def test_is_feasible_counts_students():
    assert is_feasible([10, 20, 30, 40], 2, 60)
    assert not is_feasible([10, 20, 30, 40], 2, 59)