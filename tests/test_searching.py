import pytest

from algodrills.searching import search, search_insert, search_range


def test_search_range_worked_example():
    assert search_range([5, 7, 7, 8, 8, 10], 8) == [3, 4]


@pytest.mark.parametrize("target", [1, 2, 4, 9])
def test_search_range_bounds(target):
    nums = [1, 2, 2, 2, 4, 4, 9]
    first, last = search_range(nums, target)
    assert first == nums.index(target)
    assert last == len(nums) - 1 - nums[::-1].index(target)


@pytest.mark.parametrize("nums, target", [([5, 7, 7, 8, 8, 10], 6), ([], 0), ([1], 2)])
def test_search_range_missing(nums, target):
    assert search_range(nums, target) == [-1, -1]


@pytest.mark.parametrize("target", [1, 3, 5, 6])
def test_search_insert_present(target):
    nums = [1, 3, 5, 6]
    assert search_insert(nums, target) == nums.index(target)


@pytest.mark.parametrize("target", [0, 2, 4, 7])
def test_search_insert_missing_keeps_order(target):
    nums = [1, 3, 5, 6]
    index = search_insert(nums, target)
    merged = nums[:index] + [target] + nums[index:]
    assert merged == sorted(merged)


def test_search_insert_empty():
    assert not search_insert([], 5)


def test_search_finds_target_in_sorted_list():
    nums = [-1, 0, 3, 5, 9, 12]
    index = search(nums, 9)
    assert nums[index] == 9


def test_search_sorts_in_place():
    nums = [12, -1, 9, 3, 0, 5]
    index = search(nums, 3)
    assert nums == sorted(nums)
    assert nums[index] == 3


def test_search_missing():
    nums = [-1, 0, 3, 5, 9, 12]
    assert search(nums, 2) == -1
    assert search([], 2) == -1