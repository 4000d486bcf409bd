"""Array and matrix exercises: searching, partitioning, counting."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from typing import Any


def boolean_matrix(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a copy where every row and column holding a 1 is filled with 1."""
    rows = {i for i, row in enumerate(matrix) if 1 in row}
    cols = {j for row in matrix for j, cell in enumerate(row) if cell == 1}
    return [
        [1 if i in rows or j in cols else cell for j, cell in enumerate(row)]
        for i, row in enumerate(matrix)
    ]


def shortest_subarray_with_sum(values: Sequence[int], k: int) -> int | None:
    """Length of the shortest contiguous run summing to ``k`` (positive values), or None."""
    best: int | None = None
    window = 0
    start = 0
    for end, value in enumerate(values):
        window += value
        while window > k:
            window -= values[start]
            start += 1
        if window == k:
            length = end - start + 1
            best = length if best is None else min(best, length)
    return best


def min_size_subarray(nums: Sequence[int], target: int) -> int:
    """Shortest run of the infinitely repeated ``nums`` summing to ``target``, or -1."""
    total = sum(nums)
    if total <= 0:
        raise ValueError("nums must hold positive values")
    full_cycles, remainder = divmod(target, total)
    best = shortest_subarray_with_sum(list(nums) * 2, remainder)
    if best is None:
        return -1
    return best + full_cycles * len(nums)


def move_negatives_to_end(values: Iterable[int]) -> list[int]:
    """Return the values with every negative moved behind the non-negatives."""
    result = list(values)
    i, j = 0, len(result) - 1
    while i < j:
        if result[i] < 0 <= result[j]:
            result[i], result[j] = result[j], result[i]
            i += 1
            j -= 1
        elif result[i] >= 0:
            i += 1
        else:
            j -= 1
    return result


def unique_elements(items: Iterable[Hashable]) -> list[Any]:
    """Return the items without repeats, in order of first appearance."""
    return list(dict.fromkeys(items))


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Index of ``target`` in the sorted ``values``, or None when absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def num_identical_pairs(nums: Iterable[Hashable]) -> int:
    """Count index pairs i < j with equal values."""
    return sum(count * (count - 1) // 2 for count in Counter(nums).values())