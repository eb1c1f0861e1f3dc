"""Classic array problems: profits, rotations, partitions and lookups."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, MutableSequence, Sequence
from functools import reduce
from itertools import groupby
from operator import xor


def max_profit(prices: Iterable[int]) -> int:
    """Return the best profit from one buy followed by one later sell."""
    it = iter(prices)
    try:
        buy = next(it)
    except StopIteration:
        raise ValueError("prices must not be empty") from None
    profit = 0
    for price in it:
        if price < buy:
            buy = price
        else:
            profit = max(profit, price - buy)
    return profit


def is_rotated_sorted(nums: Sequence[int]) -> bool:
    """Tell whether ``nums`` is a non-decreasing sequence rotated by some amount."""
    values = list(nums)
    successors = values[1:] + values[:1]
    descents = sum(a > b for a, b in zip(values, successors))
    return descents <= 1


def max_frequency(nums: Iterable[int], k: int) -> int:
    """Return the largest count of equal values reachable with at most ``k`` increments."""
    if k < 0:
        raise ValueError("k must not be negative")
    values = sorted(nums)
    left = 0
    total = 0
    best = 0
    for right, target in enumerate(values):
        total += target
        while target * (right - left + 1) > total + k:
            total -= values[left]
            left += 1
        best = max(best, right - left + 1)
    return best


def majority_element(nums: Iterable[int]) -> int:
    """Return the majority candidate found by the Boyer-Moore vote (0 for no input)."""
    count = 0
    candidate = 0
    for value in nums:
        if count == 0:
            candidate = value
        count += 1 if value == candidate else -1
    return candidate


def max_consecutive_ones(nums: Iterable[int]) -> int:
    """Return the length of the longest run of ones."""
    return max(
        (sum(1 for _ in run) for value, run in groupby(nums) if value == 1),
        default=0,
    )


def missing_number(nums: Sequence[int]) -> int:
    """Return the one value of ``0..len(nums)`` that is absent from ``nums``."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def move_zeroes_bubble(nums: MutableSequence[int]) -> None:
    """Move zeroes to the end in place by repeated neighbour swaps, keeping order."""
    size = len(nums)
    for _ in range(size):
        for j in range(size - 1):
            if nums[j] == 0:
                nums[j], nums[j + 1] = nums[j + 1], nums[j]


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move zeroes to the end in place with a single pass, keeping order."""
    write = 0
    for read, value in enumerate(nums):
        if value != 0:
            nums[read], nums[write] = nums[write], value
            write += 1


def rearrange_by_sign(nums: Sequence[int]) -> list[int]:
    """Place positives at even and negatives at odd positions, each in original order.

    Zeroes are dropped; positions left unfilled hold 0.
    """
    size = len(nums)
    positives = [value for value in nums if value > 0]
    negatives = [value for value in nums if value < 0]
    if len(positives) > (size + 1) // 2 or len(negatives) > size // 2:
        raise ValueError("positive and negative values are not balanced")
    result = [0] * size
    result[0 : 2 * len(positives) : 2] = positives
    result[1 : 2 * len(negatives) : 2] = negatives
    return result


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Drop repeated neighbours of a sorted list in place and return its new length."""
    if not nums:
        return 0
    write = 1
    for value in nums[1:]:
        if value != nums[write - 1]:
            nums[write] = value
            write += 1
    del nums[write:]
    return write


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` places in place."""
    size = len(nums)
    if not size:
        return
    shift = k % size
    nums[:] = list(nums[size - shift :]) + list(nums[: size - shift])


def single_number(nums: Iterable[int]) -> int:
    """Return the value that is not paired, found by XOR of all values."""
    return reduce(xor, nums, 0)


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort the values 0, 1 and 2 in place by counting.

    Other values are not counted; positions past the counted ones keep their content.
    """
    counts = Counter(value for value in nums if value in (0, 1, 2))
    ordered = [0] * counts[0] + [1] * counts[1] + [2] * counts[2]
    nums[: len(ordered)] = ordered


def two_sum(nums: Iterable[int], target: int) -> tuple[int, int] | None:
    """Return ``(later, earlier)`` indices of two values summing to ``target``, or None."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        earlier = seen.get(target - value)
        if earlier is not None:
            return index, earlier
        seen[value] = index
    return None