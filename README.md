# algodrills

Plain Python solutions to a set of classic exercises on arrays, integers
and strings. The package has no runtime dependencies.

## Installation

```
pip install algodrills
```

To run the test suite from a checkout:

```
pip install ".[test]"
pytest
```

## `algodrills.arrays`

| Function | What it does |
| --- | --- |
| `max_profit(prices)` | Best profit from one buy followed by a later sell; `ValueError` for no prices |
| `is_rotated_sorted(nums)` | Whether `nums` is a non-decreasing sequence rotated by some amount |
| `max_frequency(nums, k)` | Largest count of equal values reachable with at most `k` unit increments; `ValueError` for negative `k` |
| `majority_element(nums)` | The Boyer–Moore vote candidate (`0` for empty input) |
| `max_consecutive_ones(nums)` | Length of the longest run of `1`s |
| `missing_number(nums)` | The one value of `0..len(nums)` absent from `nums` |
| `move_zeroes_bubble(nums)` | Moves zeroes to the end in place by repeated neighbour swaps, keeping order |
| `move_zeroes(nums)` | Moves zeroes to the end in place in a single pass, keeping order |
| `rearrange_by_sign(nums)` | New list with positives at even and negatives at odd positions; zeroes are dropped and unfilled positions hold `0`; `ValueError` if the signs do not fit |
| `remove_duplicates(nums)` | Removes repeated neighbours of a sorted list in place and returns the new length |
| `rotate(nums, k)` | Rotates a list right by `k` places, in place |
| `single_number(nums)` | The unpaired value, found by XOR of all values |
| `sort_colors(nums)` | Sorts the values `0`, `1` and `2` in place by counting |
| `two_sum(nums, target)` | `(later, earlier)` indices of two values adding up to `target`, or `None` |

```python
from algodrills.arrays import max_profit, two_sum, rotate

max_profit([7, 1, 5, 3, 6, 4])   # 5
two_sum([2, 7, 11, 15], 9)       # (1, 0)

nums = [1, 2, 3, 4, 5, 6, 7]
rotate(nums, 3)
nums                             # [5, 6, 7, 1, 2, 3, 4]
```

## `algodrills.numbers`

`is_palindrome_number` and `reverse_integer` work on 32-bit signed values
and raise `ValueError` for anything outside that range.

| Function | What it does |
| --- | --- |
| `is_palindrome_number(x)` | Whether the decimal digits of `x` read the same both ways (negatives are not) |
| `reverse_integer(x)` | Reverses the digits of `x`, keeping its sign; `0` if the result overflows 32 bits |
| `fib(n)` | The `n`th Fibonacci number; values of `n` below 2 are returned as they are |

```python
from algodrills.numbers import reverse_integer, fib

reverse_integer(-123)        # -321
reverse_integer(1534236469)  # 0, the result would not fit in 32 bits
fib(10)                      # 55
```

## `algodrills.strings`

| Function | What it does |
| --- | --- |
| `normalize(text)` | Keeps only ASCII letters and digits, lower-cased |
| `is_palindrome(text)` | Whether `text` reads the same both ways once normalized |

```python
from algodrills.strings import is_palindrome

is_palindrome("A man, a plan, a canal: Panama")  # True
```

## What it does not do

The package is a library only: it has no command-line program and reads
no input of its own.