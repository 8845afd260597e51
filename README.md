# puzzlekit

Small functions for classic programming puzzles on grids, strings and integer
sequences. The package has no dependencies and needs Python 3.10 or later.

## Installation

```
pip install puzzlekit
```

## Modules

### `puzzlekit.grids`

- `tictactoe(moves)` judges a 3×3 game from its list of `(row, col)` moves. Player A moves first. It returns `"A"` or `"B"` for a winner, `"Pending"` while empty cells remain, and `"Draw"` for a full board with no winner. A move outside the board raises `ValueError`.
- `diagonal_sum(mat)` sums both diagonals of a square matrix and counts the centre cell once.
- `maximum_wealth(accounts)` returns the largest row total. The result is never less than zero, and an empty input gives `0`.
- `spiral_order(matrix)` lists the elements of a matrix in clockwise spiral order. An empty matrix gives `[]`.
- `set_zeroes(matrix)` zeroes, in place, every row and every column that contains a zero.

### `puzzlekit.strings`

- `roman_to_int(s)` converts a Roman numeral to an integer. Symbols it does not know count as zero.
- `merge_alternately(word1, word2)` interleaves two words character by character and appends whatever is left of the longer one.
- `is_anagram(s, t)` tells whether the two strings hold the same characters with the same counts.
- `str_str(haystack, needle)` returns the index of the first occurrence of `needle`, or `-1` if there is none.
- `find_the_difference(s, t)` returns the one character that `t` holds beyond the characters of `s`.
- `length_of_last_word(s)` returns the length of the last word, with words separated by spaces. If there is no word it returns `0`.
- `to_lower_case(s)` lowers the ASCII capital letters and leaves every other character as it is.
- `judge_circle(moves)` tells whether a walk returns to its start. `R`, `L` and `U` move right, left and up. Any other character counts as a move down.

### `puzzlekit.sequences`

- `can_make_arithmetic_progression(arr)` tells whether the values can be reordered into an arithmetic progression. Fewer than two values raise `ValueError`.
- `count_odds(low, high)` counts the odd integers in `[low, high]`. It raises `ValueError` if `low > high`.
- `move_zeroes(nums)` moves every zero to the end, in place, and keeps the other values in their order.
- `plus_one(digits)` adds one to a number given as a list of decimal digits and returns a new list. An empty list raises `ValueError`.
- `cal_points(operations)` totals a baseball score record.
  - An integer string records that score.
  - `"+"` records the sum of the last two scores.
  - `"D"` records double the last score.
  - `"C"` cancels the last score.

  An operation it does not know, or one with too few earlier scores, raises `ValueError`.
- `is_monotonic(nums)` tells whether a sequence never decreases or never increases.

## Example

```python
from puzzlekit.grids import spiral_order, tictactoe
from puzzlekit.strings import roman_to_int
from puzzlekit.sequences import plus_one

spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])  # [1, 2, 3, 6, 9, 8, 7, 4, 5]
tictactoe([[0, 0], [2, 0], [1, 1], [2, 1], [2, 2]])  # "A"
roman_to_int("MCMXCIV")  # 1994
plus_one([9, 9])  # [1, 0, 0]
```

## Scope

puzzlekit is a library of functions only. It has no command-line tool, and it reads and writes no files.

## Running the tests

From a checkout of the project:

```
pip install -e ".[test]"
pytest
```