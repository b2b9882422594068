# uvasolve

Answers to a collection of classic numbered programming problems, usable
in two ways:

* as a Python library of small functions, one or more per problem, and
* as a command-line solver that reads a problem's complete input and writes
  the output the problem expects, blank lines between cases included.

It has no dependencies beyond the standard library and needs Python 3.10
or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Name the problem by its number and give its input on standard input, or
as a file name after the number:

```
echo "1 10" | uvasolve 100
```

prints

```
1 10 20
```

```
uvasolve 100 input.txt
uvasolve --list
```

`--list` prints every known problem number, one per line, in numeric order.

Exit status is 0 on success, 2 when no problem number is given, and 1 for an
unknown problem, an input file that cannot be read, or input that cannot be
parsed (the message goes to standard error).

## Library

The functions are grouped by theme:

* `uvasolve.digits`: digits and bases: `reverse_and_add`, `bit_counts`,
  `carry_operations`, `smallest_base`, `nine_degree`, `is_multiple_of_11`,
  `parity`, `digital_root`, `digit_counts`, `bangla`, `quirksome_squares`.
* `uvasolve.numtheory`: primes, divisors and integer sequences:
  `cycle_length`, `max_cycle_length`, `love_pair`, `fibonacci_mod`,
  `fibonacci_mod_matrix`, `prime_sieve`, `classify_emirp`, `gcd_sum`,
  `count_squares`, `ugly_number`, `classify_perfection`, `fibinary`,
  `fibinary_sum`.
* `uvasolve.formulas`: closed formulas and short counting rules:
  `abs_difference`, `displacement`, `pizza_pieces`, `hotel_group`, `scores`,
  `cola_bottles`, `steps_between`, `odd_sum`, `last_three_sum`,
  `cantor_term`, `turtle_ages`, `executes_bad_first`, `joseph_min_m`,
  `hartal_days`, `weekday_2011`, `win_probability`.
* `uvasolve.geometry`: points, shapes and angles: `shaded_areas`,
  `box_cuts`, `satellite_distances`, `fourth_vertex`, `clock_angle`,
  `cube_overlap`, `containing_figures`, `is_box`, and the `Rectangle`
  class with its `contains` method.
* `uvasolve.text`: letters, characters and lines: `letter_frequencies`,
  `character_frequencies`, `unshift_wertyu`, `decode_shifted`,
  `frequent_words`, `common_permutation`, `tex_quotes`, `count_words`,
  `most_frequent_letters`, `ox_score`, `classify_palindrome`,
  `smallest_period`, `rotate_lines`, `substitute`, `country_counts`.
* `uvasolve.words`: whole words: `worst_excuses`, `anagrams`, `judge`,
  `species_percentages`.
* `uvasolve.sequences`: lists of numbers: `is_jolly`,
  `minimal_distance_sum`, `median_info`, `is_b2_sequence`, `sort_mod`,
  `is_symmetric_matrix`, `swap_count`, `permute`, `compare_sets`,
  `minimum_moves`, `derivative_at`, `division_sequence`, `cheapest_bases`.
* `uvasolve.grid`: grids, boards and displays: `minesweeper`,
  `largest_square`, `max_submatrix_sum`, `skyline`, `rotate_board`,
  `spot_game`, `lcd_display`, and the `MarsGrid` class whose `move`
  method runs a robot and remembers where robots fell off.
* `uvasolve.schedule`: times, dice and fingering: `longest_nap`,
  `call_charge`, `roll_die`, `finger_presses`.

```python
from uvasolve.numtheory import max_cycle_length
from uvasolve.text import tex_quotes

max_cycle_length(1, 10)        # 20
tex_quotes('"Hi," she said.')  # "``Hi,'' she said."
```

Functions raise `ValueError` for arguments outside what they handle, such
as a negative number where only non-negative ones make sense.

Every theme module also has `problems()`, a mapping from each problem
number it handles to the function that answers that problem's input, and
`solve(problem, text)`, which turns a complete input text into the full
output text. `uvasolve.cli.run(problem, text)` does the same for any known
problem, whichever module holds it; both raise `ValueError` for an unknown
problem number.

## Limits

The solver reads the whole input before answering and checks it only as far
as it needs to parse it; malformed input may give an error rather than a
partial answer. It only answers the problems listed by `uvasolve --list`.