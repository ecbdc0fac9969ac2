# aoc2024

Solutions to the Advent of Code 2024 puzzles. Each day's solution reads its
puzzle input from a text file and prints both parts' answers to the console.

Days 1 to 8 are solved. Days 9 to 25 are placeholders that only print their
heading.

## Installation

```
pip install .
```

## Puzzle inputs

Inputs are read from a directory, `inputs` in the current directory unless
`--input-dir` says otherwise. Each day's input is a file named `day<N>.txt`,
for example `inputs/day1.txt`. Days 1 to 8 need their file; for days 9 to 25
a missing file is fine.

## Usage

Run every solution in turn:

```
aoc
```

Run a single day with `--day` (or `-day`), which must be between 1 and 25:

```
aoc --day 6
```

Read the inputs from another directory:

```
aoc --day 6 --input-dir path/to/inputs
```

Output looks like this:

```
DAY 1:
  PART 1:
    Total distance: 11
  PART 2:
    Similarity score: 31
```

When all days are run and one of them fails while solving, the following days
still run, and the failures are reported together at the end. A day whose
input cannot be read or parsed stops the run at once. On any failure the
command prints `aoc: one or more solutions failed: ...` to standard error and
exits with status 1.

## Using the solutions as a library

Each solved day is a module in the `aoc2024` package (`day1` to `day8`) with a
`parse_input(text)` function returning a `Solution`, whose `run_to_console()`
prints the answers, and the puzzle functions themselves:

```python
from aoc2024 import day1, day7
from aoc2024.day7_operators import Plus, Star, DoublePipe

day1.total_distance([3, 4, 2, 1, 3, 3], [4, 3, 5, 3, 9, 3])  # 11
day1.similarity([3, 4, 2, 1, 3, 3], [4, 3, 5, 3, 9, 3])      # 31

day7.total_calibration({190: [10, 19], 156: [15, 6]}, Plus(), Star(), DoublePipe())  # 346
```

Other puzzle functions:

- `day2.safe_reports(reports, problem_dampening)`
- `day3.sum_muls(memory, with_conditionals)`
- `day4.count_xmas(search)` and `day4.count_cross_mas(search)`
- `day5.sum_correct_updates(updates, pages_after)` and
  `day5.sum_incorrect_updates(updates, pages_after)`
- `day6.count_guard_positions(floor_map)` and
  `day6.count_loop_positions(floor_map, original_states)`, with the map types
  in `aoc2024.day6_guard`
- `day7_operators.operator_combinations(num_operands, operators)`
- `day8.unique_antinode_locations(city_map, include_harmonics)`

`aoc2024.solutions.run_one(day, input_dir)` and
`aoc2024.solutions.run_all(input_dir)` run the solutions the same way the
command does. `run_one` raises `InvalidDayError` for a day outside 1 to 25, and
`run_all` raises an `ExceptionGroup` holding every day that failed.

## What it does not do

- Days 9 to 25 have no solutions: they print `DAY <N>:` and nothing else.
- Puzzle inputs are not downloaded; they must be saved as files beforehand.

## Tests

```
pip install .[test]
pytest
```