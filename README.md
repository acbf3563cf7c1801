# adventpuzzles

Solvers for Advent of Code puzzles: days 1 to 11 of the 2023 season and days
1 to 11 of the 2024 season. Each day is a module that reads a puzzle input
and prints both answers. The modules can be used from Python, and the
`adventpuzzles` command runs any of them. The package has no dependencies
beyond the standard library.

## Installation

```
pip install .
```

With the test requirements:

```
pip install ".[test]"
pytest
```

## Command line

List the puzzles that have a solver:

```
adventpuzzles --list
```

This prints names such as `2023-01` and `2024-11`. Run one by naming it and
giving the input file:

```
adventpuzzles 2023-09 --input-file input.txt
adventpuzzles 2024-06 --input-file input.txt --verbose
```

A puzzle name is the year and the day with any separator between them, so
`2023-9`, `2023-09` and `y2023_d09` all name the same puzzle. Everything
after the name goes to the solver:

- `--input-file FILE` – the puzzle input (required in practice; without it
  the solver reports that it cannot open the file).
- `--verbose` – extra output for some days: per-line calibration values
  (2023 day 1), per-card matches and points (2023 day 4), per-race results
  (2023 day 6), the ranked hands (2023 day 7) and per-ghost loop lengths
  (2023 day 8). Other days ignore it.

`adventpuzzles --help` (or no arguments) prints a usage line. An unknown
puzzle name, or an unknown option, is reported on standard error. A solver
returns 1 when its input cannot be read or parsed; the command returns 2
for a bad puzzle name.

The same command is available as `python -m adventpuzzles.cli`, and each
day module's `main(argv=None)` can be called directly with the same
arguments, for example `y2024_d01.main(["--input-file", "input.txt"])`.

## Library use

The day modules work on lists of input lines.
`adventpuzzles.common.read_lines(path)` reads a file into such a list, with
line endings removed. `adventpuzzles.common.parse_options(argv)` returns an
`Options` value (`input_file`, `verbose`, `show_help`) and raises
`ValueError` on bad arguments.

```python
from adventpuzzles.common import read_lines
from adventpuzzles.y2024_d01 import parse_lists, total_distance, similarity_score

left, right = parse_lists(read_lines("input.txt"))
print(total_distance(left, right))
print(similarity_score(left, right))
```

Some helpers take plain values:

```python
from adventpuzzles.y2023_d09 import next_value, previous_value
from adventpuzzles.y2024_d11 import count_stones

next_value([0, 3, 6, 9, 12, 15])          # 18
previous_value([10, 13, 16, 21, 30, 45])  # 5
count_stones([125, 17], 6)                # 22
```

Malformed input raises `ValueError`.

## Modules

| Module | Puzzle | Main functions |
| --- | --- | --- |
| `y2023_d01` | Trebuchet calibration | `calibration_value`, `calibration_value_with_words`, `part1`, `part2` |
| `y2023_d02` | Cube conundrum | `parse_game`, `is_possible`, `game_power`, `part1`, `part2` |
| `y2023_d03` | Gear ratios | `find_numbers`, `part_number_sum`, `gear_ratio_sum` |
| `y2023_d04` | Scratchcards | `parse_card`, `card_points`, `part1`, `part2` |
| `y2023_d05` | Seed almanac | `parse_almanac`, `Almanac.location`, `Almanac.lowest_location`, `part1`, `part2` |
| `y2023_d06` | Boat races | `ways_to_win`, `part1`, `part2` |
| `y2023_d07` | Camel cards | `HandType`, `Hand`, `hand_type`, `parse_hands`, `total_winnings` |
| `y2023_d08` | Haunted wasteland | `parse_network`, `steps_to_end`, `ghost_loop_steps` |
| `y2023_d09` | Mirage maintenance | `next_value`, `previous_value`, `part1`, `part2` |
| `y2023_d10` | Pipe maze | `parse_maze`, `PipeMaze.trace_loop`, `PipeMaze.farthest_distance`, `PipeMaze.count_inside` |
| `y2023_d11` | Cosmic expansion | `galaxy_positions`, `sum_of_distances` |
| `y2024_d01` | Historian hysteria | `parse_lists`, `total_distance`, `similarity_score` |
| `y2024_d02` | Red-nosed reports | `parse_reports`, `is_safe`, `is_safe_dampened` |
| `y2024_d03` | Mull it over | `mul_sum`, `conditional_mul_sum` |
| `y2024_d04` | Ceres search | `count_xmas`, `count_x_mas` |
| `y2024_d05` | Print queue | `parse_manual`, `is_ordered`, `reorder`, `correct_middle_sum`, `corrected_middle_sum` |
| `y2024_d06` | Guard gallivant | `parse_lab`, `visited_positions`, `count_loop_obstructions` |
| `y2024_d07` | Bridge repair | `parse_equations`, `can_make`, `calibration_total` |
| `y2024_d08` | Resonant collinearity | `antinode_count`, `resonant_antinode_count` |
| `y2024_d09` | Disk fragmenter | `parse_disk`, `compact_blocks`, `compact_files`, `checksum` |
| `y2024_d10` | Hoof it | `trail_score_and_rating` |
| `y2024_d11` | Plutonian pebbles | `blink`, `count_stones` |

## What it does not do

- It does not fetch puzzle inputs or submit answers; you supply the input
  file.
- Only the days listed above have solvers.
- For 2023 day 8, the second answer is `ghost_loop_steps`: the number of
  steps until every ghost has revisited a node, together with each ghost's
  loop length. It does not combine the loop lengths into the step at which
  all ghosts stand on a `Z` node at once.
- For 2024 day 11 the command prints only the count after 25 blinks;
  `count_stones` accepts any number of blinks.