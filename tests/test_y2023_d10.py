import pytest

from adventpuzzles.y2023_d10 import PipeMaze, main, parse_maze

SQUARE = [
    ".....",
    ".S-7.",
    ".|.|.",
    ".L-J.",
    ".....",
]

SQUEEZE = [
    "..........",
    ".S------7.",
    ".|F----7|.",
    ".||....||.",
    ".||....||.",
    ".|L-7F-J|.",
    ".|..||..|.",
    ".L--JL--J.",
    "..........",
]


def rectangle(height, width):
    top = "S" + "-" * (width - 2) + "7"
    middle = "|" + "." * (width - 2) + "|"
    bottom = "L" + "-" * (width - 2) + "J"
    return [top] + [middle] * (height - 2) + [bottom]


def test_square_farthest_distance():
    assert parse_maze(SQUARE).farthest_distance() == 4


def test_square_inside():
    assert parse_maze(SQUARE).count_inside() == 1


def test_squeezed_tiles_are_outside():
    assert parse_maze(SQUEEZE).count_inside() == 4


def test_start_position_found():
    assert parse_maze(SQUARE).start == (1, 1)


def test_loop_starts_at_start_and_is_closed():
    maze = parse_maze(SQUEEZE)
    loop = maze.trace_loop()
    assert loop[0] == maze.start
    for (r1, c1), (r2, c2) in zip(loop, loop[1:] + loop[:1]):
        assert abs(r1 - r2) + abs(c1 - c2) == 1
    assert len(set(loop)) == len(loop)


@pytest.mark.parametrize("height,width", [(2, 2), (3, 3), (4, 6), (7, 5)])
def test_rectangle_loop_covers_every_pipe(height, width):
    lines = rectangle(height, width)
    maze = parse_maze(lines)
    pipes = sum(len(line) - line.count(".") for line in lines)
    assert len(maze.trace_loop()) == pipes
    assert maze.farthest_distance() == pipes // 2


@pytest.mark.parametrize("height,width", [(2, 2), (3, 3), (4, 6), (7, 5)])
def test_rectangle_encloses_all_dots(height, width):
    lines = rectangle(height, width)
    assert parse_maze(lines).count_inside() == sum(line.count(".") for line in lines)


def test_start_not_at_corner():
    lines = ["F-7", "S.|", "L-J"]
    maze = parse_maze(lines)
    assert maze.start == (1, 0)
    assert maze.count_inside() == parse_maze(["S-7", "|.|", "L-J"]).count_inside()


def test_missing_start_raises():
    with pytest.raises(ValueError):
        parse_maze(["...", ".|.", "..."])


def test_isolated_start_raises():
    with pytest.raises(ValueError):
        parse_maze(["...", ".S.", "..."]).trace_loop()


def test_broken_loop_raises():
    with pytest.raises(ValueError):
        parse_maze(["S-7", "|..", "L-."]).count_inside()


def test_maze_dataclass_tile_out_of_range():
    maze = PipeMaze(("S7", "LJ"), (0, 0))
    assert maze.tile(5, 5) == "."
    assert maze.tile(0, 1) == "7"


def test_main_prints_results(tmp_path, capsys):
    path = tmp_path / "maze.txt"
    path.write_text("\n".join(SQUARE) + "\n")
    maze = parse_maze(SQUARE)
    assert main(["--input-file", str(path)]) == 0
    out = capsys.readouterr().out
    assert f"= {maze.farthest_distance()}." in out
    assert f"Number inside maze: {maze.count_inside()}" in out


def test_main_missing_file(tmp_path):
    assert main(["--input-file", str(tmp_path / "absent.txt")]) == 1