import pytest

from adventpuzzles.y2023_d08 import ghost_loop_steps, main, parse_network, steps_to_end

EXAMPLE_1 = [
    "RL",
    "",
    "AAA = (BBB, CCC)",
    "BBB = (DDD, EEE)",
    "CCC = (ZZZ, GGG)",
    "DDD = (DDD, DDD)",
    "EEE = (EEE, EEE)",
    "GGG = (GGG, GGG)",
    "ZZZ = (ZZZ, ZZZ)",
]

EXAMPLE_2 = ["LLR", "", "AAA = (BBB, BBB)", "BBB = (AAA, ZZZ)", "ZZZ = (ZZZ, ZZZ)"]

GHOSTS = [
    "LR",
    "",
    "11A = (11B, XXX)",
    "11B = (XXX, 11Z)",
    "11Z = (11B, XXX)",
    "22A = (22B, XXX)",
    "22B = (22C, 22C)",
    "22C = (22Z, 22Z)",
    "22Z = (22B, 22B)",
    "XXX = (XXX, XXX)",
]


def test_parse_network():
    instructions, nodes = parse_network(EXAMPLE_2)
    assert instructions == "LLR"
    assert nodes == {"AAA": ("BBB", "BBB"), "BBB": ("AAA", "ZZZ"), "ZZZ": ("ZZZ", "ZZZ")}


def test_examples_part1():
    assert steps_to_end(*parse_network(EXAMPLE_1)) == 2
    assert steps_to_end(*parse_network(EXAMPLE_2)) == 6


def test_any_node_starting_with_z_ends_the_walk():
    first = {"AAA": ("ZQQ", "ZQQ"), "ZQQ": ("AAA", "AAA")}
    second = {"AAA": ("ZZZ", "ZZZ"), "ZZZ": ("AAA", "AAA")}
    assert steps_to_end("L", first) == steps_to_end("L", second)


def test_ghost_loops_invariants():
    instructions, nodes = parse_network(GHOSTS)
    steps, loops = ghost_loop_steps(instructions, nodes)
    starts = [name for name in nodes if name.endswith("A")]
    assert len(loops) == len(starts)
    assert all(0 < loop <= len(nodes) for loop in loops)
    assert steps >= max(loops)


def test_ghost_loops_need_start_nodes():
    with pytest.raises(ValueError):
        ghost_loop_steps("L", {"BBB": ("BBB", "BBB")})


def test_invalid_instruction_is_rejected():
    with pytest.raises(ValueError):
        parse_network(["LXR", "", "AAA = (AAA, AAA)"])


def test_unknown_node_is_rejected():
    with pytest.raises(ValueError):
        steps_to_end("L", {"AAA": ("QQQ", "QQQ")})


def test_main_prints_steps(tmp_path, capsys):
    path = tmp_path / "network.txt"
    path.write_text("\n".join(EXAMPLE_2) + "\n", encoding="utf-8")
    assert main(["--input-file", str(path)]) == 0
    out = capsys.readouterr().out
    expected = steps_to_end(*parse_network(EXAMPLE_2))
    assert f"Part 1: Total Steps required: {expected}" in out