import pytest

from adventpuzzles.y2023_d06 import main, part1, part2, ways_to_win

EXAMPLE = ["Time:      7  15   30", "Distance:  9  40  200"]


def test_example_totals():
    assert part1(EXAMPLE) == 288
    assert part2(EXAMPLE) == 71503


def test_part1_is_product_of_races():
    expected = ways_to_win(7, 9) * ways_to_win(15, 40) * ways_to_win(30, 200)
    assert part1(EXAMPLE) == expected


def test_zero_record_is_beaten_by_every_hold_time():
    for time in (2, 5, 12, 101):
        assert ways_to_win(time, 0) == time - 1


def test_unbeatable_record():
    assert not ways_to_win(10, 25)
    assert not ways_to_win(1, 0)
    assert not ways_to_win(0, 0)


def test_higher_record_never_gives_more_ways():
    for distance in range(0, 60):
        assert ways_to_win(17, distance) >= ways_to_win(17, distance + 1)


def test_part2_matches_joined_race():
    assert part2(EXAMPLE) == ways_to_win(71530, 940200)


def test_bad_header_is_rejected():
    with pytest.raises(ValueError):
        part1(["Duration: 7", "Distance: 9"])


def test_mismatched_counts_are_rejected():
    with pytest.raises(ValueError):
        part1(["Time: 7 15", "Distance: 9"])


def test_main_prints_totals(tmp_path, capsys):
    path = tmp_path / "races.txt"
    path.write_text("\n".join(EXAMPLE) + "\n", encoding="utf-8")
    assert main(["--input-file", str(path)]) == 0
    out = capsys.readouterr().out
    assert f"Part 1: total: {part1(EXAMPLE)}" in out
    assert f"Part 2: total: {part2(EXAMPLE)}" in out