import pytest

from adventpuzzles.y2024_d10 import main, trail_score_and_rating

EXAMPLE = [
    "89010123",
    "78121874",
    "87430965",
    "96549874",
    "45678903",
    "32019012",
    "01329801",
    "10456732",
]


def test_example_score_and_rating():
    assert trail_score_and_rating(EXAMPLE) == (36, 81)


def test_single_straight_trail():
    assert trail_score_and_rating(["0123456789"]) == (1, 1)


def test_rating_at_least_score():
    score, rating = trail_score_and_rating(EXAMPLE)
    assert rating >= score


def test_non_digits_block_trails():
    assert trail_score_and_rating(["01234.6789"]) == (0, 0)


def test_no_trailhead():
    assert trail_score_and_rating(["123456789"]) == (0, 0)


def test_empty_map_raises():
    with pytest.raises(ValueError):
        trail_score_and_rating([])


def test_main_prints_results(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n", encoding="utf-8")
    assert main(["--input-file", str(path)]) == 0
    out = capsys.readouterr().out
    assert "P10: Part 1: Trailheads: 36" in out
    assert "P10: Part 2: Distinct Trailheads: 81" in out


def test_main_missing_file(tmp_path):
    assert main(["--input-file", str(tmp_path / "missing.txt")]) == 1