import pytest

from adventpuzzles.y2024_d01 import main, parse_lists, similarity_score, total_distance

EXAMPLE = ["3   4", "4   3", "2   5", "1   3", "3   9", "3   3"]


def test_parse_lists():
    left, right = parse_lists(EXAMPLE)
    assert left == [3, 4, 2, 1, 3, 3]
    assert right == [4, 3, 5, 3, 9, 3]


def test_example_values():
    left, right = parse_lists(EXAMPLE)
    assert total_distance(left, right) == 11
    assert similarity_score(left, right) == 31


def test_distance_to_self_is_zero():
    left, _ = parse_lists(EXAMPLE)
    assert total_distance(left, list(reversed(left))) == 0


def test_distance_is_symmetric():
    left, right = parse_lists(EXAMPLE)
    assert total_distance(left, right) == total_distance(right, left)


def test_similarity_of_disjoint_lists_is_zero():
    assert similarity_score([1, 2, 3], [4, 5, 6]) == 0


def test_similarity_of_single_match():
    assert similarity_score([7], [7]) == 7 * 1


def test_blank_lines_skipped():
    left, right = parse_lists(["1 2", "", "3 4"])
    assert (left, right) == ([1, 3], [2, 4])


def test_malformed_line_rejected():
    with pytest.raises(ValueError):
        parse_lists(["1 2 3"])


def test_unequal_lengths_rejected():
    with pytest.raises(ValueError):
        total_distance([1, 2], [1])


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n")
    assert main(["--input-file", str(path)]) == 0
    left, right = parse_lists(EXAMPLE)
    out = capsys.readouterr().out
    assert f"Sum of absolute differences: {total_distance(left, right)}" in out
    assert f"Sum of products: {similarity_score(left, right)}" in out