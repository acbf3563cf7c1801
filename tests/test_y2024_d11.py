import pytest

from adventpuzzles.y2024_d11 import BLINKS, blink, count_stones, main


def test_blink_example():
    assert blink([0, 1, 10, 99, 999]) == [1, 2024, 1, 0, 9, 9, 2021976]


def test_count_example():
    assert count_stones([125, 17], 25) == 55312


def test_zero_blinks_keeps_count():
    stones = [125, 17, 0, 9]
    assert count_stones(stones, 0) == len(stones)


@pytest.mark.parametrize("blinks", range(9))
def test_count_matches_repeated_blinks(blinks):
    stones = [125, 17]
    row = stones
    for _ in range(blinks):
        row = blink(row)
    assert count_stones(stones, blinks) == len(row)


def test_blink_is_applied_stone_by_stone():
    assert blink([125]) + blink([17]) == blink([125, 17])


def test_blink_never_shrinks_and_stays_nonnegative():
    row = [125, 17, 0]
    for _ in range(10):
        following = blink(row)
        assert len(following) >= len(row)
        assert all(stone >= 0 for stone in following)
        row = following


def test_split_joins_back_to_digits():
    for stone in [10, 1234, 567890]:
        left, right = blink([stone])
        digits = str(stone)
        half = len(digits) // 2
        assert left == int(digits[:half])
        assert right == int(digits[half:])


def test_negative_blinks_raise():
    with pytest.raises(ValueError):
        count_stones([1], -1)


def test_main_prints_count(tmp_path, capsys):
    path = tmp_path / "stones.txt"
    path.write_text("125 17\n")
    assert main(["--input-file", str(path)]) == 0
    out = capsys.readouterr().out
    assert f"Number of stones: {count_stones([125, 17], BLINKS)}" in out


def test_main_missing_file(tmp_path):
    assert main(["--input-file", str(tmp_path / "absent.txt")]) == 1