import pytest

from adventpuzzles.y2024_d02 import is_safe, is_safe_dampened, main, parse_reports

EXAMPLE = [
    "7 6 4 2 1",
    "1 2 7 8 9",
    "9 7 6 2 1",
    "1 3 2 4 5",
    "8 6 4 4 1",
    "1 3 6 7 9",
]


def test_parse_reports():
    reports = parse_reports(EXAMPLE + [""])
    assert len(reports) == len(EXAMPLE)
    assert reports[0] == [7, 6, 4, 2, 1]


@pytest.mark.parametrize(
    "line, safe, dampened",
    [
        ("7 6 4 2 1", True, True),
        ("1 2 7 8 9", False, False),
        ("9 7 6 2 1", False, False),
        ("1 3 2 4 5", False, True),
        ("8 6 4 4 1", False, True),
        ("1 3 6 7 9", True, True),
    ],
)
def test_example_reports(line, safe, dampened):
    (report,) = parse_reports([line])
    assert is_safe(report) is safe
    assert is_safe_dampened(report) is dampened


def test_example_counts():
    reports = parse_reports(EXAMPLE)
    assert sum(is_safe(r) for r in reports) == 2
    assert sum(is_safe_dampened(r) for r in reports) == 4


def test_safe_implies_dampened_safe():
    for report in parse_reports(EXAMPLE):
        if is_safe(report):
            assert is_safe_dampened(report)


def test_reverse_keeps_safety():
    for report in parse_reports(EXAMPLE):
        assert is_safe(report) == is_safe(list(reversed(report)))


def test_flat_step_is_unsafe():
    assert is_safe([5, 5]) is False


def test_non_numeric_rejected():
    with pytest.raises(ValueError):
        parse_reports(["1 two 3"])


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n")
    assert main(["--input-file", str(path)]) == 0
    out = capsys.readouterr().out
    safe = sum(is_safe(r) for r in parse_reports(EXAMPLE))
    assert f"Number of safe levels: {safe}" in out