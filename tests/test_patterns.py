import pytest

from algodrills import patterns


def _lines(text):
    assert text.endswith("\n")
    return text.split("\n")[:-1]


def test_pattern16_worked_example():
    assert patterns.pattern16(3) == "A\nBB\nCCC\n"


def test_pattern21_worked_example():
    assert patterns.pattern21(3) == "***\n* *\n***\n"


def test_pattern13_worked_example():
    assert patterns.pattern13(3) == "1 \n2 3 \n4 5 6 \n"


@pytest.mark.parametrize("n", [1, 3, 5])
def test_pattern10_rises_and_falls(n):
    lengths = [len(line) for line in _lines(patterns.pattern10(n))]
    assert lengths == list(range(1, n + 1)) + list(range(n - 1, 0, -1))
    assert set("".join(_lines(patterns.pattern10(n)))) == {"*"}


@pytest.mark.parametrize("n", [1, 4, 6])
def test_pattern11_alternates(n):
    lines = _lines(patterns.pattern11(n))
    assert [len(line) for line in lines] == list(range(1, n + 1))
    for row, line in enumerate(lines):
        assert line[0] == ("1" if row % 2 == 0 else "0")
        assert all(a != b for a, b in zip(line, line[1:]))


@pytest.mark.parametrize("n", [1, 3, 5])
def test_pattern12_symmetric_rows(n):
    lines = _lines(patterns.pattern12(n))
    assert len(lines) == n
    for line in lines:
        assert len(line) == 2 * n
        assert line == line[::-1]


@pytest.mark.parametrize("n", [2, 4])
def test_pattern13_counts_up(n):
    numbers = [int(token) for token in patterns.pattern13(n).split()]
    assert numbers == list(range(1, n * (n + 1) // 2 + 1))


@pytest.mark.parametrize("n", [1, 3, 5])
def test_pattern14_rows_extend_previous(n):
    lines = _lines(patterns.pattern14(n))
    assert len(lines) == n
    for shorter, longer in zip(lines, lines[1:]):
        assert longer.startswith(shorter)
    assert lines[0] == "A "


@pytest.mark.parametrize("n", [1, 3, 5])
def test_pattern15_shrinking_prefixes(n):
    lines = _lines(patterns.pattern15(n))
    assert [len(line) for line in lines] == list(range(n, 0, -1))
    for shorter, longer in zip(lines[1:], lines):
        assert longer.startswith(shorter)


@pytest.mark.parametrize("n", [1, 3, 5])
def test_pattern17_pyramid(n):
    lines = _lines(patterns.pattern17(n))
    assert len(lines) == n
    for line in lines:
        assert len(line) == 2 * n - 1
        assert line == line[::-1]
    assert lines[-1].startswith("A")


@pytest.mark.parametrize("n", [1, 3, 5])
def test_pattern18_counts_down(n):
    lines = _lines(patterns.pattern18(n))
    assert [len(line.split()) for line in lines] == list(range(1, n + 1))
    assert all(line.split()[0] == chr(ord("A") + n - 1) for line in lines)
    assert lines[-1].split()[-1] == "A"


@pytest.mark.parametrize("n", [1, 3, 4])
def test_pattern19_shape(n):
    lines = _lines(patterns.pattern19(n))
    assert len(lines) == 2 * n
    for line in lines:
        assert len(line) == 2 * n
        assert line == line[::-1]
    assert lines[0] == "*" * (2 * n)
    assert lines[-1] == "*" * (2 * n)


@pytest.mark.parametrize("n", [1, 3, 4])
def test_pattern20_shape(n):
    lines = _lines(patterns.pattern20(n))
    assert len(lines) == 2 * n
    for line in lines:
        assert len(line) == 2 * n + 1
        assert line == line[::-1]
        assert line[n] == " "
    assert lines[n - 1] == lines[n]


@pytest.mark.parametrize("n", [1, 4])
def test_pattern21_hollow(n):
    lines = _lines(patterns.pattern21(n))
    assert len(lines) == n
    assert lines[0] == "*" * n
    assert lines[-1] == "*" * n
    for line in lines[1:-1]:
        assert line[0] == line[-1] == "*"
        assert set(line[1:-1]) <= {" "}


@pytest.mark.parametrize("n", [1, 3, 5])
def test_pattern22_concentric(n):
    lines = _lines(patterns.pattern22(n))
    size = 2 * n - 1
    assert len(lines) == size
    assert all(len(line) == size for line in lines)
    assert lines == lines[::-1]
    assert all(line == line[::-1] for line in lines)
    assert lines[0] == str(n) * size
    assert lines[n - 1][n - 1] == "1"