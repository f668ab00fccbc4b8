import pytest

from tinyqr.FunctionPatterns import FunctionPatterns
from tinyqr.params import get_format_sequence


def _format_copies(size):
    first = [(i, 8) for i in range(6)] + [(7, 8), (8, 8), (8, 7)] + \
        [(8, y) for y in range(5, -1, -1)]
    second = [(8, size - 1 - i) for i in range(7)] + \
        [(size - 8 + j, 8) for j in range(8)]
    return first, second


def _unassigned(grid):
    size = grid.get_side_length()
    return sum(1 for y in range(size) for x in range(size)
               if not grid.is_assigned(x, y))


@pytest.mark.parametrize("version", [1, 2, 3, 4])
def test_grid_size(version):
    grid = FunctionPatterns.paint(version, 0)
    assert grid.get_side_length() == 4 * version + 17
    assert len(grid.get_modules()) == 4 * version + 17


@pytest.mark.parametrize("version, free", [(1, 208), (2, 359), (3, 567), (4, 807)])
def test_data_module_count(version, free):
    assert _unassigned(FunctionPatterns.paint(version, 3)) == free


@pytest.mark.parametrize("version", [1, 4])
def test_finder_patterns(version):
    grid = FunctionPatterns.paint(version, 0)
    size = grid.get_side_length()
    for (x0, y0) in ((0, 0), (size - 7, 0), (0, size - 7)):
        for dy in range(7):
            for dx in range(7):
                ring = max(abs(dx - 3), abs(dy - 3))
                assert grid.get_module(x0 + dx, y0 + dy) is (ring != 2)
                assert grid.is_function(x0 + dx, y0 + dy)


def test_separators_are_light():
    grid = FunctionPatterns.paint(1, 0)
    size = grid.get_side_length()
    for i in range(8):
        assert grid.get_module(7, i) is False
        assert grid.get_module(i, 7) is False
        assert grid.get_module(size - 8, i) is False
        assert grid.get_module(size - 8 + i, 7) is False
        assert grid.get_module(7, size - 8 + i) is False
        assert grid.get_module(i, size - 8) is False


@pytest.mark.parametrize("version", [1, 2, 3, 4])
def test_timing_patterns(version):
    grid = FunctionPatterns.paint(version, 0)
    size = grid.get_side_length()
    for i in range(8, size - 8):
        assert grid.get_module(i, 6) is (i % 2 == 0)
        assert grid.get_module(6, i) is (i % 2 == 0)


@pytest.mark.parametrize("version", [1, 2, 3, 4])
def test_dark_module(version):
    grid = FunctionPatterns.paint(version, 5)
    assert grid.get_module(8, grid.get_side_length() - 8) is True


def test_no_alignment_pattern_in_version_1():
    grid = FunctionPatterns.paint(1, 0)
    for y in range(12, 17):
        for x in range(12, 17):
            assert not grid.is_assigned(x, y)


@pytest.mark.parametrize("version", [2, 3, 4])
def test_alignment_pattern(version):
    grid = FunctionPatterns.paint(version, 0)
    center = grid.get_side_length() - 7
    for dy in range(-2, 3):
        for dx in range(-2, 3):
            expected = max(abs(dx), abs(dy)) != 1
            assert grid.get_module(center + dx, center + dy) is expected


@pytest.mark.parametrize("version", [1, 2, 3, 4])
@pytest.mark.parametrize("mask", range(8))
def test_format_information_copies(version, mask):
    grid = FunctionPatterns.paint(version, mask)
    expected = list(get_format_sequence(mask))
    for copy in _format_copies(grid.get_side_length()):
        assert [grid.get_module(x, y) for (x, y) in copy] == expected


def test_format_information_without_mask():
    grid = FunctionPatterns.paint(2, -1)
    for copy in _format_copies(grid.get_side_length()):
        assert not any(grid.get_module(x, y) for (x, y) in copy)
        assert all(grid.is_function(x, y) for (x, y) in copy)


def test_painted_modules_are_function_modules():
    grid = FunctionPatterns.paint(3, 1)
    size = grid.get_side_length()
    for y in range(size):
        for x in range(size):
            assert grid.is_assigned(x, y) == grid.is_function(x, y)


def test_painting_twice_is_rejected():
    grid = FunctionPatterns.paint(1, 0)
    with pytest.raises(AssertionError):
        grid.set_function_module(0, 0, True)
