import random
from collections import Counter

import pytest

from labworks.diagonal_sort import (
    BLUE,
    format_matrix,
    insertion_sort,
    main,
    random_matrix,
    sort_diagonals,
)


@pytest.mark.parametrize(
    "values",
    [[], [1], [3, 1, 2], [5, -1, 5, 0, 7, -3], list(range(10, 0, -1))],
)
def test_insertion_sort_matches_sorted(values):
    assert insertion_sort(values) == sorted(values)


def test_insertion_sort_leaves_input_untouched():
    values = [4, 2, 9, 1]
    insertion_sort(values)
    assert values == [4, 2, 9, 1]


def test_random_matrix_shape_and_bounds():
    matrix = random_matrix(5, -3, 7, random.Random(1))
    assert len(matrix) == 5
    assert all(len(row) == 5 for row in matrix)
    assert all(-3 <= v <= 7 for row in matrix for v in row)


def test_random_matrix_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        random_matrix(4, 10, 1, random.Random(0))


def _diagonals(matrix, size):
    rows = [i for i in range(size) if not (size % 2 == 1 and i == size // 2)]
    return [matrix[i][i] for i in rows], [matrix[i][size - 1 - i] for i in rows]


@pytest.mark.parametrize("size", [2, 3, 4, 5, 8])
def test_sort_diagonals_sorts_both_diagonals(size):
    matrix = random_matrix(size, 0, 99, random.Random(size))
    result = sort_diagonals(matrix)
    main_diag, anti_diag = _diagonals(result, size)
    assert main_diag == sorted(main_diag)
    assert anti_diag == sorted(anti_diag)
    original_main, original_anti = _diagonals(matrix, size)
    assert Counter(main_diag) == Counter(original_main)
    assert Counter(anti_diag) == Counter(original_anti)


@pytest.mark.parametrize("size", [3, 5, 6])
def test_sort_diagonals_keeps_other_cells(size):
    matrix = random_matrix(size, 0, 99, random.Random(42))
    result = sort_diagonals(matrix)
    for i in range(size):
        for j in range(size):
            if i != j and i != size - 1 - j:
                assert result[i][j] == matrix[i][j]
    if size % 2 == 1:
        c = size // 2
        assert result[c][c] == matrix[c][c]


def test_sort_diagonals_source_assertions_hold():
    matrix = random_matrix(6, 1, 50, random.Random(7))
    a = sort_diagonals(matrix)
    m = 6
    assert a[0][0] <= a[1][1]
    assert a[m - 2][m - 2] <= a[m - 1][m - 1]
    assert a[0][m - 1] <= a[1][m - 2]
    assert a[m - 2][1] <= a[m - 1][0]


def test_sort_diagonals_rejects_non_square():
    with pytest.raises(ValueError):
        sort_diagonals([[1, 2, 3], [4, 5, 6]])


def test_format_matrix_plain():
    assert format_matrix([[1, 2], [3, 4]]) == "  1   2 \n  3   4 \n"


def test_format_matrix_colors_diagonals_only():
    text = format_matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]], color=True)
    assert text.count(BLUE) == 5


def test_main_prints_both_matrices(capsys):
    code = main(["--max", "9", "--min", "1", "--size", "4", "--seed", "3"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Non sorted:" in out
    assert "Sorted:" in out
    assert len(out.strip().splitlines()) == 10


def test_main_rejects_min_above_max():
    with pytest.raises(SystemExit):
        main(["--max", "1", "--min", "9", "--size", "4"])