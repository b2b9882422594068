import pytest

from uvasolve.grid import (
    MarsGrid,
    largest_square,
    lcd_display,
    max_submatrix_sum,
    minesweeper,
    problems,
    rotate_board,
    skyline,
    solve,
    spot_game,
)


def test_minesweeper_keeps_shape_and_mines():
    rows = ["*...", "....", ".*..", "...."]
    result = minesweeper(rows)
    assert [len(r) for r in result] == [len(r) for r in rows]
    for row_in, row_out in zip(rows, result):
        for a, b in zip(row_in, row_out):
            assert (a == "*") == (b == "*")


def test_minesweeper_without_mines_is_all_zero():
    rows = ["....", "...."]
    assert minesweeper(rows) == ["0" * 4, "0" * 4]


def test_minesweeper_all_mines_unchanged():
    rows = ["**", "**"]
    assert minesweeper(rows) == rows


def test_minesweeper_single_mine_in_centre():
    assert minesweeper(["...", ".*.", "..."]) == ["111", "1*1", "111"]


def test_largest_square_uniform_grid_centre():
    grid = ["aaaaa"] * 5
    assert largest_square(grid, 2, 2) == len(grid)


def test_largest_square_corner_and_distinct_centre_agree():
    grid = ["abc", "def", "ghi"]
    assert largest_square(grid, 1, 1) == largest_square(grid, 0, 0)
    assert largest_square(["aaa"] * 3, 0, 0) == largest_square(grid, 1, 1)


def test_largest_square_is_odd_and_fits():
    grid = ["aaaab", "aaaab", "aaaab", "bbbbb"]
    for r in range(len(grid)):
        for c in range(len(grid[0])):
            side = largest_square(grid, r, c)
            assert side % 2 == 1
            assert side <= min(len(grid), len(grid[0]))


def test_largest_square_outside_raises():
    with pytest.raises(ValueError):
        largest_square(["ab"], 3, 0)


def test_max_submatrix_sum_all_negative_is_largest_element():
    matrix = [[-5, -2], [-3, -9]]
    assert max_submatrix_sum(matrix) == max(max(row) for row in matrix)


def test_max_submatrix_sum_all_positive_is_total():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert max_submatrix_sum(matrix) == sum(map(sum, matrix))


def test_max_submatrix_sum_at_least_any_element():
    matrix = [[0, -2, -7, 0], [9, 2, -6, 2], [-4, 1, -4, 1], [-1, 8, 0, -2]]
    result = max_submatrix_sum(matrix)
    assert all(result >= v for row in matrix for v in row)
    assert result >= sum(map(sum, matrix))


def test_max_submatrix_sum_empty_raises():
    with pytest.raises(ValueError):
        max_submatrix_sum([])


def test_skyline_single_building():
    assert skyline([(1, 11, 5)]) == [(1, 11), (5, 0)]


def test_skyline_lower_building_inside_is_hidden():
    assert skyline([(1, 11, 5), (2, 6, 4)]) == skyline([(1, 11, 5)])


def test_skyline_adjacent_equal_heights_merge():
    assert skyline([(1, 5, 3), (3, 5, 6)]) == [(1, 5), (6, 0)]


def test_skyline_empty():
    assert skyline([]) == []


def test_rotate_board_four_times_is_identity():
    board = frozenset({(1, 2), (3, 1), (2, 2)})
    state = board
    for _ in range(4):
        state = rotate_board(state, 3)
    assert state == board
    assert len(rotate_board(board, 3)) == len(board)


def test_rotate_board_keeps_corners_on_corners():
    corners = {(1, 1), (1, 3), (3, 1), (3, 3)}
    assert set(rotate_board(corners, 3)) == corners


def test_spot_game_repeating_board_loses():
    assert spot_game(1, [(1, 1, "+"), (1, 1, "-")]) == (1, 2)


def test_spot_game_rotation_counts_as_repeat():
    moves = [(1, 1, "+"), (1, 2, "+"), (1, 1, "-"), (2, 2, "+")]
    assert spot_game(2, moves) == (2, 3)


def test_spot_game_draw():
    moves = [(1, 1, "+"), (1, 2, "+"), (2, 1, "+"), (2, 2, "+")]
    assert spot_game(2, moves) is None


def test_lcd_display_dimensions():
    for size in (1, 2, 3):
        lines = lcd_display(size, "88")
        assert len(lines) == 2 * size + 3
        assert all(len(line) == 2 * (size + 2) + 1 for line in lines)


def test_lcd_display_eight():
    assert lcd_display(1, "8") == [" - ", "| |", " - ", "| |", " - "]


def test_lcd_display_rejects_non_digit():
    with pytest.raises(ValueError):
        lcd_display(2, "1a")


def test_mars_grid_full_turn_returns_to_start():
    grid = MarsGrid(5, 3)
    assert grid.move(1, 1, "E", "RFRFRFRF") == (1, 1, "E", False)
    assert grid.move(2, 2, "N", "LLLL") == (2, 2, "N", False)


def test_mars_grid_scent_saves_next_robot():
    grid = MarsGrid(1, 1)
    assert grid.move(1, 1, "N", "F") == (1, 1, "N", True)
    assert grid.move(1, 1, "N", "F") == (1, 1, "N", False)
    assert (1, 1) in grid.scents


def test_mars_grid_bad_heading():
    with pytest.raises(ValueError):
        MarsGrid(2, 2).move(0, 0, "X", "F")


def test_solve_minesweeper_format():
    assert solve("10189", "1 1\n*\n0 0\n") == "Field #1:\n*\n"


def test_solve_mars_robot():
    assert solve("118", "5 3\n1 1 E\nRFRFRFRF\n") == "1 1 E\n"


def test_solve_spot():
    assert solve("141", "1\n1 1 +\n1 1 +\n0\n") == "Player 1 wins on move 2\n"


def test_solve_lcd_matches_function():
    assert solve("706", "1 8\n0 0\n") == "\n".join(lcd_display(1, "8")) + "\n\n"


def test_solve_max_sum():
    assert solve("108", "2\n-1 -2\n-3 -4\n") == "-1\n"


def test_solve_square_query():
    assert solve("10908", "1\n3 3 1\naaa\naaa\naaa\n1 1\n") == "3 3 1\n3\n"


def test_solve_skyline():
    assert solve("105", "1 11 5\n") == "1 11 5 0\n"


def test_problems_and_unknown():
    assert set(problems()) == {"105", "108", "10189", "10908", "118", "141", "706"}
    with pytest.raises(ValueError):
        solve("1", "")