import pytest

from uvasolve.sequences import (
    cheapest_bases,
    compare_sets,
    derivative_at,
    division_sequence,
    is_b2_sequence,
    is_jolly,
    is_symmetric_matrix,
    median_info,
    minimal_distance_sum,
    minimum_moves,
    permute,
    problems,
    solve,
    sort_mod,
    swap_count,
)


def test_is_jolly_cases():
    assert is_jolly([1, 4, 2, 3]) is True
    assert is_jolly([1, 4, 2, -1, 6]) is False
    assert is_jolly([7]) is True
    assert is_jolly([]) is True


def test_minimal_distance_sum_invariants():
    positions = [2, 4, 6, 10, 1]
    base = minimal_distance_sum(positions)
    assert minimal_distance_sum([p + 100 for p in positions]) == base
    assert minimal_distance_sum(list(reversed(positions))) == base
    assert minimal_distance_sum([5, 5, 5]) == 0


def test_minimal_distance_sum_empty():
    with pytest.raises(ValueError):
        minimal_distance_sum([])


def test_median_info_odd_length_has_single_median():
    low, count, span = median_info([9, 1, 5])
    assert low == 5
    assert span == 1
    assert count == 1


def test_median_info_counts_duplicates():
    low, count, span = median_info([10, 10])
    assert (low, count, span) == (10, 2, 1)


def test_median_info_empty():
    with pytest.raises(ValueError):
        median_info([])


def test_is_b2_sequence():
    assert is_b2_sequence([1, 2, 4, 8]) is True
    assert is_b2_sequence([1, 2, 3]) is False
    assert is_b2_sequence([2, 1, 4]) is False
    assert is_b2_sequence([0, 1, 3]) is False


def test_sort_mod_sample():
    numbers = list(range(1, 16))
    assert sort_mod(numbers, 3) == [15, 9, 3, 6, 12, 13, 7, 1, 4, 10, 11, 5, 2, 8, 14]


def test_sort_mod_remainder_keeps_sign():
    assert sort_mod([1, -1], 2) == [-1, 1]


def test_sort_mod_is_permutation():
    numbers = [7, -3, 12, 0, 5, -8, 9]
    assert sorted(sort_mod(numbers, 4)) == sorted(numbers)


def test_sort_mod_zero_modulus():
    with pytest.raises(ValueError):
        sort_mod([1, 2], 0)


def test_is_symmetric_matrix():
    assert is_symmetric_matrix([5, 1, 3, 2, 0, 2, 3, 1, 5]) is True
    assert is_symmetric_matrix([5, 1, 3, 2, 0, 2, 0, 1, 5]) is False
    assert is_symmetric_matrix([-1]) is False


def test_swap_count_invariants():
    values = [1, 2, 3, 4, 5, 6]
    assert swap_count(values) == 0
    n = len(values)
    assert swap_count(list(reversed(values))) == n * (n - 1) // 2


def test_permute():
    assert permute([3, 1, 2], ["32.0", "54.7", "-2"]) == ["54.7", "-2", "32.0"]


def test_permute_too_few_values():
    with pytest.raises(ValueError):
        permute([1, 2, 3], ["a"])


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ([1, 2], [2, 1], "A equals B"),
        ([1], [1, 2], "A is a proper subset of B"),
        ([1, 2, 3], [3], "B is a proper subset of A"),
        ([1, 2], [3, 4], "A and B are disjoint"),
        ([1, 2], [2, 3], "I'm confused!"),
    ],
)
def test_compare_sets(a, b, expected):
    assert compare_sets(a, b) == expected


def test_minimum_moves():
    assert minimum_moves([5, 2, 4, 1, 7, 5]) == 5
    assert minimum_moves([3, 3, 3]) == 0


def test_minimum_moves_empty():
    with pytest.raises(ValueError):
        minimum_moves([])


def test_derivative_at():
    assert derivative_at(9, [42]) == 0
    assert derivative_at(0, [4, -6, 11]) == -6
    assert derivative_at(123, []) == 0


def test_division_sequence():
    assert division_sequence(125, 5) == [125, 25, 5, 1]
    assert division_sequence(30, 3) is None
    assert division_sequence(10, 1) is None
    assert division_sequence(1, 5) is None


def test_cheapest_bases():
    costs = [1] * 36
    assert cheapest_bases(0, costs) == list(range(2, 37))
    assert cheapest_bases(35, costs) == [36]


def test_cheapest_bases_errors():
    with pytest.raises(ValueError):
        cheapest_bases(5, [1] * 10)
    with pytest.raises(ValueError):
        cheapest_bases(-1, [1] * 36)


def test_solve_jolly():
    assert solve("10038", "4 1 4 2 3\n5 1 4 2 -1 6\n") == "Jolly\nNot jolly\n"


def test_solve_division():
    assert solve("10190", "125 5\n30 3\n") == "125 25 5 1\nBoring!\n"


def test_solve_symmetric():
    assert solve("11349", "1\nN = 1\n5\n") == "Test #1: Symmetric.\n"


def test_solve_b2():
    assert solve("11063", "4\n1 2 4 8\n") == "Case #1: It is a B2-Sequence.\n\n"


def test_solve_train_swapping():
    assert solve("299", "1\n3\n1 2 3\n") == "Optimal train swapping takes 0 swaps.\n"


def test_solve_sort_mod_terminates():
    assert solve("11321", "2 5\n3\n4\n0 0\n") == "2 5\n3\n4\n0 0\n"


def test_solve_permutation():
    text = "1\n\n3 1 2\n32.0 54.7 -2\n"
    assert solve("482", text) == "54.7\n-2\n32.0\n"


def test_solve_sets():
    assert solve("496", "1 2\n2 1\n") == "A equals B\n"


def test_solve_polynomial():
    assert solve("10268", "0\n4 -6 11\n") == "-6\n"


def test_solve_unknown_problem():
    with pytest.raises(ValueError):
        solve("1", "")


def test_problems_lists_every_solver():
    assert set(problems()) == {
        "10038", "10041", "10057", "10190", "10268", "11005", "11063",
        "11321", "11349", "299", "482", "496", "591",
    }