import pytest

from uvasolve import digits


@pytest.mark.parametrize("n", [0, 5, 87, 195, 265, 750, 9876])
def test_reverse_and_add_reaches_palindrome(n):
    count, result = digits.reverse_and_add(n)
    assert str(result) == str(result)[::-1]
    assert result >= n
    assert (count == 0) == (result == n)


def test_reverse_and_add_of_palindrome_is_unchanged():
    assert digits.reverse_and_add(12321) == (0, 12321)


def test_reverse_and_add_rejects_negative():
    with pytest.raises(ValueError):
        digits.reverse_and_add(-4)


@pytest.mark.parametrize("n", range(10))
def test_bit_counts_agree_for_single_digits(n):
    first, second = digits.bit_counts(n)
    assert first == second


def test_bit_counts_of_power_of_two():
    for k in range(20):
        assert digits.bit_counts(2 ** k)[0] == 1


def test_carry_operations_symmetric_and_zero():
    for a, b in [(123, 456), (555, 555), (999, 1), (1, 99999)]:
        assert digits.carry_operations(a, b) == digits.carry_operations(b, a)
    assert digits.carry_operations(0, 12345) == 0


def test_carry_operations_value():
    assert digits.carry_operations(999, 1) == 3


def test_smallest_base_invariants():
    for s in ["3", "5", "A", "1a", "9Z", "zz"]:
        base = digits.smallest_base(s)
        values = [digits._digit_value(c) for c in s]
        assert base is not None
        assert base > max(values)
        assert sum(values) % (base - 1) == 0


def test_smallest_base_impossible():
    assert digits.smallest_base("zy") is None
    assert digits.solve("10093", "zy\n") == "such number is impossible!\n"


def test_nine_degree():
    assert digits.nine_degree("9") == 1
    assert digits.nine_degree("10") is None
    deep = digits.nine_degree("9" * 1000)
    shallow = digits.nine_degree("9")
    assert deep > shallow


def test_nine_degree_rejects_non_digits():
    with pytest.raises(ValueError):
        digits.nine_degree("12a")


def test_is_multiple_of_11():
    for k in [1, 7, 12345, 10 ** 30 + 3]:
        assert digits.is_multiple_of_11(str(11 * k))
        assert not digits.is_multiple_of_11(str(11 * k + 1))


def test_parity_round_trip():
    for n in [1, 2, 10, 21, 1023, 65536]:
        binary, count = digits.parity(n)
        assert int(binary, 2) == n
        assert count == binary.count("1")


def test_parity_rejects_zero():
    with pytest.raises(ValueError):
        digits.parity(0)


def test_digital_root_invariants():
    for n in [1, 9, 10, 38, 123456789, 999999999999]:
        root = digits.digital_root(n)
        assert 1 <= root <= 9
        assert root % 9 == n % 9


def test_digit_counts_total():
    for n in [1, 13, 100, 2019]:
        counts = digits.digit_counts(n)
        assert len(counts) == 10
        assert sum(counts) == sum(len(str(i)) for i in range(1, n + 1))


def test_bangla_small_and_units():
    assert digits.bangla(0) == "0"
    assert digits.bangla(45) == "45"
    assert digits.bangla(10 ** 7) == "1 kuti"
    words = digits.bangla(23764).split()
    assert "hajar" in words and "shata" in words


def test_quirksome_squares_property():
    for width in (2, 4, 6):
        squares = digits.quirksome_squares(width)
        half = 10 ** (width // 2)
        assert squares
        for s in squares:
            assert len(s) == width
            value = int(s)
            assert (value // half + value % half) ** 2 == value


def test_solve_carries():
    out = digits.solve("10035", "123 456\n9 1\n0 0\n")
    assert out == "No carry operation.\n1 carry operation.\n"


def test_solve_bangla_format():
    assert digits.solve("10101", "0\n") == "   1. 0\n"


def test_solve_unknown_problem():
    with pytest.raises(ValueError):
        digits.solve("99999", "")