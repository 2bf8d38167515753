import pytest

from philosim.numbers import atoi, atoi_long, hex_digit, hex_to_int, power


def test_atoi_skips_whitespace_and_stops_at_junk():
    assert atoi("  -154236ab") == -154236


@pytest.mark.parametrize("text", ["42", "+42", " \t\n42", "42xyz"])
def test_atoi_accepts_sign_and_prefix(text):
    assert atoi(text) == 42


@pytest.mark.parametrize("text", ["", "abc", "-", "+-5", "--5"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_atoi_wraps_at_32_bits():
    assert atoi("2147483647") == 2147483647
    assert atoi("2147483648") == -(2**31)


def test_atoi_long_keeps_values_past_32_bits():
    assert atoi_long("2147483648") == 2147483648
    assert atoi_long("-2147483649") == -2147483649


@pytest.mark.parametrize("value", [0, 1, 7, 200, 123456789])
def test_atoi_round_trip(value):
    assert atoi(str(value)) == value
    assert atoi(str(-value)) == -value
    assert atoi_long(str(value)) == value


def test_hex_digit_case_insensitive():
    for lower, upper in zip("abcdef", "ABCDEF"):
        assert hex_digit(lower) == hex_digit(upper)
    assert [hex_digit(c) for c in "0123456789"] == list(range(10))


def test_hex_digit_letters_follow_digits():
    values = [hex_digit(c) for c in "0123456789abcdef"]
    assert values == list(range(16))


def test_hex_digit_invalid_is_zero():
    assert hex_digit("g") == 0
    assert hex_digit("!") == 0


def test_hex_digit_rejects_longer_text():
    with pytest.raises(ValueError):
        hex_digit("ab")


@pytest.mark.parametrize("value", [0, 1, 15, 16, 255, 4096, 0x7FFFFFFF])
def test_hex_to_int_round_trip(value):
    assert hex_to_int(format(value, "x")) == value
    assert hex_to_int(format(value, "X")) == value


def test_hex_to_int_empty_is_zero():
    assert hex_to_int("") == 0


def test_hex_to_int_wraps_at_32_bits():
    assert hex_to_int("ffffffff") == -1


def test_power_zero_exponent_is_one():
    for base in (0, 3, -5, 16):
        assert power(base, 0) == 1


@pytest.mark.parametrize("base", [2, 3, -4, 16])
def test_power_step_multiplies_by_base(base):
    for exp in range(6):
        assert power(base, exp + 1) == power(base, exp) * base


def test_power_rejects_negative_exponent():
    with pytest.raises(ValueError):
        power(2, -1)