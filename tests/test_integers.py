import pytest

from printfmt.integers import (
    format_int,
    format_long,
    format_long_unsigned,
    format_plus,
    format_short,
    format_short_unsigned,
    format_space,
    format_unsigned,
)


def test_int_negative():
    assert format_int(-762534) == "-762534"


@pytest.mark.parametrize("value", [0, 9, 10, 39, 2147483647, -1, -2147483648])
def test_int_round_trip(value):
    assert int(format_int(value)) == value


def test_int_wraps_to_32_bits():
    assert int(format_int(2**31)) == -(2**31)
    assert int(format_int(2147484671)) == 2147484671 - 2**32


@pytest.mark.parametrize("value", [0, 2**62, -(2**63), 2**63 - 1])
def test_long_round_trip(value):
    assert int(format_long(value)) == value


def test_long_wraps_to_64_bits():
    assert format_long(2**63) == str(-(2**63))


@pytest.mark.parametrize("value", [0, 32767, -32768, -5])
def test_short_round_trip(value):
    assert int(format_short(value)) == value


def test_short_wraps_to_16_bits():
    assert int(format_short(40000)) == 40000 - 2**16


def test_unsigned():
    assert format_unsigned(2147484671) == "2147484671"
    assert format_unsigned(-1) == str(2**32 - 1)


def test_long_unsigned():
    assert format_long_unsigned(-1) == str(2**64 - 1)
    assert int(format_long_unsigned(2**40)) == 2**40


def test_short_unsigned():
    assert format_short_unsigned(-1) == str(2**16 - 1)
    assert int(format_short_unsigned(2**16 + 3)) == 3


def test_plus():
    assert format_plus(5) == "+5"
    assert format_plus(0) == "+0"
    assert format_plus(-762534) == "-762534"


def test_space():
    assert format_space(5) == " 5"
    assert format_space(-5) == "-5"


@pytest.mark.parametrize("func", [format_int, format_unsigned, format_plus])
def test_rejects_float(func):
    with pytest.raises(TypeError):
        func(1.5)