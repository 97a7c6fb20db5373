import pytest

from printfmt.digits import strip_leading_zeros, to_binary, to_hex, to_octal


@pytest.mark.parametrize("value", [0, 1, 5, 255, 1024, 2147483647])
def test_binary_round_trip(value):
    result = to_binary(value, 32)
    assert len(result) == 32
    assert int(result, 2) == value


def test_binary_of_minus_one_is_all_ones():
    assert to_binary(-1, 16) == "1" * 16


@pytest.mark.parametrize("value", [-1, -2, -762534])
def test_binary_negative_is_twos_complement(value):
    assert int(to_binary(value, 32), 2) == value + 2**32


@pytest.mark.parametrize("width", [16, 32, 64])
@pytest.mark.parametrize("value", [0, 7, 0x7FFE63, -1, -300])
def test_hex_round_trip(width, value):
    result = to_hex(value, width)
    assert len(result) == width // 4
    assert int(result, 16) == value % 2**width


def test_hex_case():
    lower = to_hex(0xABCDEF, 32)
    upper = to_hex(0xABCDEF, 32, True)
    assert lower == lower.lower()
    assert upper == lower.upper()


def test_hex_pinned_value():
    assert to_hex(255, 16, True) == "00FF"


def test_hex_rejects_odd_width():
    with pytest.raises(ValueError):
        to_hex(1, 10)


@pytest.mark.parametrize("width,length", [(16, 6), (32, 11), (64, 22)])
def test_octal_lengths(width, length):
    assert len(to_octal(1, width)) == length


@pytest.mark.parametrize("width", [16, 32, 64])
@pytest.mark.parametrize("value", [0, 8, 2147484671, -1, -9])
def test_octal_round_trip(width, value):
    assert int(to_octal(value, width), 8) == value % 2**width


def test_octal_of_minus_one_in_32_bits():
    assert to_octal(-1, 32) == "37777777777"


def test_zero_width_rejected():
    with pytest.raises(ValueError):
        to_binary(3, 0)


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        to_binary(1.5, 8)


def test_strip_leading_zeros():
    assert strip_leading_zeros("000a1") == "a1"
    assert strip_leading_zeros("0000") == "0"
    assert strip_leading_zeros("") == "0"
    assert strip_leading_zeros("10") == "10"