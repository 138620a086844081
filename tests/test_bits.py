import io

import pytest

from padcalc.bits import (
    clear_bit,
    count_ones,
    get_bit,
    main,
    reverse_byte,
    set_bit,
    toggle_bit,
)


@pytest.mark.parametrize("value", [0, 5, 13, 0xA5, 0xFF, 1234])
@pytest.mark.parametrize("bit", range(8))
def test_set_then_get_reads_one(value, bit):
    assert get_bit(set_bit(value, bit), bit) == 1
    assert get_bit(clear_bit(value, bit), bit) == 0


@pytest.mark.parametrize("value", [0, 5, 13, 0xA5, 0xFF, 1234])
@pytest.mark.parametrize("bit", range(8))
def test_toggle_twice_restores(value, bit):
    assert toggle_bit(toggle_bit(value, bit), bit) == value
    assert get_bit(toggle_bit(value, bit), bit) != get_bit(value, bit)


@pytest.mark.parametrize("value", [0, 5, 13, 0xA5])
@pytest.mark.parametrize("bit", range(8))
def test_clear_after_set_matches_clear(value, bit):
    assert clear_bit(set_bit(value, bit), bit) == clear_bit(value, bit)


def test_set_bit_leaves_other_bits():
    value = 0b1010
    result = set_bit(value, 0)
    assert [get_bit(result, b) for b in range(1, 8)] == [
        get_bit(value, b) for b in range(1, 8)
    ]


@pytest.mark.parametrize("n", range(0, 33))
def test_count_ones_of_low_mask(n):
    assert count_ones((1 << n) - 1) == n


@pytest.mark.parametrize("k", range(32))
def test_count_ones_single_bit(k):
    assert count_ones(1 << k) == 1


def test_count_ones_negative_uses_32_bits():
    assert count_ones(-1) == 32


def test_count_ones_ignores_high_bits():
    assert count_ones((1 << 40) | 3) == count_ones(3)


@pytest.mark.parametrize("num", range(256))
def test_reverse_byte_is_involution(num):
    assert reverse_byte(reverse_byte(num)) == num
    assert count_ones(reverse_byte(num)) == count_ones(num)


@pytest.mark.parametrize("num", range(256))
def test_reverse_byte_mirrors_bits(num):
    reversed_value = reverse_byte(num)
    assert [get_bit(reversed_value, i) for i in range(8)] == [
        get_bit(num, 7 - i) for i in range(8)
    ]


def test_reverse_byte_uses_low_byte_only():
    assert reverse_byte(0x100 | 0x0D) == reverse_byte(0x0D)


def test_main_with_argument(capsys):
    assert main(["13"]) == 0
    out = capsys.readouterr().out
    assert "bit value is 1" in out
    assert "sum of array equal 55" in out
    assert f"number of ones in number 13 is {count_ones(13)}" in out
    assert f"reversed binary is {reverse_byte(13):08b}" in out


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("255\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "please enter number" in out
    assert f"number of ones in number 255 is {count_ones(255)}" in out


def test_main_rejects_non_number(capsys):
    assert main(["abc"]) == 1
    assert "abc" in capsys.readouterr().err