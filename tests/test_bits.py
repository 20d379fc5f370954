from __future__ import annotations

import pytest

from aoc.bits import bits_to_hex, decode_unsigned, encode_unsigned, hex_to_bits
from aoc.errors import EncodeError, ParseError
from bit_strings import parse_bit_string, render_bits


def test_decode_unsigned() -> None:
    assert decode_unsigned([True, True, False]) == 6


def test_decode_unsigned_empty() -> None:
    assert decode_unsigned([]) == 0


def test_decode_unsigned_wider_than_64_bits() -> None:
    assert decode_unsigned([True] + [False] * 80) == 2**80


@pytest.mark.parametrize("text", ["D2FE28", "d2fe28", "  D2fE28\n"])
def test_hex_to_bits(text: str) -> None:
    assert render_bits(hex_to_bits(text)) == "110100101111111000101000"


def test_hex_to_bits_empty() -> None:
    assert hex_to_bits("") == ()


@pytest.mark.parametrize("text", ["D2FG28", "0x12", "12 34"])
def test_hex_to_bits_rejects_non_hex(text: str) -> None:
    with pytest.raises(ParseError, match="unable to parse input"):
        hex_to_bits(text)


def test_bits_to_hex_pads_with_zeros() -> None:
    assert bits_to_hex(parse_bit_string("110100101111111000101")) == "D2FE28"


def test_encode_unsigned() -> None:
    assert render_bits(encode_unsigned(6, 5)) == "00110"


@pytest.mark.parametrize(("value", "width"), [(8, 3), (-1, 4), (2048, 11)])
def test_encode_unsigned_overflow(value: int, width: int) -> None:
    with pytest.raises(EncodeError):
        encode_unsigned(value, width)
