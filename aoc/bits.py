from __future__ import annotations

from typing import Iterable, Sequence, TypeAlias

from .errors import EncodeError, ParseError

Bits: TypeAlias = tuple[bool, ...]

_HEX_DIGITS = "0123456789ABCDEF"


def hex_to_bits(text: str) -> Bits:
    """Expand a hexadecimal string into its bits, most significant bit first.

    Each character becomes four bits and the groups are concatenated in order. Case is ignored
    and surrounding whitespace is stripped, so a raw input file can be passed in as is.

    Args:
        text: The hexadecimal text.

    Returns:
        The bits, as a tuple of booleans.

    Raises:
        ParseError: If any character is not a hex digit.
    """
    bits: list[bool] = []
    for position, char in enumerate(text.strip()):
        nibble = _HEX_DIGITS.find(char.upper())
        if nibble < 0:
            raise ParseError(f"unable to parse input: {char!r} at position {position} is not hex")
        bits.extend(bool(nibble >> shift & 1) for shift in (3, 2, 1, 0))
    return tuple(bits)


def bits_to_hex(bits: Sequence[bool]) -> str:
    """Render bits as upper case hex, padding the end with zero bits to a whole digit."""
    padded = list(bits) + [False] * (-len(bits) % 4)
    return "".join(
        _HEX_DIGITS[decode_unsigned(padded[i : i + 4])] for i in range(0, len(padded), 4)
    )


def decode_unsigned(bits: Iterable[bool]) -> int:
    """Interpret bits as a big-endian unsigned integer. No bits decode to 0."""
    value = 0
    for bit in bits:
        value = value << 1 | bit
    return value


def encode_unsigned(value: int, width: int) -> Bits:
    """Encode `value` as exactly `width` big-endian bits."""
    if value < 0 or value >> width:
        raise EncodeError(f"{value} does not fit in {width} bits")
    return tuple(bool(value >> shift & 1) for shift in reversed(range(width)))


__all__ = (
    "Bits",
    "hex_to_bits",
    "bits_to_hex",
    "decode_unsigned",
    "encode_unsigned",
)
