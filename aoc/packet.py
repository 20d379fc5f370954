from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from itertools import chain
from typing import Callable, Sequence, TypeAlias, TypeVar

from loguru import logger

from .bits import Bits, decode_unsigned, encode_unsigned, hex_to_bits
from .errors import EncodeError, ParseError

LITERAL_TYPE_ID = 4

_HEADER_WIDTH = 3
_GROUP_WIDTH = 5
_TOTAL_LENGTH_WIDTH = 15
_COUNT_WIDTH = 11

_T = TypeVar("_T")


@dataclass(frozen=True)
class Literal:
    value: int


@dataclass(frozen=True)
class Operator:
    children: tuple[Packet, ...] = ()


Body: TypeAlias = "Literal | Operator"


@dataclass(frozen=True)
class Packet:
    """One node of a decoded transmission.

    A packet with type id 4 carries a `Literal` body, any other type id carries an `Operator`
    body whose children are combined according to the type id.
    """

    version: int
    type_id: int
    body: Body

    @property
    def is_literal(self) -> bool:
        return isinstance(self.body, Literal)


@dataclass
class _OpenOperator:
    """An operator whose children are still being read.

    `limit` is the end of the bits the children may be read from. In total length framing it is
    also where reading resumes once the operator is closed; in count framing `count` is set and
    reading resumes after the last child.
    """

    version: int
    type_id: int
    limit: int
    count: int | None = None
    children: list[Packet] = field(default_factory=list)

    @property
    def is_full(self) -> bool:
        return self.count is not None and len(self.children) >= self.count

    def close(self, position: int) -> tuple[Packet, int]:
        packet = Packet(self.version, self.type_id, Operator(tuple(self.children)))
        return packet, position if self.count is not None else self.limit


def _read_literal(bits: Bits, position: int, end: int) -> tuple[int, int] | None:
    value_bits: list[bool] = []
    while position + _GROUP_WIDTH <= end:
        group = bits[position : position + _GROUP_WIDTH]
        position += _GROUP_WIDTH
        value_bits.extend(group[1:])
        if not group[0]:
            return decode_unsigned(value_bits), position
    return None


def _open_operator(
    bits: Bits, position: int, end: int, version: int, type_id: int
) -> tuple[_OpenOperator, int] | None:
    if position >= end:
        return None
    length_type = bits[position]
    position += 1

    if not length_type:
        if end - position < _TOTAL_LENGTH_WIDTH:
            return None
        length = decode_unsigned(bits[position : position + _TOTAL_LENGTH_WIDTH])
        position += _TOTAL_LENGTH_WIDTH
        if position + length > end:
            return None
        return _OpenOperator(version, type_id, limit=position + length), position

    if end - position < _COUNT_WIDTH:
        return None
    count = decode_unsigned(bits[position : position + _COUNT_WIDTH])
    return _OpenOperator(version, type_id, limit=end, count=count), position + _COUNT_WIDTH


def _start_packet(
    bits: Bits, position: int, end: int
) -> tuple[Packet | _OpenOperator, int] | None:
    """Read a packet header and either a whole literal or the framing of an operator."""
    if end - position < 2 * _HEADER_WIDTH:
        return None
    version = decode_unsigned(bits[position : position + _HEADER_WIDTH])
    type_id = decode_unsigned(bits[position + _HEADER_WIDTH : position + 2 * _HEADER_WIDTH])
    position += 2 * _HEADER_WIDTH

    if type_id != LITERAL_TYPE_ID:
        return _open_operator(bits, position, end, version, type_id)
    literal = _read_literal(bits, position, end)
    if literal is None:
        return None
    value, position = literal
    return Packet(version, type_id, Literal(value)), position


def _read_packets(
    bits: Bits, position: int, end: int, stack: list[_OpenOperator]
) -> tuple[Packet, int] | None:
    """Read until the outermost packet is complete, keeping open operators on `stack`.

    A packet can only fail before any of its children are read, and a child that fails ends
    the children of its parent, so failure only surfaces when nothing is open.
    """
    while True:
        parent = stack[-1] if stack else None
        packet: Packet
        if parent is not None and parent.is_full:
            packet, position = stack.pop().close(position)
        else:
            started = _start_packet(bits, position, end if parent is None else parent.limit)
            if started is None:
                if parent is None:
                    return None
                packet, position = stack.pop().close(position)
            else:
                item, position = started
                if isinstance(item, _OpenOperator):
                    stack.append(item)
                    continue
                packet = item

        if not stack:
            return packet, position
        stack[-1].children.append(packet)


def parse_packet(bits: Bits) -> tuple[Packet, Bits] | None:
    """Parse one packet from the front of `bits`.

    Nesting is tracked on an explicit stack, so the depth of the tree is not bounded by the
    interpreter's recursion limit.

    Args:
        bits: The bits to read from.

    Returns:
        The packet and the bits left after it, or `None` if no packet could be read (fewer than
        six bits, or a truncated body).
    """
    parsed = _read_packets(bits, 0, len(bits), [])
    if parsed is None:
        return None
    packet, position = parsed
    return packet, bits[position:]


def decode_literal(bits: Bits) -> tuple[int, Bits] | None:
    """Read 5-bit groups up to and including the first one whose leading bit is clear."""
    literal = _read_literal(bits, 0, len(bits))
    if literal is None:
        return None
    value, position = literal
    return value, bits[position:]


def decode_operator(bits: Bits) -> tuple[Operator, Bits] | None:
    """Read the length type flag and the children it frames.

    With the flag clear, the next 15 bits give the length of a window holding the children and
    the caller always resumes at the end of that window, even if the children stop short of it.
    With the flag set, the next 11 bits give the number of children.
    """
    opened = _open_operator(bits, 0, len(bits), version=0, type_id=0)
    if opened is None:
        return None
    operator, position = opened
    packet, position = _read_packets(bits, position, len(bits), [operator])
    return packet.body, bits[position:]


def decode_packet_sequence(bits: Bits, limit: int | None = None) -> tuple[tuple[Packet, ...], Bits]:
    """Parse packets back to back until one fails to parse or `limit` packets have been read."""
    packets: list[Packet] = []
    position = 0
    while limit is None or len(packets) < limit:
        parsed = _read_packets(bits, position, len(bits), [])
        if parsed is None:
            break
        packet, position = parsed
        packets.append(packet)
    return tuple(packets), bits[position:]


def decode_transmission(text: str) -> Packet:
    """Decode the outermost packet of a hex transmission, ignoring trailing padding.

    Raises:
        ParseError: If the text is not hex, or its bits do not start with a packet.
    """
    bits = hex_to_bits(text)
    logger.debug("Decoding {} bits", len(bits))
    parsed = parse_packet(bits)
    if parsed is None:
        raise ParseError("unable to parse packet")
    packet, rest = parsed
    logger.debug("Decoded packet with {} bits left over", len(rest))
    return packet


def fold_packet(packet: Packet, combine: Callable[[Packet, Sequence[_T]], _T]) -> _T:
    """Fold a packet tree bottom up, without recursing.

    Args:
        packet: The root of the tree.
        combine: Called once per packet with the packet and the folded values of its children,
            in order. Literals get an empty sequence.

    Returns:
        The folded value of the root.
    """
    pending: list[tuple[Packet, bool]] = [(packet, False)]
    results: list[_T] = []
    while pending:
        node, expanded = pending.pop()
        if isinstance(node.body, Literal):
            results.append(combine(node, ()))
        elif not expanded:
            pending.append((node, True))
            pending.extend((child, False) for child in reversed(node.body.children))
        else:
            split = len(results) - len(node.body.children)
            values = results[split:]
            del results[split:]
            results.append(combine(node, values))
    return results[0]


def encode_packet(packet: Packet, count_mode: bool = False) -> Bits:
    """Serialize a packet tree back into bits.

    Args:
        packet: The root of the tree.
        count_mode: Frame operator children by count instead of by total bit length.

    Returns:
        The bits of the packet, with no padding.

    Raises:
        EncodeError: If a field does not fit its width, or a body does not match its type id.
    """
    return fold_packet(packet, partial(_encode_node, count_mode=count_mode))


def _encode_node(packet: Packet, encoded_children: Sequence[Bits], count_mode: bool) -> Bits:
    header = encode_unsigned(packet.version, _HEADER_WIDTH) + encode_unsigned(
        packet.type_id, _HEADER_WIDTH
    )

    if isinstance(packet.body, Literal):
        if packet.type_id != LITERAL_TYPE_ID:
            raise EncodeError(f"literal body on type ID {packet.type_id}")
        return header + _encode_literal(packet.body.value)

    if packet.type_id == LITERAL_TYPE_ID:
        raise EncodeError("operator body on the literal type ID")
    children = tuple(chain.from_iterable(encoded_children))
    if count_mode:
        framing = (True,) + encode_unsigned(len(encoded_children), _COUNT_WIDTH)
    else:
        framing = (False,) + encode_unsigned(len(children), _TOTAL_LENGTH_WIDTH)
    return header + framing + children


def _encode_literal(value: int) -> Bits:
    if value < 0:
        raise EncodeError(f"literal {value} is negative")
    nibble_count = max(1, -(-value.bit_length() // 4))
    bits: list[bool] = []
    for index in reversed(range(nibble_count)):
        bits.append(index > 0)
        bits.extend(encode_unsigned(value >> (4 * index) & 0xF, 4))
    return tuple(bits)


__all__ = (
    "LITERAL_TYPE_ID",
    "Literal",
    "Operator",
    "Body",
    "Packet",
    "parse_packet",
    "decode_literal",
    "decode_operator",
    "decode_packet_sequence",
    "decode_transmission",
    "fold_packet",
    "encode_packet",
)
