from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from aoc.bits import bits_to_hex
from aoc.day import DayResult, PartResult
from aoc.days import get_day, run_day
from aoc.errors import ParseError, UnknownDayError
from aoc.packet import Literal, Operator, Packet, encode_packet
from aoc.utils import read_input
from aoc.year2021 import day16


@pytest.mark.parametrize(
    ("challenge", "text", "result"),
    (
        (day16.part_1, "8A004A801A8002F478", 16),
        (day16.part_1, "620080001611562C8802118E34", 12),
        (day16.part_1, "C0015000016115A2E0802F182340", 23),
        (day16.part_1, "A0016C880162017C3686B18A3D4780", 31),
        (day16.part_2, "C200B40A82", 3),
        (day16.part_2, "04005AC33890", 54),
        (day16.part_2, "880086C3E88112", 7),
        (day16.part_2, "CE00C43D881120", 9),
        (day16.part_2, "D8005AC2A8F0", 1),
        (day16.part_2, "F600BC2D8F", 0),
        (day16.part_2, "9C005AC2F8F0", 0),
        (day16.part_2, "9C0141080250320F1802104A08", 1),
    ),
)
def test_day_16_samples(challenge: Callable[[str], int], text: str, result: int) -> None:
    assert challenge(text) == result


def test_day_16_bad_input() -> None:
    with pytest.raises(ParseError, match="unable to parse input"):
        day16.part_1("C200B40A8?")
    with pytest.raises(ParseError, match="unable to parse packet"):
        day16.part_2("1")


def test_day_16_deeply_nested_transmission() -> None:
    packet = Packet(3, 4, Literal(9))
    for _ in range(1500):
        packet = Packet(1, 0, Operator((packet,)))
    text = bits_to_hex(encode_packet(packet, count_mode=True))
    assert day16.part_1(text) == 1503
    assert day16.part_2(text) == 9


@pytest.mark.asyncio
async def test_day_16_bundled_input() -> None:
    result = await day16.run()
    assert result == DayResult(
        PartResult.success("Version sum is 31"),
        PartResult.success("Evaluated value is 54"),
    )


@pytest.mark.asyncio
async def test_day_16_input_path(tmp_path: Path) -> None:
    input_path = tmp_path / "day16.txt"
    input_path.write_text("c200b40a82\n")
    result = await run_day(2021, 16, input_path)
    assert str(result.part_2) == "Evaluated value is 3"


@pytest.mark.asyncio
async def test_unknown_day() -> None:
    with pytest.raises(UnknownDayError, match="Unimplemented day 1 of 2021"):
        await run_day(2021, 1)
    with pytest.raises(UnknownDayError):
        get_day(1999, 16)


def test_part_result() -> None:
    assert str(PartResult.not_implemented()) == "Not implemented"
    assert not PartResult.not_implemented().is_implemented
    result = DayResult(PartResult.success(1), PartResult())
    assert str(result) == "Part 1: 1\nPart 2: Not implemented"


@pytest.mark.asyncio
async def test_read_input_rejects_binary(tmp_path: Path) -> None:
    input_path = tmp_path / "day16.txt"
    input_path.write_bytes(b"\xff\xfeC200")
    with pytest.raises(ParseError, match="unable to parse input"):
        await read_input(input_path)
