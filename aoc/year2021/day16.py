from __future__ import annotations

from pathlib import Path

from ..day import DayResult, PartResult
from ..evaluate import evaluate_packet, sum_versions
from ..packet import decode_transmission
from ..utils import read_input

INPUT_PATH = Path(__file__).parent / "inputs/day16.txt"


def part_1(text: str) -> int:
    """
    --- Day 16: Packet Decoder ---

    The transmission is a single packet in hexadecimal, which may hold other packets. What do
    you get if you add up the version numbers in all packets?
    """
    return sum_versions(decode_transmission(text))


def part_2(text: str) -> int:
    """
    --- Part Two ---

    What do you get if you evaluate the expression represented by your hexadecimal-encoded
    BITS transmission?
    """
    return evaluate_packet(decode_transmission(text))


async def run(input_path: Path | None = None) -> DayResult:
    text = await read_input(input_path or INPUT_PATH)
    return DayResult(
        PartResult.success(f"Version sum is {part_1(text)}"),
        PartResult.success(f"Evaluated value is {part_2(text)}"),
    )
