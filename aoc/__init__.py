from __future__ import annotations

from aoc import bits, day, days, errors, evaluate, packet
from aoc.bits import *
from aoc.day import *
from aoc.days import *
from aoc.errors import *
from aoc.evaluate import *
from aoc.packet import *

__all__ = (
    *bits.__all__,
    *day.__all__,
    *days.__all__,
    *errors.__all__,
    *evaluate.__all__,
    *packet.__all__,
)
