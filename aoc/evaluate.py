from __future__ import annotations

import math
import operator
from typing import Callable, Sequence

from .errors import EvaluationError
from .packet import Literal, Packet, fold_packet

_COMPARISONS: dict[int, tuple[str, Callable[[int, int], bool]]] = {
    5: ("greater than", operator.gt),
    6: ("less than", operator.lt),
    7: ("equal to", operator.eq),
}


def sum_versions(packet: Packet) -> int:
    """Add up the version of every packet in the tree."""
    return fold_packet(packet, lambda node, versions: node.version + sum(versions))


def evaluate_packet(packet: Packet) -> int:
    """Compute the value of a packet tree.

    Children are evaluated first, in order, and then combined by the operator the type id picks:
    sum (0), product (1), minimum (2), maximum (3), greater than (5), less than (6) and
    equal to (7). Comparisons evaluate to 1 or 0.

    Raises:
        EvaluationError: For an unknown type id, a minimum or maximum without children, or a
            comparison that does not have exactly two children.
    """
    return fold_packet(packet, _evaluate_node)


def _evaluate_node(packet: Packet, values: Sequence[int]) -> int:
    if isinstance(packet.body, Literal):
        return packet.body.value
    return _apply_operator(packet.type_id, values)


def _apply_operator(type_id: int, values: Sequence[int]) -> int:
    if type_id == 0:
        return sum(values)
    if type_id == 1:
        return math.prod(values)
    if type_id == 2:
        if not values:
            raise EvaluationError("no subpackets for minimum")
        return min(values)
    if type_id == 3:
        if not values:
            raise EvaluationError("no subpackets for maximum")
        return max(values)
    if type_id in _COMPARISONS:
        name, compare = _COMPARISONS[type_id]
        if len(values) != 2:
            raise EvaluationError(f"{name} comparison needs 2 subpackets, got {len(values)}")
        return int(compare(values[0], values[1]))
    raise EvaluationError(f"invalid type ID {type_id}")


__all__ = ("sum_versions", "evaluate_packet")
