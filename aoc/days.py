from __future__ import annotations

import time
from pathlib import Path
from typing import Any, Callable, Coroutine, TypeAlias

from loguru import logger

from . import year2021
from .day import DayResult
from .errors import UnknownDayError

DayRunner: TypeAlias = Callable[[Path | None], Coroutine[Any, Any, DayResult]]

DAYS: dict[int, dict[int, DayRunner]] = {
    2021: year2021.days,
}


def get_day(year: int, day: int) -> DayRunner:
    try:
        return DAYS[year][day]
    except KeyError:
        raise UnknownDayError(f"Unimplemented day {day} of {year}") from None


async def run_day(year: int, day: int, input_path: Path | None = None) -> DayResult:
    """Run one registered day, logging when it starts and how long it took.

    Args:
        year: The event year.
        day: The day of the event.
        input_path: A puzzle input to use instead of the bundled one.

    Returns:
        The answers for both parts.

    Raises:
        UnknownDayError: If no solver is registered for the day.
    """
    runner = get_day(year, day)
    logger.info("Starting day {} of {}", day, year)
    started = time.perf_counter()
    try:
        return await runner(input_path)
    finally:
        logger.info("Time taken: {:.6f} seconds", time.perf_counter() - started)


__all__ = ("DayRunner", "DAYS", "get_day", "run_day")
