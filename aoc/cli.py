from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console

from .days import run_day
from .errors import AocError
from .utils import run_sync

LOG_FORMAT = "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | {message}"

app = typer.Typer(add_completion=False, help="Solves Advent of Code problems.")


class LogLevel(str, Enum):
    """loguru's built-in levels."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def configure_logging(level: LogLevel) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.value, format=LOG_FORMAT)


@app.command()
@run_sync
async def main(
    day: int = typer.Argument(..., help="Chooses which day to run."),
    year: int = typer.Option(2021, "--year", "-y", envvar="AOC_YEAR", help="Event year."),
    input_path: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        exists=True,
        dir_okay=False,
        help="Puzzle input to use instead of the bundled one.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.INFO, envvar="AOC_LOG_LEVEL", case_sensitive=False, help="Minimum log level."
    ),
) -> None:
    configure_logging(log_level)
    try:
        result = await run_day(year, day, input_path)
    except AocError as e:
        logger.error(str(e))
        raise typer.Exit(code=1)

    Console().print(result)


if __name__ == "__main__":
    app()
