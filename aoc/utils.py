from __future__ import annotations

import asyncio
import functools
from pathlib import Path
from typing import Any, Callable, Coroutine, ParamSpec, TypeVar

from .errors import ParseError

_P = ParamSpec("_P")
_T = TypeVar("_T")


def run_sync(f: Callable[_P, Coroutine[Any, Any, _T]]) -> Callable[_P, _T]:
    """Given a coroutine function, return a new function that runs it to completion with asyncio.

    This is what lets an asynchronous function act as the entry point of a `Typer` CLI.

    Args:
        f: The coroutine function to run synchronously.

    Returns:
        A new function that runs the original one with `asyncio.run`.
    """

    @functools.wraps(f)
    def decorated(*args: _P.args, **kwargs: _P.kwargs) -> _T:
        return asyncio.run(f(*args, **kwargs))

    return decorated


async def read_input(path: Path) -> str:
    """Read a puzzle input file in a worker thread so the event loop is not blocked.

    Raises:
        ParseError: If the file is not UTF-8 text.
    """
    try:
        return await asyncio.to_thread(path.read_text, encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"unable to parse input: {path} is not UTF-8 text ({e.reason})") from e


__all__ = ("run_sync", "read_input")
