from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console, ConsoleOptions, RenderResult
from rich.style import Style
from rich.table import Table


@dataclass(frozen=True)
class PartResult:
    """The answer to one part of a day, or `None` when the part has not been solved yet."""

    answer: str | None = None

    @classmethod
    def success(cls, answer: object) -> PartResult:
        return cls(str(answer))

    @classmethod
    def not_implemented(cls) -> PartResult:
        return cls()

    @property
    def is_implemented(self) -> bool:
        return self.answer is not None

    def __str__(self) -> str:
        return self.answer if self.answer is not None else "Not implemented"


@dataclass(frozen=True)
class DayResult:
    part_1: PartResult
    part_2: PartResult

    def __str__(self) -> str:
        return f"Part 1: {self.part_1}\nPart 2: {self.part_2}"

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column(style=Style(color="blue", bold=True), no_wrap=True)
        table.add_column(overflow="fold")
        for number, part in enumerate((self.part_1, self.part_2), 1):
            style = Style(color="green") if part.is_implemented else Style(color="yellow")
            table.add_row(f"Part {number}", str(part), style=style)
        yield table


__all__ = ("PartResult", "DayResult")
