from __future__ import annotations

from . import day16

days = {16: day16.run}

__all__ = ("days",)
