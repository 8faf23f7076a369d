"""Run-scoped cost and predecessor bookkeeping for a single search."""

from __future__ import annotations

from dataclasses import dataclass
from math import inf
from typing import Dict, Optional

from .grid import Coord


@dataclass(slots=True)
class CellRecord:
    """Best-known costs for one coordinate during a run."""

    g: float = inf
    h: float = 0.0
    predecessor: Optional[Coord] = None

    @property
    def f(self) -> float:
        return self.g + self.h


class SearchState:
    """Mapping of ``Coord`` to :class:`CellRecord`, created lazily.

    A new instance is made for every search so values from an earlier run
    can never leak into the next one.
    """

    def __init__(self) -> None:
        self._records: Dict[Coord, CellRecord] = {}

    def get_or_init(self, coord: Coord, default_g: float = inf) -> CellRecord:
        record = self._records.get(coord)
        if record is None:
            record = CellRecord(g=default_g)
            self._records[coord] = record
        return record

    def get(self, coord: Coord) -> Optional[CellRecord]:
        return self._records.get(coord)

    def update(
        self, coord: Coord, g: float, h: float, predecessor: Optional[Coord]
    ) -> CellRecord:
        record = self.get_or_init(coord)
        record.g = g
        record.h = h
        record.predecessor = predecessor
        return record

    def predecessor_of(self, coord: Coord) -> Optional[Coord]:
        record = self._records.get(coord)
        return record.predecessor if record is not None else None

    def __contains__(self, coord: object) -> bool:
        return coord in self._records

    def __len__(self) -> int:
        return len(self._records)


__all__ = ["CellRecord", "SearchState"]
