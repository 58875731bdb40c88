"""Run-time statistics collected across the solver."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from enum import IntEnum


@dataclass
class ValueStats:
    """Running maximum, sum and count of reported values."""

    max: float = 0
    sum: float = 0
    count: int = 0

    def report(self, value: float) -> None:
        self.max = max(self.max, value)
        self.sum += value
        self.count += 1

    @property
    def average(self) -> float:
        if not self.count:
            return 0
        if isinstance(self.sum, int):
            return self.sum // self.count
        return self.sum / self.count


class ImageType(IntEnum):
    UNDEFINED = 0
    MOSTLY_BOUNDARY = 1
    MOSTLY_EMPTY = 2
    MOSTLY_FILLED = 3
    FULLY_BOUNDARY = 4
    FULLY_EMPTY = 5
    FULLY_FILLED = 6

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")


@dataclass
class ImageStats:
    """Counts of sampling images by type."""

    counts: list[int] = field(default_factory=lambda: [0] * len(ImageType))

    def report(self, image_type: ImageType) -> None:
        self.counts[int(image_type)] += 1

    def percentage(self, image_type: ImageType) -> float:
        total = sum(self.counts)
        if total == 0:
            return math.nan
        return self.counts[int(image_type)] / total


@dataclass(frozen=True, order=True)
class PolytopeFaceKey:
    """Polytope name and face dimension, ordered by name then dimension."""

    name: str
    dims: int


@dataclass
class Stats:
    polytope_faces_count: dict[PolytopeFaceKey, int] = field(default_factory=dict)
    pattern_convex_parts_count: ValueStats = field(default_factory=ValueStats)
    geometry_elements_count: ValueStats = field(default_factory=ValueStats)

    grid_size: ValueStats = field(default_factory=ValueStats)
    sampling_size: ValueStats = field(default_factory=ValueStats)
    sampling_to_grid_ratio: ValueStats = field(default_factory=ValueStats)

    images: ImageStats = field(default_factory=ImageStats)

    inscriber_steps: int = 0
    objective_calls: int = 0

    def reset(self) -> None:
        """Return every counter to its initial state."""
        fresh = Stats()
        for item in fields(self):
            setattr(self, item.name, getattr(fresh, item.name))


_GLOBAL_STATS = Stats()


def global_stats() -> Stats:
    """The process-wide statistics collector."""
    return _GLOBAL_STATS