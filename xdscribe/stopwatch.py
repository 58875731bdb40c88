"""Named, indexed wall-clock measurements for profiling."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import TextIO

MAX_MEASUREMENTS = 10
MAX_NAME_LENGTH = 20


@dataclass
class Measurement:
    name: str = ""
    call_count: int = 0
    runtime_seconds: float = 0.0


_measurements = [Measurement() for _ in range(MAX_MEASUREMENTS)]


def measurement(index: int) -> Measurement:
    """The measurement kept in slot ``index``."""
    if not 0 <= index < MAX_MEASUREMENTS:
        raise IndexError(f"measurement index {index} out of range")
    return _measurements[index]


def reset_measurements() -> None:
    """Forget all measurements."""
    _measurements[:] = [Measurement() for _ in range(MAX_MEASUREMENTS)]


def dump(out: TextIO) -> None:
    """Write all named measurements to ``out``."""
    out.write("Stopwatch measurements: \n\n")
    for item in _measurements:
        if not item.name:
            continue
        out.write(f"  {item.name} : {item.call_count} ~ {item.runtime_seconds:g} s\n")


class Stopwatch:
    """Context manager adding the time spent in its block to a measurement slot."""

    def __init__(self, index: int, name: str) -> None:
        slot = measurement(index)
        name = name[:MAX_NAME_LENGTH]
        if slot.name:
            if slot.name != name:
                raise ValueError(
                    f"measurement {index} is named {slot.name!r}, not {name!r}"
                )
        else:
            slot.name = name
        self._slot = slot
        self._start_ns: int | None = None

    def __enter__(self) -> "Stopwatch":
        self._start_ns = time.perf_counter_ns()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        elapsed_us = (time.perf_counter_ns() - self._start_ns) // 1000
        self._slot.call_count += 1
        self._slot.runtime_seconds += elapsed_us / 1e6
        return None