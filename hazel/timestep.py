"""Frame time delta."""

from __future__ import annotations


class Timestep(float):
    """Elapsed time in seconds; usable directly as a float."""

    __slots__ = ()

    def __new__(cls, time: float = 0.0) -> "Timestep":
        return super().__new__(cls, time)

    def __float__(self) -> float:
        return float.__float__(self)

    @property
    def seconds(self) -> float:
        return float(self)

    @property
    def milliseconds(self) -> float:
        return float(self) * 1000.0

    def __repr__(self) -> str:
        return f"Timestep({float(self)!r})"