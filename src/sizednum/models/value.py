from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .display import NumberDisplay


@dataclass(frozen=True)
class SizedInteger:
    """An integer together with the byte width and signedness it was stored with."""
    value: int
    size: int
    signed: bool = False

    def __post_init__(self):
        if self.size <= 0:
            raise ValueError(f"size must be positive, got {self.size}")
        bits = self.size * 8
        lo, hi = (-(1 << (bits - 1)), (1 << (bits - 1)) - 1) if self.signed else (0, (1 << bits) - 1)
        if not (lo <= self.value <= hi):
            kind = "signed" if self.signed else "unsigned"
            raise ValueError(f"{self.value} does not fit in {bits}-bit {kind}")

    @property
    def bits(self) -> int:
        return self.size * 8

    def to_string(self, display: "NumberDisplay") -> str:
        from ..display.render import render
        return render(self, display)


@dataclass(frozen=True)
class SizedFloat:
    value: float
    size: int = 8

    def __post_init__(self):
        if self.size not in (4, 8):
            raise ValueError(f"floats are 4 or 8 bytes, not {self.size}")

    def to_string(self, display: "NumberDisplay") -> str:
        from ..display.render import render
        return render(self, display)


SizedValue = Union[SizedInteger, SizedFloat]
