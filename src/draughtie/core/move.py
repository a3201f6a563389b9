"""Move value object (PDN-style representation)."""

from __future__ import annotations

from dataclasses import dataclass

from draughtie.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing one complete draughts move.

    ``path`` lists every square the piece stands on, origin first. A quiet
    move has two entries; a capture has one more entry per jump.
    ``captures`` lists the captured squares in jump order.
    """

    path: tuple[Square, ...]
    captures: tuple[Square, ...] = ()

    def __post_init__(self) -> None:
        if len(self.path) < 2:
            raise ValueError(f"Move path needs at least two squares: {self.path!r}")

    @property
    def from_sq(self) -> Square:
        return self.path[0]

    @property
    def to_sq(self) -> Square:
        return self.path[-1]

    @property
    def is_capture(self) -> bool:
        return bool(self.captures)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        if self.captures:
            return "x".join(str(sq) for sq in self.path)
        return f"{self.from_sq}-{self.to_sq}"

    @property
    def short(self) -> str:
        """Short notation: origin and destination only, e.g. ``28x10``."""
        sep = "x" if self.captures else "-"
        return f"{self.from_sq}{sep}{self.to_sq}"
