"""Data models for fretboard diagram rendering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fretscale.pitch import PitchClass
from fretscale.scale import Scale
from fretscale.tuning_strategy import Guitar


class CellKind(Enum):
    """How a single fret position is shown in the diagram."""

    OUT_OF_SCALE = "out_of_scale"
    ROOT = "root"
    SCALE_NOTE_NAMED = "scale_note_named"
    SCALE_NOTE_MARKER = "scale_note_marker"


@dataclass(frozen=True)
class RenderConfig:
    """
    Everything that controls one diagram.

    Frets ``frets_start`` up to, not including, ``frets_end`` are drawn.
    ``frets_end`` defaults to the guitar's fret count and never exceeds it.
    A start past the end is allowed and draws no cells.
    """

    scale: Scale
    guitar: Guitar
    frets_start: int = 0
    frets_end: int | None = None
    all_note_names: bool = False

    def __post_init__(self) -> None:
        if self.frets_start < 0:
            raise ValueError(f"frets_start must be non-negative, got {self.frets_start}")
        if self.frets_end is not None and self.frets_end < 0:
            raise ValueError(f"frets_end must be non-negative, got {self.frets_end}")

    @property
    def fret_window(self) -> range:
        end = self.guitar.fret_count
        if self.frets_end is not None:
            end = min(end, self.frets_end)
        return range(self.frets_start, end)


@dataclass(frozen=True)
class FretCell:
    """One fret position on one string."""

    fret: int
    pitch: PitchClass
    kind: CellKind


@dataclass(frozen=True)
class StringRow:
    """A string's label data and its cells, in fret order."""

    number: int
    open_pitch: PitchClass
    cells: tuple[FretCell, ...]


@dataclass(frozen=True)
class FretboardDocument:
    """Neutral diagram representation consumed by renderers."""

    title: str
    notes: tuple[PitchClass, ...]
    rows: tuple[StringRow, ...]
