"""FretboardBuilder: decides what every fret position of a diagram shows."""

from __future__ import annotations

import logging
from collections.abc import Set

import numpy as np

from fretscale.fretboard_models import (
    CellKind,
    FretboardDocument,
    FretCell,
    RenderConfig,
    StringRow,
)
from fretscale.pitch import SEMITONES_PER_OCTAVE, PitchClass

logger = logging.getLogger(__name__)


def classify_cell(
    pitch: PitchClass,
    scale_root: PitchClass,
    scale_notes: Set[PitchClass],
    all_note_names: bool,
) -> CellKind:
    """
    Pick the display kind for one sounding pitch.

    Precedence: outside the scale, then the root, then named or marked
    scale notes depending on ``all_note_names``.
    """
    if pitch not in scale_notes:
        return CellKind.OUT_OF_SCALE
    if pitch == scale_root:
        return CellKind.ROOT
    if all_note_names:
        return CellKind.SCALE_NOTE_NAMED
    return CellKind.SCALE_NOTE_MARKER


def pitch_grid(open_strings: tuple[PitchClass, ...], frets: range) -> np.ndarray:
    """
    Sounding pitch-class values for every (string, fret) pair.

    Fret ``f`` on an open string ``s`` sounds the ``f``-th element of the
    chromatic cycle from ``s``, so each entry equals ``nth_from(s, f)``;
    the whole grid is one ``(s + f) % 12`` array operation.

    Returns:
        Integer array of shape (len(open_strings), len(frets)).
    """
    opens = np.array([int(pitch) for pitch in open_strings], dtype=np.int64)
    fret_numbers = np.arange(frets.start, frets.stop, dtype=np.int64)
    return (opens[:, np.newaxis] + fret_numbers[np.newaxis, :]) % SEMITONES_PER_OCTAVE


def build_document(config: RenderConfig) -> FretboardDocument:
    """
    Build the neutral diagram for a render configuration.

    Rows run from the highest-numbered string down to string 1; cells run
    from the first to the last fret of the window.
    """
    scale = config.scale
    scale_notes = scale.notes()
    frets = config.fret_window
    open_strings = config.guitar.strings

    grid = pitch_grid(open_strings, frets)
    logger.debug("Pitch grid shape %s for frets %d..%d", grid.shape, frets.start, frets.stop)

    rows: list[StringRow] = []
    for index in reversed(range(len(open_strings))):
        cells: list[FretCell] = []
        for fret, value in zip(frets, grid[index]):
            pitch = PitchClass(int(value))
            kind = classify_cell(pitch, scale.root, scale_notes, config.all_note_names)
            cells.append(FretCell(fret=fret, pitch=pitch, kind=kind))
        rows.append(StringRow(number=index + 1, open_pitch=open_strings[index], cells=tuple(cells)))

    return FretboardDocument(
        title=str(scale),
        notes=tuple(scale.notes_list()),
        rows=tuple(rows),
    )
