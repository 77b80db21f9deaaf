"""PitchClass: the 12 chromatic pitch classes with cyclic offset arithmetic."""

from __future__ import annotations

from collections.abc import Iterator
from enum import IntEnum
from itertools import count

SEMITONES_PER_OCTAVE = 12

# Display names, index 0 = C (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]


class PitchClass(IntEnum):
    """
    One of the 12 chromatic pitch classes, octave-independent.

    Members follow the chromatic order starting at C, so equality, ordering
    and hashing all come from the integer value. Display names use sharps only.
    """

    C = 0
    Cs = 1  # C#
    D = 2
    Ds = 3  # D#
    E = 4
    F = 5
    Fs = 6  # F#
    G = 7
    Gs = 8  # G#
    A = 9
    As = 10  # A#
    B = 11

    @property
    def name_str(self) -> str:
        """Sharp display name, e.g. 'C#'."""
        return _SHARP_NAMES[self.value]

    def offset_by(self, offset: int) -> PitchClass:
        """Pitch class ``offset`` semitones ahead; negative offsets wrap backwards."""
        return nth_from(self, offset)

    def cycle_from(self) -> Iterator[PitchClass]:
        """
        Yield the chromatic cycle starting at this pitch class, forever.

        Every call returns a fresh iterator. Bound it with ``itertools.islice``.
        """
        return (nth_from(self, n) for n in count())

    @classmethod
    def names(cls) -> list[str]:
        """All display names in chromatic order."""
        return list(_SHARP_NAMES)

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from 'C#' style or member style ('Cs') names."""
        name = name.strip()

        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))

        name_upper = name.upper()
        for member in cls:
            if member.name.upper() == name_upper or member.name_str == name_upper:
                return member

        raise ValueError(f"Unknown pitch class: {name}")


def nth_from(start: PitchClass, n: int) -> PitchClass:
    """
    The ``n``-th element of the chromatic cycle starting at ``start``.

    Python's ``%`` already yields a non-negative remainder for a positive
    modulus, so any integer ``n`` is accepted.
    """
    return PitchClass((start.value + n) % SEMITONES_PER_OCTAVE)
