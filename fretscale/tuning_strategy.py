"""Tuning schemes: derive a guitar's open-string pitch classes."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from fretscale.pitch import PitchClass, nth_from

logger = logging.getLogger(__name__)

# ── Interval constants ──────────────────────────────────────────────────────
PERFECT_FOURTH = 5  # semitones between adjacent strings in fourths tuning
MAJOR_THIRD = 4  # semitones between adjacent strings in scale-centered tuning

DEFAULT_REFERENCE = PitchClass.E  # lowest string of a standard guitar


class TuningScheme(str, Enum):
    """Supported rules for spacing a guitar's open strings."""

    FOURTHS = "fourths"
    SCALE_CENTERED = "scale_centered"

    @classmethod
    def parse(cls, name: str) -> TuningScheme:
        """Accept 'fourths', 'scale_centered' or 'scale-centered', any case."""
        wanted = name.strip().lower().replace("-", "_")
        for scheme in cls:
            if scheme.value == wanted:
                return scheme
        raise ValueError(f"Unknown tuning: {name}")


# ── Per-scheme derivations ───────────────────────────────────────────────────

def _fourths(string_count: int, reference: PitchClass) -> list[PitchClass]:
    """Every fifth element of the chromatic cycle from the reference: E A D G B E."""
    return [nth_from(reference, PERFECT_FOURTH * i) for i in range(string_count)]


def _scale_centered(string_count: int, reference: PitchClass) -> list[PitchClass]:
    """
    Stack major thirds on top of the reference: C E G# C.

    The first string is always the reference itself.
    """
    strings: list[PitchClass] = []
    current = reference
    for _ in range(string_count):
        strings.append(current)
        current = current.offset_by(MAJOR_THIRD)
    return strings


_DERIVATIONS: dict[TuningScheme, Callable[[int, PitchClass], list[PitchClass]]] = {
    TuningScheme.FOURTHS: _fourths,
    TuningScheme.SCALE_CENTERED: _scale_centered,
}


def derive_strings(
    scheme: TuningScheme,
    string_count: int,
    reference: PitchClass = DEFAULT_REFERENCE,
) -> list[PitchClass]:
    """
    Derive the open-string pitch classes for a tuning scheme, lowest string first.

    Args:
        scheme:       Which spacing rule to apply.
        string_count: Number of strings; 0 yields an empty tuning.
        reference:    Pitch class of the first (lowest) string.

    Returns:
        Exactly ``string_count`` pitch classes. Values repeat once the count
        runs past the cycle length; that is expected, not an error.

    Raises:
        ValueError: If ``string_count`` is negative.
    """
    if string_count < 0:
        raise ValueError(f"string_count must be non-negative, got {string_count}")

    strings = _DERIVATIONS[scheme](string_count, reference)
    logger.debug(
        "Derived %s tuning from %s: %s",
        scheme.value,
        reference.name_str,
        " ".join(pitch.name_str for pitch in strings),
    )
    return strings


@dataclass(frozen=True)
class Guitar:
    """
    An instrument to draw: open strings (lowest first) and frets per string.

    Attributes:
        strings:    Open-string pitch classes, storage order low to high.
        fret_count: Number of notes available on each string.
    """

    strings: tuple[PitchClass, ...]
    fret_count: int

    def __post_init__(self) -> None:
        if self.fret_count < 0:
            raise ValueError(f"fret_count must be non-negative, got {self.fret_count}")

    @classmethod
    def from_tuning(
        cls,
        string_count: int,
        reference: PitchClass,
        fret_count: int,
        scheme: TuningScheme,
    ) -> Guitar:
        return cls(
            strings=tuple(derive_strings(scheme, string_count, reference)),
            fret_count=fret_count,
        )
