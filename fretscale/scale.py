"""ScalePattern and Scale: interval patterns applied to a root pitch class."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from fretscale.pitch import SEMITONES_PER_OCTAVE, PitchClass

logger = logging.getLogger(__name__)


class ScalePattern(Enum):
    """
    A named sequence of semitone steps from one scale degree to the next.

    Each value is ``(display_name, intervals)``. A valid pattern is non-empty,
    its steps are positive, and they add up to one octave.
    """

    MAJOR = ("Major", (2, 2, 1, 2, 2, 2, 1))

    @property
    def display_name(self) -> str:
        return self.value[0]

    @property
    def intervals(self) -> tuple[int, ...]:
        return self.value[1]

    @classmethod
    def names(cls) -> list[str]:
        return [pattern.display_name for pattern in cls]

    @classmethod
    def parse(cls, name: str) -> ScalePattern:
        """Look up a pattern by display or member name, ignoring case."""
        wanted = name.strip().lower()
        for pattern in cls:
            if wanted in (pattern.display_name.lower(), pattern.name.lower()):
                return pattern
        raise ValueError(f"Unknown scale mode: {name}")


def _validate_pattern(pattern: ScalePattern) -> None:
    intervals = pattern.intervals
    if not intervals:
        raise ValueError(f"Scale pattern {pattern.display_name} has no intervals")
    if any(step <= 0 for step in intervals):
        raise ValueError(f"Scale pattern {pattern.display_name} has non-positive steps: {intervals}")
    total = sum(intervals)
    if total != SEMITONES_PER_OCTAVE:
        raise ValueError(
            f"Scale pattern {pattern.display_name} must sum to {SEMITONES_PER_OCTAVE} semitones, got {total}"
        )


for _pattern in ScalePattern:
    _validate_pattern(_pattern)


@dataclass(frozen=True)
class Scale:
    """
    A root pitch class plus a scale pattern.

    Examples:
        Scale(PitchClass.C, ScalePattern.MAJOR) = C Major
        Scale(PitchClass.Fs, ScalePattern.MAJOR) = F# Major
    """

    root: PitchClass
    pattern: ScalePattern

    def notes_list(self) -> list[PitchClass]:
        """
        Scale degrees in order, walking each interval of the pattern once.

        The root comes first and, for full-octave patterns, last as well:
        C Major gives C D E F G A B C.
        """
        notes = [self.root]
        for interval in self.pattern.intervals:
            notes.append(notes[-1].offset_by(interval))
        return notes

    def notes(self) -> frozenset[PitchClass]:
        """Unique pitch classes of the scale, for membership tests."""
        members = frozenset(self.notes_list())
        logger.debug("Scale %s has %d distinct pitch classes", self, len(members))
        return members

    def __str__(self) -> str:
        return f"{self.root.name_str} {self.pattern.display_name}"
