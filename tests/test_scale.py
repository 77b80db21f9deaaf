"""Unit tests for ScalePattern and Scale."""

import pytest

from fretscale.pitch import PitchClass
from fretscale.scale import Scale, ScalePattern


def test_major_intervals() -> None:
    assert ScalePattern.MAJOR.intervals == (2, 2, 1, 2, 2, 2, 1)
    assert sum(ScalePattern.MAJOR.intervals) == 12


def test_pattern_parse_ignores_case() -> None:
    assert ScalePattern.parse("Major") is ScalePattern.MAJOR
    assert ScalePattern.parse("major") is ScalePattern.MAJOR
    assert ScalePattern.parse("MAJOR") is ScalePattern.MAJOR


def test_pattern_parse_rejects_unknown_mode() -> None:
    with pytest.raises(ValueError, match="Unknown scale mode"):
        ScalePattern.parse("Lydian")


def test_c_major_notes_list(c_major: Scale) -> None:
    assert c_major.notes_list() == [
        PitchClass.C,
        PitchClass.D,
        PitchClass.E,
        PitchClass.F,
        PitchClass.G,
        PitchClass.A,
        PitchClass.B,
        PitchClass.C,
    ]


def test_fs_major_notes_list() -> None:
    names = [pc.name_str for pc in Scale(PitchClass.Fs, ScalePattern.MAJOR).notes_list()]
    assert names == ["F#", "G#", "A#", "B", "C#", "D#", "F", "F#"]


@pytest.mark.parametrize("root", list(PitchClass))
def test_major_notes_list_closes_the_octave(root: PitchClass) -> None:
    notes = Scale(root, ScalePattern.MAJOR).notes_list()
    assert len(notes) == 8
    assert notes[0] == root
    assert notes[-1] == root


@pytest.mark.parametrize("root", list(PitchClass))
def test_major_notes_set(root: PitchClass) -> None:
    scale = Scale(root, ScalePattern.MAJOR)
    notes = scale.notes()
    assert root in notes
    assert len(notes) == 7
    assert notes == frozenset(scale.notes_list())
    assert notes <= frozenset(PitchClass)


def test_scale_str(c_major: Scale) -> None:
    assert str(c_major) == "C Major"
    assert str(Scale(PitchClass.As, ScalePattern.MAJOR)) == "A# Major"
