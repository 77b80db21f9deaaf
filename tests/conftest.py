"""
Pytest configuration and shared fixtures.
"""

import pytest

from fretscale.pitch import PitchClass
from fretscale.scale import Scale, ScalePattern
from fretscale.tuning_strategy import Guitar, TuningScheme


@pytest.fixture
def c_major() -> Scale:
    return Scale(PitchClass.C, ScalePattern.MAJOR)


@pytest.fixture
def standard_guitar() -> Guitar:
    """Six strings in fourths from E (E A D G C F), frets 0-2."""
    return Guitar.from_tuning(6, PitchClass.E, 3, TuningScheme.FOURTHS)


@pytest.fixture
def c_major_diagram() -> str:
    """Plain text for C Major on ``standard_guitar``, marker mode."""
    return (
        "SCALE: C Major\n"
        "NOTES: C, D, E, F, G, A, B, C\n"
        "\n"
        "6(F)\t\tO\t|\tO\n"
        "5(C)\t\tC\t|\tO\n"
        "4(G)\t\tO\t|\tO\n"
        "3(D)\t\tO\t|\tO\n"
        "2(A)\t\tO\t|\tO\n"
        "1(E)\t\tO\tO\t|\n"
    )
