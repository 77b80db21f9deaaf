"""fretscale: scale diagrams on a text guitar fretboard."""

__version__ = "0.1.0"
