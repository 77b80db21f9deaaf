"""Renderer implementations turning a fretboard document into terminal text."""

from __future__ import annotations

from abc import ABC, abstractmethod

import click

from fretscale.fretboard_builder import build_document
from fretscale.fretboard_models import CellKind, FretboardDocument, FretCell, RenderConfig

OUT_OF_SCALE_MARKER = "|"
SCALE_NOTE_MARKER = "O"
ROOT_COLOR = "bright_yellow"  # ESC[93m


class CellStyler(ABC):
    """Abstract text styler for emphasized cells."""

    @abstractmethod
    def emphasize(self, text: str) -> str:
        """Return ``text`` styled as emphasized."""


class AnsiCellStyler(CellStyler):
    """Highlight with ANSI color escapes."""

    def emphasize(self, text: str) -> str:
        return click.style(text, fg=ROOT_COLOR)


class PlainCellStyler(CellStyler):
    """Leave text untouched, e.g. for pipes and files."""

    def emphasize(self, text: str) -> str:
        return text


class FretboardTextRenderer:
    """
    Render a fretboard document as tab-separated text.

    Layout::

        SCALE: C Major
        NOTES: C, D, E, F, G, A, B, C

        6(E)<TAB><TAB>O<TAB>|<TAB>|
        ...
        1(E)<TAB><TAB>O<TAB>|<TAB>|

    Each row label is followed by a tab, and every cell is preceded by one.
    """

    def __init__(self, styler: CellStyler | None = None) -> None:
        self.styler = styler if styler is not None else AnsiCellStyler()

    def render(self, document: FretboardDocument) -> str:
        lines = [
            f"SCALE: {document.title}",
            f"NOTES: {', '.join(pitch.name_str for pitch in document.notes)}",
            "",
        ]
        for row in document.rows:
            label = f"{row.number}({row.open_pitch.name_str})\t"
            lines.append(label + "".join(f"\t{self.render_cell(cell)}" for cell in row.cells))
        return "\n".join(lines) + "\n"

    def render_cell(self, cell: FretCell) -> str:
        if cell.kind is CellKind.OUT_OF_SCALE:
            return OUT_OF_SCALE_MARKER
        if cell.kind is CellKind.ROOT:
            return self.styler.emphasize(cell.pitch.name_str)
        if cell.kind is CellKind.SCALE_NOTE_NAMED:
            return cell.pitch.name_str
        return SCALE_NOTE_MARKER


def render_fretboard(config: RenderConfig, styler: CellStyler | None = None) -> str:
    """Build and render the diagram for ``config`` in one call."""
    return FretboardTextRenderer(styler).render(build_document(config))
