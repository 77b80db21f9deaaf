"""fretscale CLI entry point."""

import logging

import click

from fretscale import __version__
from fretscale.fretboard_models import RenderConfig
from fretscale.fretboard_renderer import AnsiCellStyler, PlainCellStyler, render_fretboard
from fretscale.pitch import PitchClass
from fretscale.scale import Scale, ScalePattern
from fretscale.tuning_strategy import DEFAULT_REFERENCE, Guitar, TuningScheme

DEFAULT_FRETS_END = 24

logger = logging.getLogger(__name__)


class PitchClassParamType(click.ParamType):
    """Click parameter accepting 'C#' or 'Cs' style names, any case."""

    name = "note"

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        return "[" + "|".join(PitchClass.names()) + "]"

    def convert(
        self, value: object, param: click.Parameter | None, ctx: click.Context | None
    ) -> PitchClass:
        if isinstance(value, PitchClass):
            return value
        try:
            return PitchClass.parse(str(value))
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


NOTE = PitchClassParamType()


class TuningSchemeParamType(click.ParamType):
    """Click parameter accepting tuning names with underscores or hyphens, any case."""

    name = "tuning"

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        return "[" + "|".join(scheme.value for scheme in TuningScheme) + "]"

    def convert(
        self, value: object, param: click.Parameter | None, ctx: click.Context | None
    ) -> TuningScheme:
        if isinstance(value, TuningScheme):
            return value
        try:
            return TuningScheme.parse(str(value))
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


TUNING = TuningSchemeParamType()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="fretscale")
@click.option("--start-note", type=NOTE, required=True, help="Root note of the scale.")
@click.option(
    "--mode",
    type=click.Choice(ScalePattern.names(), case_sensitive=False),
    required=True,
    help="Scale mode.",
)
@click.option(
    "--string-count",
    type=click.IntRange(min=0),
    required=True,
    help="Number of strings on the guitar.",
)
@click.option(
    "--all-note-names",
    is_flag=True,
    default=False,
    help="Print every scale note by name instead of an 'O' marker.",
)
@click.option(
    "--frets-start",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="First fret to draw (0 = open string).",
)
@click.option(
    "--frets-end",
    type=click.IntRange(min=0),
    default=DEFAULT_FRETS_END,
    show_default=True,
    help="Fret to stop before; also the number of frets on the guitar.",
)
@click.option(
    "--tuning",
    type=TUNING,
    default=TuningScheme.FOURTHS.value,
    show_default=True,
    help="Open-string spacing: perfect fourths or stacked major thirds.",
)
@click.option(
    "--reference-note",
    type=NOTE,
    default=DEFAULT_REFERENCE.name_str,
    show_default=True,
    help="Open note of string 1.",
)
@click.option(
    "--color/--no-color",
    default=None,
    help="Highlight the root note. Defaults to on when writing to a terminal.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug details to stderr.")
def main(
    start_note: PitchClass,
    mode: str,
    string_count: int,
    all_note_names: bool,
    frets_start: int,
    frets_end: int,
    tuning: TuningScheme,
    reference_note: PitchClass,
    color: bool | None,
    verbose: bool,
) -> None:
    """
    Draw a guitar fretboard with the notes of a scale marked on it.

    \b
    Examples:
      fretscale --start-note C --mode Major --string-count 6
      fretscale --start-note G --mode Major --string-count 7 --all-note-names
      fretscale --start-note A --mode major --string-count 6 --tuning scale_centered --frets-end 12
    """
    _configure_logging(verbose)

    try:
        scale = Scale(start_note, ScalePattern.parse(mode))
        guitar = Guitar.from_tuning(string_count, reference_note, frets_end, tuning)
        config = RenderConfig(
            scale=scale,
            guitar=guitar,
            frets_start=frets_start,
            frets_end=frets_end,
            all_note_names=all_note_names,
        )
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    logger.debug("Rendering %s on %d strings, frets %s", scale, string_count, config.fret_window)
    styler = PlainCellStyler() if color is False else AnsiCellStyler()
    click.echo(render_fretboard(config, styler), nl=False, color=color)
