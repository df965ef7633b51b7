"""Typer application wiring for the fontselector CLI."""

from __future__ import annotations

import logging
from typing import Annotated

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
import typer

from fontselector.catalog import load_catalog
from fontselector.characteristics import FontCharacteristics, normalize_style
from fontselector.config import load_config
from fontselector.descriptor import FontCandidate
from fontselector.diagnostics import LoggingEmitter
from fontselector.exceptions import FontSelectionError, exception_hint, exception_messages
from fontselector.selector import FontPreference, rank

from ._options import (
    BoldOption,
    CatalogArgument,
    ConfigOption,
    FamilyOption,
    ItalicOption,
    LimitOption,
    MonospaceOption,
    StyleOption,
    VerboseOption,
    WeightOption,
)


console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

app = typer.Typer(
    help="Rank fonts against a family preference list and a requested style.",
    context_settings={"help_option_names": ["--help"]},
    no_args_is_help=True,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _characteristics(
    bold: bool | None,
    italic: bool | None,
    monospace: bool | None,
    weight: str | None,
    style: str | None,
) -> FontCharacteristics:
    characteristics = FontCharacteristics.from_css(
        font_weight=weight, font_style=style, monospace=monospace
    )
    if bold is not None:
        characteristics = characteristics.with_bold(bold)
    if italic is not None:
        characteristics = characteristics.with_italic(italic)
    return characteristics


def _flag(value: bool) -> str:
    return "yes" if value else "-"


def _fail(exc: FontSelectionError, verbose: bool) -> typer.Exit:
    messages = exception_messages(exc) or [type(exc).__name__]
    err_console.print(f"[bold red]error:[/bold red] {escape(messages[0])}")
    hint = exception_hint(exc)
    if verbose and hint and hint != messages[0]:
        err_console.print(f"[dim]caused by: {escape(hint)}[/dim]")
    return typer.Exit(code=1)


def _font_row(position: int, candidate: FontCandidate, scores: tuple[int, ...]) -> list[str]:
    descriptor = candidate.descriptor
    return [
        str(position),
        descriptor.family_name,
        candidate.alias or "-",
        str(descriptor.font_weight),
        _flag(descriptor.bold),
        _flag(descriptor.italic),
        _flag(descriptor.is_monospace),
        " ".join(str(score) for score in scores),
    ]


def _fonts_table(title: str, score_header: str) -> Table:
    table = Table(title=title, box=box.SQUARE, header_style="bold cyan")
    table.add_column("#", justify="right")
    table.add_column("Family", style="magenta")
    table.add_column("Alias", style="green")
    table.add_column("Weight", justify="right")
    table.add_column("Bold")
    table.add_column("Italic")
    table.add_column("Mono")
    table.add_column(score_header, justify="right")
    return table


@app.command("rank")
def rank_command(
    catalog: CatalogArgument,
    family: FamilyOption = None,
    bold: BoldOption = None,
    italic: ItalicOption = None,
    monospace: MonospaceOption = None,
    weight: WeightOption = None,
    style: StyleOption = None,
    config: ConfigOption = None,
    limit: LimitOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Rank every font of CATALOG from best to worst match."""
    _configure_logging(verbose)
    emitter = LoggingEmitter(debug_enabled=verbose)
    characteristics = _characteristics(bold, italic, monospace, weight, style)
    try:
        settings = load_config(config)
        candidates = load_catalog(catalog, emitter=emitter)
        selector = rank(
            candidates,
            family or [],
            characteristics,
            weights=settings.weights,
            emitter=emitter,
        )
    except FontSelectionError as exc:
        raise _fail(exc, verbose) from exc

    requested = ", ".join(family or []) or "any family"
    table = _fonts_table(f"Ranking for {requested}", "Scores")
    for position, candidate in enumerate(selector.fonts[:limit], start=1):
        table.add_row(*_font_row(position, candidate, selector.scores(candidate)))
    console.print(table)
    console.print(f"Best match: {selector.best_match().display_name}")


@app.command("score")
def score_command(
    catalog: CatalogArgument,
    family: Annotated[str, typer.Argument(help="Requested family.")],
    bold: BoldOption = None,
    italic: ItalicOption = None,
    monospace: MonospaceOption = None,
    weight: WeightOption = None,
    style: StyleOption = None,
    fallback: Annotated[
        bool,
        typer.Option(
            "--fallback/--no-fallback",
            help="Score FAMILY as the last preference (style always counts).",
        ),
    ] = True,
    config: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the similarity of every font of CATALOG to a single preference."""
    _configure_logging(verbose)
    characteristics = _characteristics(bold, italic, monospace, weight, style)
    try:
        settings = load_config(config)
        candidates = load_catalog(catalog, emitter=LoggingEmitter(debug_enabled=verbose))
    except FontSelectionError as exc:
        raise _fail(exc, verbose) from exc

    preference = FontPreference(family, normalize_style(family, characteristics), fallback)
    table = _fonts_table(f"Similarity to {family}", "Score")
    for position, candidate in enumerate(candidates, start=1):
        score = preference.score(candidate, settings.weights)
        table.add_row(*_font_row(position, candidate, (score,)))
    console.print(table)


def main() -> None:
    """Entry point compatible with console scripts."""
    app()


__all__ = ["app", "main"]
