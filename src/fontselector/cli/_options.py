"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


INPUTS_PANEL = "Input Handling"
STYLE_PANEL = "Requested Style"
OUTPUT_PANEL = "Output"
DIAGNOSTICS_PANEL = "Diagnostics"

CatalogArgument = Annotated[
    Path,
    typer.Argument(
        metavar="CATALOG",
        help="YAML catalog listing the candidate fonts.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

FamilyOption = Annotated[
    list[str] | None,
    typer.Option(
        "--family",
        "-f",
        help="Requested family, most preferred first. Repeat for fallbacks.",
        rich_help_panel=INPUTS_PANEL,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        help="YAML file overriding the scoring weights.",
        exists=True,
        dir_okay=False,
        resolve_path=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

BoldOption = Annotated[
    bool | None,
    typer.Option(
        "--bold/--no-bold",
        help="Request (or refuse) a bold face. Unset when omitted.",
        rich_help_panel=STYLE_PANEL,
    ),
]

ItalicOption = Annotated[
    bool | None,
    typer.Option(
        "--italic/--no-italic",
        help="Request (or refuse) an italic face. Unset when omitted.",
        rich_help_panel=STYLE_PANEL,
    ),
]

MonospaceOption = Annotated[
    bool | None,
    typer.Option(
        "--monospace/--no-monospace",
        help="Request (or refuse) a monospaced face. Unset when omitted.",
        rich_help_panel=STYLE_PANEL,
    ),
]

WeightOption = Annotated[
    str | None,
    typer.Option(
        "--weight",
        help="CSS font-weight (e.g. 'bold', 'normal', '600').",
        rich_help_panel=STYLE_PANEL,
    ),
]

StyleOption = Annotated[
    str | None,
    typer.Option(
        "--style",
        help="CSS font-style ('normal', 'italic' or 'oblique').",
        rich_help_panel=STYLE_PANEL,
    ),
]

LimitOption = Annotated[
    int | None,
    typer.Option(
        "--limit",
        "-n",
        min=1,
        help="Only show the first N ranked fonts.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Log selection diagnostics to stderr.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]
