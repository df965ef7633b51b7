"""Requested style characteristics and their normalisation per family.

Tristate
: Every style flag distinguishes "explicitly off" from "not specified". Only
  the latter lets the family name fill the gap (``Arial Bold`` implies bold).

FontCharacteristics
: Immutable bold/italic/monospace request. Use the ``with_*`` helpers to
  derive variants.

normalize_style
: Produces the style attached to one family preference.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


MONOSPACE_FAMILY = "monospace"

_BOLD_KEYWORDS = frozenset({"bold", "bolder"})
_NOT_BOLD_KEYWORDS = frozenset({"normal", "lighter"})
_ITALIC_KEYWORDS = frozenset({"italic", "oblique"})
_MIN_WEIGHT = 100
_MAX_WEIGHT = 900
_BOLD_THRESHOLD = 500


class Tristate(Enum):
    UNSET = "unset"
    FALSE = "false"
    TRUE = "true"

    @classmethod
    def from_bool(cls, value: bool | None) -> Tristate:
        if value is None:
            return cls.UNSET
        return cls.TRUE if value else cls.FALSE


@dataclass(frozen=True, slots=True)
class FontCharacteristics:
    """Bold, italic and monospace intent for a font request."""

    bold: Tristate = Tristate.UNSET
    italic: Tristate = Tristate.UNSET
    monospace: Tristate = Tristate.UNSET

    @classmethod
    def of(
        cls,
        *,
        bold: bool | None = None,
        italic: bool | None = None,
        monospace: bool | None = None,
    ) -> FontCharacteristics:
        """Build characteristics from optional booleans (``None`` means unset)."""
        return cls(
            bold=Tristate.from_bool(bold),
            italic=Tristate.from_bool(italic),
            monospace=Tristate.from_bool(monospace),
        )

    @classmethod
    def from_css(
        cls,
        *,
        font_weight: str | int | None = None,
        font_style: str | None = None,
        monospace: bool | None = None,
    ) -> FontCharacteristics:
        """Build characteristics from CSS ``font-weight``/``font-style`` values."""
        return cls(
            bold=_parse_weight(font_weight),
            italic=_parse_style(font_style),
            monospace=Tristate.from_bool(monospace),
        )

    def is_undefined(self) -> bool:
        """Return True when neither bold nor italic was specified."""
        return self.bold is Tristate.UNSET and self.italic is Tristate.UNSET

    def is_bold(self) -> bool:
        return self.bold is Tristate.TRUE

    def is_italic(self) -> bool:
        return self.italic is Tristate.TRUE

    def is_monospace(self) -> bool:
        return self.monospace is Tristate.TRUE

    def with_bold(self, value: bool) -> FontCharacteristics:
        return replace(self, bold=Tristate.from_bool(value))

    def with_italic(self, value: bool) -> FontCharacteristics:
        return replace(self, italic=Tristate.from_bool(value))

    def with_monospace(self, value: bool) -> FontCharacteristics:
        return replace(self, monospace=Tristate.from_bool(value))


def _parse_weight(value: str | int | None) -> Tristate:
    if value is None or isinstance(value, bool):
        return Tristate.UNSET
    if isinstance(value, int):
        weight = value
    else:
        text = value.strip().lower()
        if text in _BOLD_KEYWORDS:
            return Tristate.TRUE
        if text in _NOT_BOLD_KEYWORDS:
            return Tristate.FALSE
        if not text.isdigit():
            return Tristate.UNSET
        weight = int(text)
    weight = min(max(weight, _MIN_WEIGHT), _MAX_WEIGHT)
    return Tristate.from_bool(weight > _BOLD_THRESHOLD)


def _parse_style(value: str | None) -> Tristate:
    if value is None:
        return Tristate.UNSET
    text = value.strip().lower()
    if text in _ITALIC_KEYWORDS:
        return Tristate.TRUE
    if text == "normal":
        return Tristate.FALSE
    return Tristate.UNSET


def normalize_style(
    family: str, characteristics: FontCharacteristics | None = None
) -> FontCharacteristics:
    """Return the style to score ``family`` with.

    Bold and italic are read from the family name only when the request left
    both unset. The literal ``monospace`` family always forces monospace.
    """
    style = characteristics or FontCharacteristics()
    lowered = family.lower()
    if style.is_undefined():
        if "bold" in lowered:
            style = style.with_bold(True)
        if "italic" in lowered or "oblique" in lowered:
            style = style.with_italic(True)
    if lowered == MONOSPACE_FAMILY:
        style = style.with_monospace(True)
    return style


__all__ = [
    "FontCharacteristics",
    "MONOSPACE_FAMILY",
    "Tristate",
    "normalize_style",
]
