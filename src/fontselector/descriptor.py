"""Read-only font facts consumed by the ranking core."""

from __future__ import annotations

from dataclasses import dataclass


BOLD_WEIGHT_THRESHOLD = 500
DEFAULT_WEIGHT = 400

# Order matters: compound names must be checked before the plain "bold".
_WEIGHT_KEYWORDS: tuple[tuple[str, int], ...] = (
    ("extralight", 200),
    ("ultralight", 200),
    ("extrabold", 800),
    ("ultrabold", 800),
    ("semibold", 600),
    ("demibold", 600),
    ("black", 900),
    ("heavy", 900),
    ("bold", 700),
    ("medium", 500),
    ("light", 300),
    ("thin", 100),
)


@dataclass(frozen=True, slots=True)
class FontDescriptor:
    """Facts about one physical font as reported by the font parser."""

    family_name: str
    is_bold: bool = False
    is_italic: bool = False
    is_monospace: bool = False
    font_weight: int = DEFAULT_WEIGHT
    italic_angle: float = 0.0
    font_name: str | None = None

    @property
    def family_name_lower(self) -> str:
        return self.family_name.lower()

    @property
    def bold(self) -> bool:
        """Return True when the flag or the numeric weight marks the font bold."""
        return self.is_bold or self.font_weight > BOLD_WEIGHT_THRESHOLD

    @property
    def italic(self) -> bool:
        """Return True when the flag or a negative italic angle marks the font italic."""
        return self.is_italic or self.italic_angle < 0


@dataclass(frozen=True, slots=True)
class FontCandidate:
    """A font offered for selection, optionally registered under an alias.

    When ``alias`` is set it replaces the descriptor family for name matching;
    the descriptor family is then never looked at.
    """

    descriptor: FontDescriptor
    alias: str | None = None

    @property
    def family_key(self) -> str:
        """Return the lower-cased name used for family equality."""
        if self.alias is not None:
            return self.alias.lower()
        return self.descriptor.family_name_lower

    @property
    def display_name(self) -> str:
        if self.alias is not None:
            return f"{self.alias} ({self.descriptor.family_name})"
        return self.descriptor.family_name


def _style_key(value: str | None) -> str:
    text = (value or "Regular").strip().casefold() or "regular"
    return "".join(ch for ch in text if ch not in {" ", "-", "_"})


def weight_from_style(style: str | None) -> int:
    """Map a style name such as ``SemiBold Italic`` to a numeric weight."""
    key = _style_key(style)
    for keyword, weight in _WEIGHT_KEYWORDS:
        if keyword in key:
            return weight
    return DEFAULT_WEIGHT


def descriptor_from_style(
    family: str,
    style: str | None = None,
    *,
    monospace: bool = False,
    font_name: str | None = None,
) -> FontDescriptor:
    """Build a descriptor from a family and a fontconfig-like style name."""
    key = _style_key(style)
    return FontDescriptor(
        family_name=family,
        is_bold="bold" in key,
        is_italic="italic" in key or "oblique" in key,
        is_monospace=monospace,
        font_weight=weight_from_style(style),
        font_name=font_name,
    )


__all__ = [
    "BOLD_WEIGHT_THRESHOLD",
    "DEFAULT_WEIGHT",
    "FontCandidate",
    "FontDescriptor",
    "descriptor_from_style",
    "weight_from_style",
]
