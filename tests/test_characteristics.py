from __future__ import annotations

import pytest

from fontselector.characteristics import FontCharacteristics, Tristate, normalize_style


def test_default_characteristics_are_unset() -> None:
    style = FontCharacteristics()
    assert style.is_undefined()
    assert not style.is_bold()
    assert not style.is_italic()
    assert not style.is_monospace()


def test_explicit_false_is_not_undefined() -> None:
    style = FontCharacteristics.of(bold=False)
    assert style.bold is Tristate.FALSE
    assert not style.is_undefined()


def test_with_helpers_return_new_values() -> None:
    style = FontCharacteristics()
    bold = style.with_bold(True)
    assert bold.is_bold()
    assert style.bold is Tristate.UNSET


@pytest.mark.parametrize(
    ("weight", "expected"),
    [
        ("bold", Tristate.TRUE),
        ("Bolder", Tristate.TRUE),
        ("normal", Tristate.FALSE),
        ("lighter", Tristate.FALSE),
        ("600", Tristate.TRUE),
        (" 500 ", Tristate.FALSE),
        (400, Tristate.FALSE),
        (950, Tristate.TRUE),
        ("heavy", Tristate.UNSET),
        (None, Tristate.UNSET),
    ],
)
def test_css_font_weight(weight, expected) -> None:
    assert FontCharacteristics.from_css(font_weight=weight).bold is expected


@pytest.mark.parametrize(
    ("style", "expected"),
    [
        ("italic", Tristate.TRUE),
        ("Oblique", Tristate.TRUE),
        ("normal", Tristate.FALSE),
        ("slanted", Tristate.UNSET),
        (None, Tristate.UNSET),
    ],
)
def test_css_font_style(style, expected) -> None:
    assert FontCharacteristics.from_css(font_style=style).italic is expected


def test_normalize_infers_bold_and_italic_from_family() -> None:
    style = normalize_style("Arial Bold Italic")
    assert style.is_bold()
    assert style.is_italic()
    assert style.monospace is Tristate.UNSET


def test_normalize_infers_oblique_as_italic() -> None:
    assert normalize_style("DejaVu Sans Oblique").is_italic()


def test_normalize_keeps_explicit_request() -> None:
    requested = FontCharacteristics.of(italic=False)
    style = normalize_style("Arial Bold", requested)
    assert style == requested


def test_normalize_infers_when_only_monospace_was_given() -> None:
    style = normalize_style("Courier Bold", FontCharacteristics.of(monospace=False))
    assert style.is_bold()
    assert style.monospace is Tristate.FALSE


def test_monospace_literal_forces_monospace() -> None:
    style = normalize_style("MonoSpace", FontCharacteristics.of(monospace=False))
    assert style.is_monospace()


def test_monospace_is_never_inferred_from_substrings() -> None:
    assert not normalize_style("Monospace Sans").is_monospace()
    assert not normalize_style("Noto Sans Mono").is_monospace()
