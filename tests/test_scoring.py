from __future__ import annotations

from fontselector.characteristics import FontCharacteristics
from fontselector.config import ScoringWeights
from fontselector.descriptor import FontCandidate, FontDescriptor
from fontselector.scoring import family_matches, similarity


def _font(family: str, alias: str | None = None, **facts) -> FontCandidate:
    return FontCandidate(FontDescriptor(family, **facts), alias)


UNSET = FontCharacteristics()
BOLD = FontCharacteristics.of(bold=True)


def test_family_match_award() -> None:
    assert similarity("Arial", UNSET, _font("Arial"), True) == 13
    assert similarity("ARIAL", UNSET, _font("arial"), False) == 13


def test_family_mismatch_short_circuits_before_style() -> None:
    candidate = _font("Arial", is_bold=True, is_italic=True)
    # Not the last preference: bold and italic are never judged.
    assert similarity("Verdana", BOLD, candidate, False) == 0
    # Last preference: style counts even though the family differs.
    assert similarity("Verdana", BOLD, candidate, True) == 5 - 3


def test_short_circuit_keeps_monospace_penalty() -> None:
    candidate = _font("Courier", is_monospace=True, is_bold=True)
    assert similarity("Arial", UNSET, candidate, False) == -1


def test_bold_award_and_penalties() -> None:
    assert similarity("Arial", BOLD, _font("Arial", font_weight=700), True) == 13 + 5
    assert similarity("Arial", BOLD, _font("Arial"), True) == 13 - 5
    assert similarity("Arial", UNSET, _font("Arial", is_bold=True), True) == 13 - 3
    assert similarity("Arial", FontCharacteristics.of(bold=False), _font("Arial"), True) == 13


def test_italic_award_and_penalties() -> None:
    italic = FontCharacteristics.of(italic=True)
    assert similarity("Arial", italic, _font("Arial", italic_angle=-11.0), True) == 13 + 5
    assert similarity("Arial", italic, _font("Arial"), True) == 13 - 5
    assert similarity("Arial", UNSET, _font("Arial", is_italic=True), True) == 13 - 3


def test_monospace_request_skips_family_check() -> None:
    mono = FontCharacteristics.of(monospace=True)
    assert similarity("Arial", mono, _font("Courier", is_monospace=True), False) == 5
    assert similarity("Arial", mono, _font("Arial"), False) == -5


def test_unrequested_monospace_penalty() -> None:
    assert similarity("Courier", UNSET, _font("Courier", is_monospace=True), True) == 13 - 1


def test_alias_overrides_descriptor_family() -> None:
    candidate = _font("Foo", alias="Bar")
    assert family_matches("bar", candidate)
    assert not family_matches("Foo", candidate)
    assert similarity("Bar", UNSET, candidate, False) == 13
    assert similarity("Foo", UNSET, candidate, False) == 0


def test_empty_family_never_matches() -> None:
    assert not family_matches("", _font(""))
    assert not family_matches(None, _font("Arial"))
    assert similarity(None, BOLD, _font("Arial", is_bold=True), True) == 5


def test_custom_weights() -> None:
    weights = ScoringWeights(family_award=20, bold_award=1)
    assert similarity("Arial", BOLD, _font("Arial", is_bold=True), True, weights) == 21
