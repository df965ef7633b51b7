from __future__ import annotations

from fontselector.descriptor import (
    FontCandidate,
    FontDescriptor,
    descriptor_from_style,
    weight_from_style,
)


def test_bold_from_weight_or_flag() -> None:
    assert FontDescriptor("Demo", font_weight=600).bold
    assert FontDescriptor("Demo", is_bold=True, font_weight=400).bold
    assert not FontDescriptor("Demo", font_weight=500).bold


def test_italic_from_angle_or_flag() -> None:
    assert FontDescriptor("Demo", italic_angle=-12.0).italic
    assert FontDescriptor("Demo", is_italic=True).italic
    assert not FontDescriptor("Demo", italic_angle=12.0).italic


def test_alias_replaces_family_key() -> None:
    descriptor = FontDescriptor("Foo")
    assert FontCandidate(descriptor).family_key == "foo"
    assert FontCandidate(descriptor, alias="Bar").family_key == "bar"
    assert FontCandidate(descriptor, alias="Bar").display_name == "Bar (Foo)"


def test_descriptor_from_style_names() -> None:
    descriptor = descriptor_from_style("DejaVu Sans Mono", "Bold Oblique", monospace=True)
    assert descriptor.is_bold
    assert descriptor.is_italic
    assert descriptor.is_monospace
    assert descriptor.font_weight == 700

    regular = descriptor_from_style("DejaVu Sans")
    assert not regular.bold
    assert not regular.italic
    assert regular.font_weight == 400


def test_weight_from_style_prefers_compound_names() -> None:
    assert weight_from_style("SemiBold") == 600
    assert weight_from_style("Extra-Bold Italic") == 800
    assert weight_from_style("Light") == 300
    assert weight_from_style("ExtraLight") == 200
    assert weight_from_style("Book") == 400
