"""Property store attached to a piece of marked content."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from fontselector.exceptions import InvalidStateError


MCID = "MCID"
ACTUAL_TEXT = "ActualText"


class MarkedContentTag:
    """A tag on a single piece of marked content.

    The ``role`` names the structure type (``P``, ``Span``, ``Artifact``...).
    Properties are keyed by name; the marked content identifier lives under
    ``MCID`` and links the content to the document structure tree.
    """

    def __init__(self, role: str, mcid: int | None = None) -> None:
        self._role = role
        self._properties: dict[str, Any] = {}
        if mcid is not None:
            self.add_property(MCID, mcid)

    @property
    def role(self) -> str:
        return self._role

    @property
    def properties(self) -> Mapping[str, Any]:
        return MappingProxyType(self._properties)

    @property
    def mcid(self) -> int:
        """Return the marked content identifier.

        Raises `InvalidStateError` when the tag was never given one.
        """
        value = self._properties.get(MCID)
        if value is None:
            raise InvalidStateError(f"Tag '{self._role}' has no MCID.")
        return int(value)

    def has_mcid(self) -> bool:
        return MCID in self._properties

    @property
    def actual_text(self) -> str | None:
        value = self._properties.get(ACTUAL_TEXT)
        return None if value is None else str(value)

    def set_properties(self, properties: Mapping[str, Any] | None) -> MarkedContentTag:
        """Replace every property; ``None`` leaves the tag unchanged."""
        if properties is not None:
            self._properties = dict(properties)
        return self

    def add_property(self, name: str, value: Any) -> MarkedContentTag:
        self._properties[name] = value
        return self

    def remove_property(self, name: str) -> MarkedContentTag:
        self._properties.pop(name, None)
        return self

    def get_property(self, name: str) -> Any | None:
        return self._properties.get(name)

    def __repr__(self) -> str:
        return f"MarkedContentTag(role={self._role!r}, properties={self._properties!r})"


__all__ = ["ACTUAL_TEXT", "MCID", "MarkedContentTag"]
