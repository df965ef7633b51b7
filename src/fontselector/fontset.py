"""A mutable pool of fonts with memoised selections."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
import logging
from typing import Any

from fontselector.catalog import load_catalog
from fontselector.characteristics import FontCharacteristics
from fontselector.config import DEFAULT_WEIGHTS, ScoringWeights
from fontselector.descriptor import FontCandidate, FontDescriptor
from fontselector.diagnostics import DiagnosticEmitter
from fontselector.exceptions import InvalidArgumentError
from fontselector.selector import FontSelector


logger = logging.getLogger(__name__)

_SelectionKey = tuple[tuple[str, ...], FontCharacteristics | None]


@dataclass(slots=True)
class FontSet:
    """Fonts available to a layout, in registration order.

    Selections are cached per (families, characteristics) and dropped as soon
    as the pool changes.
    """

    weights: ScoringWeights = DEFAULT_WEIGHTS
    emitter: DiagnosticEmitter | None = None
    _candidates: list[FontCandidate] = field(default_factory=list, init=False, repr=False)
    _selectors: dict[_SelectionKey, FontSelector] = field(
        default_factory=dict, init=False, repr=False
    )

    @classmethod
    def from_catalog(
        cls,
        source: Any,
        *,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
        emitter: DiagnosticEmitter | None = None,
    ) -> FontSet:
        """Build a set from anything `load_catalog` accepts."""
        font_set = cls(weights=weights, emitter=emitter)
        for candidate in load_catalog(source, emitter=emitter):
            font_set.add_candidate(candidate)
        return font_set

    def add(self, descriptor: FontDescriptor, alias: str | None = None) -> bool:
        return self.add_candidate(FontCandidate(descriptor, alias))

    def add_candidate(self, candidate: FontCandidate) -> bool:
        """Register ``candidate``; returns False when it is already present."""
        if candidate in self._candidates:
            return False
        self._candidates.append(candidate)
        self._selectors.clear()
        return True

    def remove(self, candidate: FontCandidate) -> bool:
        try:
            self._candidates.remove(candidate)
        except ValueError:
            return False
        self._selectors.clear()
        return True

    def is_empty(self) -> bool:
        return not self._candidates

    def select(
        self,
        families: Sequence[str] | None = None,
        characteristics: FontCharacteristics | None = None,
    ) -> FontSelector:
        """Return the selector for this request, reusing a cached one if possible."""
        if self.is_empty():
            raise InvalidArgumentError("Cannot select a font from an empty font set.")
        if isinstance(families, str):
            families = (families,)
        key: _SelectionKey = (tuple(families or ()), characteristics)
        selector = self._selectors.get(key)
        if selector is None:
            selector = FontSelector(
                self._candidates,
                key[0],
                characteristics,
                weights=self.weights,
                emitter=self.emitter,
            )
            self._selectors[key] = selector
        else:
            logger.debug("Reusing cached selection for %s", list(key[0]))
        return selector

    def __len__(self) -> int:
        return len(self._candidates)

    def __iter__(self) -> Iterator[FontCandidate]:
        return iter(tuple(self._candidates))

    def __contains__(self, candidate: object) -> bool:
        return candidate in self._candidates


__all__ = ["FontSet"]
