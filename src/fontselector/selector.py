"""Rank candidate fonts against a family preference list and a style request.

Preferences
: Each requested family becomes a `FontPreference` carrying its own style,
  normalised once from the caller's request (see `normalize_style`). The last
  preference is the fallback that always scores bold and italic.

Ordering
: Candidates are ordered by their score vectors, one score per preference,
  compared lexicographically. The first preference decides; later ones only
  break ties. Scores are never summed across preferences.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
import logging

from fontselector.characteristics import FontCharacteristics, normalize_style
from fontselector.config import DEFAULT_WEIGHTS, ScoringWeights
from fontselector.descriptor import FontCandidate
from fontselector.diagnostics import DiagnosticEmitter
from fontselector.exceptions import InvalidArgumentError
from fontselector.scoring import similarity


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FontPreference:
    """One requested family together with the style to judge it by."""

    family: str | None
    characteristics: FontCharacteristics
    is_last: bool

    def score(
        self, candidate: FontCandidate, weights: ScoringWeights = DEFAULT_WEIGHTS
    ) -> int:
        return similarity(self.family, self.characteristics, candidate, self.is_last, weights)


def build_preferences(
    families: Sequence[str] | None,
    characteristics: FontCharacteristics | None = None,
) -> tuple[FontPreference, ...]:
    """Expand the family list into preferences, most wanted first.

    Without families a single preference holds the caller's style untouched
    and no family name is ever matched.
    """
    if not families:
        return (FontPreference(None, characteristics or FontCharacteristics(), True),)
    last = len(families) - 1
    return tuple(
        FontPreference(family, normalize_style(family, characteristics), index == last)
        for index, family in enumerate(families)
    )


class FontSelector:
    """Sort a pool of fonts from best to worst match for one request.

    The pool is copied and sorted once, at construction. The candidates
    themselves are never modified.
    """

    def __init__(
        self,
        candidates: Iterable[FontCandidate],
        families: Sequence[str] | None = None,
        characteristics: FontCharacteristics | None = None,
        *,
        weights: ScoringWeights | None = None,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        pool = list(candidates)
        if not pool:
            raise InvalidArgumentError("Cannot select a font from an empty candidate pool.")

        if isinstance(families, str):
            families = (families,)
        self._weights = weights or DEFAULT_WEIGHTS
        self._families = tuple(families or ())
        self._preferences = build_preferences(self._families, characteristics)
        self._fonts = tuple(sorted(pool, key=self._sort_key))

        best = self._fonts[0]
        logger.debug(
            "Ranked %d fonts for %s, best match %s",
            len(self._fonts),
            list(self._families),
            best.display_name,
        )
        if emitter is not None:
            emitter.event(
                "font_selection",
                {
                    "best": best.display_name,
                    "families": list(self._families),
                    "candidates": len(self._fonts),
                },
            )

    @property
    def fonts(self) -> tuple[FontCandidate, ...]:
        """Candidates ordered from best to worst match."""
        return self._fonts

    @property
    def preferences(self) -> tuple[FontPreference, ...]:
        return self._preferences

    @property
    def weights(self) -> ScoringWeights:
        return self._weights

    def best_match(self) -> FontCandidate:
        """Return the best candidate.

        Glyph coverage is not considered: callers needing specific characters
        should walk `fonts` and fall back to this candidate when none covers
        them.
        """
        return self._fonts[0]

    def scores(self, candidate: FontCandidate) -> tuple[int, ...]:
        """Return the score of ``candidate`` against every preference, in order."""
        return tuple(pref.score(candidate, self._weights) for pref in self._preferences)

    def compare(self, first: FontCandidate, second: FontCandidate) -> int:
        """Negative when ``first`` ranks before ``second``, zero on a full tie."""
        for pref in self._preferences:
            diff = pref.score(second, self._weights) - pref.score(first, self._weights)
            if diff:
                return diff
        return 0

    def _sort_key(self, candidate: FontCandidate) -> tuple[int, ...]:
        return tuple(-score for score in self.scores(candidate))

    def __iter__(self) -> Iterator[FontCandidate]:
        return iter(self._fonts)

    def __len__(self) -> int:
        return len(self._fonts)


def rank(
    candidates: Iterable[FontCandidate],
    families: Sequence[str] | None = None,
    characteristics: FontCharacteristics | None = None,
    *,
    weights: ScoringWeights | None = None,
    emitter: DiagnosticEmitter | None = None,
) -> FontSelector:
    """Build a `FontSelector`; raises `InvalidArgumentError` on an empty pool."""
    return FontSelector(
        candidates, families, characteristics, weights=weights, emitter=emitter
    )


__all__ = ["FontPreference", "FontSelector", "build_preferences", "rank"]
