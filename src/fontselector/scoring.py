"""Similarity score between one family/style preference and one candidate."""

from __future__ import annotations

from fontselector.characteristics import FontCharacteristics
from fontselector.config import DEFAULT_WEIGHTS, ScoringWeights
from fontselector.descriptor import FontCandidate


def family_matches(family: str | None, candidate: FontCandidate) -> bool:
    """Return True when ``candidate`` is registered under ``family``.

    The alias, when present, is the only name considered. An empty family
    never matches.
    """
    if not family:
        return False
    return candidate.family_key == family.lower()


def similarity(
    family: str | None,
    characteristics: FontCharacteristics,
    candidate: FontCandidate,
    is_last: bool,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> int:
    """Score how well ``candidate`` satisfies one family preference.

    The higher the score the better. When monospace is requested the family
    text is not checked at all. A family mismatch on any preference but the
    last returns the monospace part of the score alone, so that bold and
    italic are only judged against a family the candidate belongs to, or
    against the final fallback preference.
    """
    descriptor = candidate.descriptor
    score = 0

    family_set_by_characteristics = False
    if characteristics.is_monospace():
        family_set_by_characteristics = True
        if descriptor.is_monospace:
            score += weights.monospace_award
        else:
            score -= weights.monospace_award
    elif descriptor.is_monospace:
        score -= weights.not_monospace_penalty

    if not family_set_by_characteristics:
        if family_matches(family, candidate):
            score += weights.family_award
        elif not is_last:
            return score

    if characteristics.is_bold():
        score += weights.bold_award if descriptor.bold else -weights.bold_award
    elif descriptor.bold:
        score -= weights.not_bold_penalty

    if characteristics.is_italic():
        score += weights.italic_award if descriptor.italic else -weights.italic_award
    elif descriptor.italic:
        score -= weights.not_italic_penalty

    return score


__all__ = ["family_matches", "similarity"]
