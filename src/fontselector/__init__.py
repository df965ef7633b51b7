"""Font selection façade used to substitute unavailable fonts.

Architecture
: `FontDescriptor` carries the read-only facts the font parser reports about a
  face; `FontCandidate` pairs it with an optional alias that replaces the
  family name during matching.
: `FontCharacteristics` expresses the requested bold/italic/monospace intent
  with explicit three-valued flags so "not bold" and "unspecified" differ.
: `similarity` scores one candidate against one family preference.
  `FontSelector` orders a pool by the per-preference scores, first preference
  first, and exposes the best match.
: `FontSet` keeps a pool between requests and memoises selections;
  `load_catalog` builds candidates from YAML listings.
: `MarkedContentTag` is the property store attached to tagged content.

Goal
: Choose a substitute font deterministically, honouring the caller's family
  priorities before their style wishes.
"""

from fontselector.catalog import FontEntry, load_catalog
from fontselector.characteristics import FontCharacteristics, Tristate, normalize_style
from fontselector.config import ScoringWeights, SelectorConfig, load_config
from fontselector.descriptor import FontCandidate, FontDescriptor, descriptor_from_style
from fontselector.diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from fontselector.exceptions import (
    FontSelectionError,
    InvalidArgumentError,
    InvalidStateError,
)
from fontselector.fontset import FontSet
from fontselector.scoring import similarity
from fontselector.selector import FontPreference, FontSelector, build_preferences, rank
from fontselector.tagging import MarkedContentTag
from fontselector.version import __version__


__all__ = [
    "DiagnosticEmitter",
    "FontCandidate",
    "FontCharacteristics",
    "FontDescriptor",
    "FontEntry",
    "FontPreference",
    "FontSelectionError",
    "FontSelector",
    "FontSet",
    "InvalidArgumentError",
    "InvalidStateError",
    "LoggingEmitter",
    "MarkedContentTag",
    "NullEmitter",
    "ScoringWeights",
    "SelectorConfig",
    "Tristate",
    "__version__",
    "build_preferences",
    "descriptor_from_style",
    "load_catalog",
    "load_config",
    "normalize_style",
    "rank",
    "similarity",
]
