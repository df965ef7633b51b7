"""Load font candidates from a YAML catalog.

Each entry describes one face:

```yaml
- family: DejaVu Sans Mono
  style: Bold Oblique
  monospace: true
- family: Liberation Sans
  alias: Arial
  weight: 700
```

`style` seeds bold, italic and weight the way fontconfig style names read;
explicit `bold`, `italic` and `weight` keys win over it. A face with an
explicit `weight` and no `bold` key is bold only when that weight is above 500.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import replace
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
import yaml

from fontselector.descriptor import FontCandidate, FontDescriptor, descriptor_from_style
from fontselector.diagnostics import DiagnosticEmitter
from fontselector.exceptions import InvalidArgumentError


logger = logging.getLogger(__name__)


class FontEntry(BaseModel):
    """One face declared in a catalog."""

    model_config = ConfigDict(extra="forbid")

    family: str = Field(min_length=1)
    alias: str | None = None
    style: str | None = None
    name: str | None = None
    bold: bool | None = None
    italic: bool | None = None
    monospace: bool = False
    weight: int | None = Field(default=None, ge=1, le=1000)
    italic_angle: float = 0.0

    def to_descriptor(self) -> FontDescriptor:
        base = descriptor_from_style(
            self.family, self.style, monospace=self.monospace, font_name=self.name
        )
        return replace(
            base,
            is_bold=self._is_bold(base),
            is_italic=base.is_italic if self.italic is None else self.italic,
            font_weight=base.font_weight if self.weight is None else self.weight,
            italic_angle=self.italic_angle,
        )

    def _is_bold(self, base: FontDescriptor) -> bool:
        if self.bold is not None:
            return self.bold
        # An explicit weight replaces the boldness read from the style name.
        if self.weight is not None:
            return False
        return base.is_bold

    def to_candidate(self) -> FontCandidate:
        return FontCandidate(self.to_descriptor(), self.alias)


def _read_payload(source: Path | bytes | str) -> Any:
    if isinstance(source, Path):
        try:
            raw = source.read_text(encoding="utf-8")
        except OSError as exc:
            raise InvalidArgumentError(f"Unable to read font catalog '{source}'.") from exc
        except UnicodeDecodeError as exc:
            raise InvalidArgumentError(f"Font catalog is not valid UTF-8: '{source}'.") from exc
    elif isinstance(source, bytes):
        try:
            raw = source.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidArgumentError("Font catalog is not valid UTF-8.") from exc
    else:
        raw = source
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise InvalidArgumentError("Font catalog is not valid YAML.") from exc


def parse_entries(payload: Any) -> list[FontEntry]:
    """Validate raw catalog data into entries."""
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise InvalidArgumentError(
            f"Font catalog must be a list of entries, got {type(payload).__name__}."
        )
    entries: list[FontEntry] = []
    for position, item in enumerate(payload):
        try:
            entries.append(FontEntry.model_validate(item))
        except ValidationError as exc:
            raise InvalidArgumentError(f"Invalid font catalog entry #{position}: {exc}") from exc
    return entries


def load_catalog(
    source: Path | bytes | str | Iterable[Mapping[str, Any]],
    *,
    emitter: DiagnosticEmitter | None = None,
) -> list[FontCandidate]:
    """Return the candidates declared in ``source``, in declaration order.

    ``source`` may be a path, raw YAML (``str``/``bytes``) or already parsed
    entries. Duplicate faces are dropped with a warning.
    """
    if isinstance(source, (Path, bytes, str)):
        payload = _read_payload(source)
    else:
        payload = list(source)

    candidates: list[FontCandidate] = []
    seen: set[FontCandidate] = set()
    for entry in parse_entries(payload):
        candidate = entry.to_candidate()
        if candidate in seen:
            if emitter is not None:
                emitter.warning(f"Skipping duplicate catalog entry for {candidate.display_name}.")
            logger.debug("Duplicate catalog entry %s", candidate.display_name)
            continue
        seen.add(candidate)
        candidates.append(candidate)
    return candidates


__all__ = ["FontEntry", "load_catalog", "parse_entries"]
