"""Configuration models for the font selector.

SelectorConfig

`weights` (`ScoringWeights`)
: Awards and penalties used by the similarity score. Every field is a
  non-negative integer; penalties are subtracted.

ScoringWeights

`family_award` (`int`)
: Added when the candidate family (or its alias) equals the requested family.

`bold_award` / `italic_award` / `monospace_award` (`int`)
: Added when a requested trait is present, subtracted when it is missing.

`not_bold_penalty` / `not_italic_penalty` / `not_monospace_penalty` (`int`)
: Subtracted when the candidate carries a trait nobody asked for.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
import yaml

from fontselector.exceptions import InvalidArgumentError


CONFIG_ENV = "FONTSELECTOR_CONFIG"

logger = logging.getLogger(__name__)


class ScoringWeights(BaseModel):
    """Awards and penalties applied by the similarity score."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    family_award: int = Field(default=13, ge=0)
    bold_award: int = Field(default=5, ge=0)
    not_bold_penalty: int = Field(default=3, ge=0)
    italic_award: int = Field(default=5, ge=0)
    not_italic_penalty: int = Field(default=3, ge=0)
    monospace_award: int = Field(default=5, ge=0)
    not_monospace_penalty: int = Field(default=1, ge=0)


DEFAULT_WEIGHTS = ScoringWeights()


class SelectorConfig(BaseModel):
    """Top-level configuration payload parsed from YAML."""

    model_config = ConfigDict(extra="forbid")

    weights: ScoringWeights = Field(default_factory=ScoringWeights)

    @classmethod
    def from_mapping(cls, payload: Any) -> SelectorConfig:
        if payload is None:
            return cls()
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise InvalidArgumentError(f"Invalid font selector configuration: {exc}") from exc


def load_config(path: Path | str | None = None) -> SelectorConfig:
    """Load configuration from ``path``, ``$FONTSELECTOR_CONFIG`` or defaults."""
    if path is None:
        env_value = os.environ.get(CONFIG_ENV)
        if not env_value:
            return SelectorConfig()
        path = env_value

    config_path = Path(path).expanduser()
    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InvalidArgumentError(f"Unable to read configuration '{config_path}'.") from exc
    except UnicodeDecodeError as exc:
        raise InvalidArgumentError(f"Configuration is not valid UTF-8: '{config_path}'.") from exc
    try:
        payload = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise InvalidArgumentError(f"Configuration '{config_path}' is not valid YAML.") from exc

    logger.debug("Loaded font selector configuration from %s", config_path)
    return SelectorConfig.from_mapping(payload)


__all__ = [
    "CONFIG_ENV",
    "DEFAULT_WEIGHTS",
    "ScoringWeights",
    "SelectorConfig",
    "load_config",
]
