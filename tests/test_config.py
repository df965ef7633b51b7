from __future__ import annotations

from pathlib import Path

import pytest

from fontselector.config import CONFIG_ENV, ScoringWeights, SelectorConfig, load_config
from fontselector.exceptions import InvalidArgumentError


def test_defaults_match_reference_weights(monkeypatch) -> None:
    monkeypatch.delenv(CONFIG_ENV, raising=False)
    weights = load_config().weights
    assert weights == ScoringWeights()
    assert weights.family_award == 13
    assert (weights.bold_award, weights.not_bold_penalty) == (5, 3)
    assert (weights.italic_award, weights.not_italic_penalty) == (5, 3)
    assert (weights.monospace_award, weights.not_monospace_penalty) == (5, 1)


def test_load_config_from_file(tmp_path: Path) -> None:
    path = tmp_path / "selector.yaml"
    path.write_text("weights:\n  family_award: 20\n  not_bold_penalty: 0\n", encoding="utf-8")
    config = load_config(path)
    assert config.weights.family_award == 20
    assert config.weights.not_bold_penalty == 0
    assert config.weights.bold_award == 5


def test_load_config_from_environment(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "selector.yaml"
    path.write_text("weights:\n  monospace_award: 9\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV, str(path))
    assert load_config().weights.monospace_award == 9


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    path = tmp_path / "selector.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == SelectorConfig()


@pytest.mark.parametrize(
    "payload",
    [
        "weights:\n  family_award: -1\n",
        "weights:\n  unknown: 1\n",
        "fonts: []\n",
        "- not a mapping\n",
    ],
)
def test_invalid_config_is_rejected(tmp_path: Path, payload: str) -> None:
    path = tmp_path / "selector.yaml"
    path.write_text(payload, encoding="utf-8")
    with pytest.raises(InvalidArgumentError):
        load_config(path)


def test_missing_config_file_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(InvalidArgumentError, match="Unable to read"):
        load_config(tmp_path / "missing.yaml")


def test_undecodable_config_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "weights.yaml"
    path.write_bytes(b"weights: \xff\n")
    with pytest.raises(InvalidArgumentError, match="not valid UTF-8"):
        load_config(path)
