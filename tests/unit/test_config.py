from __future__ import annotations

from pathlib import Path

import pytest

from slugmin import config
from slugmin.errors import ConfigError


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("STYLE", "PRESERVE_CASE", "MAX_LENGTH", "VERBOSE", "QUIET"):
        monkeypatch.delenv(f"SLUGMIN_{key}", raising=False)


def test_get_config_defaults(tmp_path: Path) -> None:
    cfg_path = tmp_path / "missing.toml"
    merged = config.get_config({"config_path": str(cfg_path)})
    assert merged["style"] == "url"
    assert merged["preserve_case"] is False
    assert merged["max_length"] == 0
    assert merged["config_path"] == str(cfg_path)


def test_get_config_merges_sources(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg_path = tmp_path / "config.toml"
    cfg_path.write_text(
        'style = "filename"\nmax_length = 10\npreserve_case = true\n',
        encoding="utf-8",
    )
    monkeypatch.setenv("SLUGMIN_MAX_LENGTH", "20")
    monkeypatch.setenv("SLUGMIN_PRESERVE_CASE", "no")

    merged = config.get_config({"config_path": str(cfg_path), "style": "url"})
    assert merged["style"] == "url"
    assert merged["max_length"] == 20
    assert merged["preserve_case"] is False


def test_get_config_ignores_unknown_and_invalid_values(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    cfg_path = tmp_path / "config.toml"
    cfg_path.write_text('unknown = "x"\n', encoding="utf-8")
    monkeypatch.setenv("SLUGMIN_MAX_LENGTH", "not-a-number")
    monkeypatch.setenv("SLUGMIN_SOMETHING_ELSE", "1")

    merged = config.get_config({"config_path": str(cfg_path)})
    assert "unknown" not in merged
    assert "something_else" not in merged
    assert merged["max_length"] == 0


def test_get_config_treats_malformed_file_as_empty(tmp_path: Path) -> None:
    cfg_path = tmp_path / "config.toml"
    cfg_path.write_text("style = = broken", encoding="utf-8")
    merged = config.get_config({"config_path": str(cfg_path)})
    assert merged["style"] == "url"


def test_get_config_rejects_unknown_style(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as excinfo:
        config.get_config({"config_path": str(tmp_path / "c.toml"), "style": "snake"})
    assert "snake" in str(excinfo.value)
    assert excinfo.value.hint is not None


def test_get_config_rejects_negative_max_length(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        config.get_config({"config_path": str(tmp_path / "c.toml"), "max_length": -1})


def test_render_config_lists_every_setting() -> None:
    rendered = config.render_config(
        {"style": "filename", "preserve_case": True, "max_length": 5, "config_path": "/x"}
    )
    assert "# config_path: /x" in rendered
    assert 'style = "filename"' in rendered
    assert "preserve_case = true" in rendered
    assert "max_length = 5" in rendered
    assert "verbose = false" in rendered


@pytest.mark.parametrize("key", ["preserve_case", "verbose", "quiet"])
def test_get_config_rejects_quoted_booleans_from_file(tmp_path: Path, key: str) -> None:
    cfg_path = tmp_path / "config.toml"
    cfg_path.write_text(f'{key} = "false"\n', encoding="utf-8")
    with pytest.raises(ConfigError) as excinfo:
        config.get_config({"config_path": str(cfg_path)})
    assert key in str(excinfo.value)
    assert excinfo.value.hint is not None


def test_get_config_accepts_toml_booleans(tmp_path: Path) -> None:
    cfg_path = tmp_path / "config.toml"
    cfg_path.write_text("preserve_case = false\nverbose = true\n", encoding="utf-8")
    merged = config.get_config({"config_path": str(cfg_path)})
    assert merged["preserve_case"] is False
    assert merged["verbose"] is True
