"""Unit tests for config.py"""

import pytest

from doc2quarto.config import load_config


def test_load_config_defaults(monkeypatch, tmp_path):
    """Settings defaults apply when no config.yaml, env var, or CLI override exists."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DOC2QUARTO_DRY_RUN", raising=False)
    settings = load_config()
    assert settings.output_suffix == ".qmd"
    assert settings.dry_run is False
    assert settings.protect_code_fences is True


def test_load_config_reads_config_yaml(tmp_path, monkeypatch):
    """Values in config.yaml are applied."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.yaml").write_text("verbose: true\nprotect_code_fences: false\n")
    settings = load_config()
    assert settings.verbose is True
    assert settings.protect_code_fences is False


def test_load_config_env_overrides_config_yaml(tmp_path, monkeypatch):
    """DOC2QUARTO_DRY_RUN takes precedence over config.yaml dry_run."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.yaml").write_text("dry_run: false\n")
    monkeypatch.setenv("DOC2QUARTO_DRY_RUN", "true")
    settings = load_config()
    assert settings.dry_run is True


def test_load_config_cli_overrides_env(tmp_path, monkeypatch):
    """A non-None CLI override beats the env var; None overrides are ignored."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DOC2QUARTO_OUTPUT_SUFFIX", ".md")
    settings = load_config(overrides={"output_suffix": ".qmd", "verbose": None})
    assert settings.output_suffix == ".qmd"
    assert settings.verbose is False


def test_load_config_invalid_yaml(tmp_path, monkeypatch):
    """load_config raises ValueError when config.yaml contains invalid YAML."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config.yaml"):
        load_config()


def test_load_config_non_mapping_yaml(tmp_path, monkeypatch):
    """A config.yaml that is not a mapping is rejected."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.yaml").write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config()


def test_load_config_rejects_bad_suffix(tmp_path, monkeypatch):
    """output_suffix must look like a file extension."""
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ValueError):
        load_config(overrides={"output_suffix": "qmd"})


def test_load_config_rejects_unknown_parser_preset(tmp_path, monkeypatch):
    """DOC2QUARTO_PARSER_CONFIG must name a real markdown-it preset."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DOC2QUARTO_PARSER_CONFIG", "bogus")
    with pytest.raises(ValueError):
        load_config()


def test_load_config_accepts_gfm_like(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    settings = load_config(overrides={"parser_config": "gfm-like"})
    assert settings.parser_config == "gfm-like"
