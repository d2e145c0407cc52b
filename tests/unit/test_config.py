"""Tests for settings loading and the automation-aware input helper."""

import pytest

from wildcsp.domain.errors import ConfigurationError
from wildcsp.utils.config import (
    BENCHMARK_DEFAULTS,
    BRUTE_FORCE_MAX_LENGTH,
    load_settings,
    safe_input,
)


class TestLoadSettings:
    def test_defaults_without_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        settings = load_settings()
        assert settings["benchmark"] == BENCHMARK_DEFAULTS
        assert settings["brute_force"]["max_length"] == BRUTE_FORCE_MAX_LENGTH
        assert settings["generator"]["seed"] is None
        assert settings["algorithms"] == {}

    def test_defaults_not_shared(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        first = load_settings()
        first["benchmark"]["runs"] = 99
        assert load_settings()["benchmark"]["runs"] == BENCHMARK_DEFAULTS["runs"]

    def test_yaml_merges_over_defaults(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text(
            "benchmark:\n  runs: 7\nalgorithms:\n  Heuristic:\n    undecided_fill: '1'\n"
        )
        settings = load_settings(path)
        assert settings["benchmark"]["runs"] == 7
        assert settings["benchmark"]["k"] == BENCHMARK_DEFAULTS["k"]
        assert settings["algorithms"]["Heuristic"]["undecided_fill"] == "1"

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        path = tmp_path / "settings.yaml"
        path.write_text("generator:\n  seed: 1\n")
        monkeypatch.setenv("WILDCSP_SEED", "123")
        monkeypatch.setenv("WILDCSP_BRUTE_FORCE_MAX_LENGTH", "10")
        settings = load_settings(path)
        assert settings["generator"]["seed"] == 123
        assert settings["brute_force"]["max_length"] == 10

    def test_invalid_env_value(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("WILDCSP_BENCHMARK_RUNS", "many")
        with pytest.raises(ConfigurationError, match="WILDCSP_BENCHMARK_RUNS"):
            load_settings()

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_settings(tmp_path / "nope.yaml")

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("benchmark: [1, 2\n")
        with pytest.raises(ConfigurationError):
            load_settings(path)

    def test_non_mapping_yaml(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_settings(path)

    def test_unknown_section(self, tmp_path):
        path = tmp_path / "extra.yaml"
        path.write_text("database:\n  url: x\n")
        with pytest.raises(ConfigurationError, match="database"):
            load_settings(path)

    def test_repository_settings_file_loads(self):
        from pathlib import Path

        path = Path(__file__).resolve().parents[2] / "config" / "settings.yaml"
        settings = load_settings(path)
        assert "Heuristic" in settings["algorithms"]


class TestSafeInput:
    def test_automated_mode_returns_default(self):
        assert safe_input("prompt ", "x") == "x"

    def test_reads_user_input(self, monkeypatch):
        monkeypatch.delenv("WILDCSP_AUTOMATED")
        monkeypatch.setattr("builtins.input", lambda: "  yes ")
        assert safe_input("prompt ") == "yes"

    def test_empty_input_gives_default(self, monkeypatch):
        monkeypatch.delenv("WILDCSP_AUTOMATED")
        monkeypatch.setattr("builtins.input", lambda: "")
        assert safe_input("prompt ", "d") == "d"

    def test_eof_exits_cleanly(self, monkeypatch):
        monkeypatch.delenv("WILDCSP_AUTOMATED")

        def _eof():
            raise EOFError

        monkeypatch.setattr("builtins.input", _eof)
        with pytest.raises(SystemExit) as exc_info:
            safe_input("prompt ")
        assert exc_info.value.code == 0
