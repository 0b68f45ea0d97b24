"""Tests for ${ENV_VAR} interpolation helpers."""

import pytest

from scenario_eval.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)


class TestCollectMissingVars:
    def test_collects_every_missing_var_once(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("ALPHA", raising=False)
        monkeypatch.delenv("BETA", raising=False)

        missing = collect_missing_vars(
            {"a": "${ALPHA}", "b": ["${BETA}", "${ALPHA}"], "c": 3}
        )

        assert missing == ["ALPHA", "BETA"]

    def test_set_vars_are_not_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ALPHA", "1")

        assert collect_missing_vars({"a": "${ALPHA}"}) == []

    def test_var_with_default_is_not_missing(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("ALPHA", raising=False)

        assert collect_missing_vars("${ALPHA:-fallback}") == []


class TestInterpolate:
    def test_substitutes_nested_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OUT", "/results")

        result = interpolate({"diagnostics": {"path": "${OUT}/debug.json"}})

        assert result == {"diagnostics": {"path": "/results/debug.json"}}

    def test_default_used_when_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("OUT", raising=False)

        assert interpolate("${OUT:-.}/debug.json") == "./debug.json"

    def test_environment_beats_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OUT", "/set")

        assert interpolate("${OUT:-.}") == "/set"

    def test_non_strings_pass_through(self) -> None:
        assert interpolate([1, 2.5, True, None]) == [1, 2.5, True, None]
