"""YAML scenario loader — parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from scenario_eval.config.domain.observer import ConfigObserver
from scenario_eval.config.domain.scenario import ScenarioConfig
from scenario_eval.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from scenario_eval.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlScenarioLoader:
    """Loads, interpolates, validates, and returns a ScenarioConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> ScenarioConfig:
        """
        Load, interpolate, validate, and return a ScenarioConfig from a YAML file.

        Relative diagnostics paths are anchored at the directory holding the
        scenario file, so the artifact lands next to the scenario definition.

        Raises:
            ConfigLoadError: if the file cannot be read or is not valid YAML.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the schema or a cross-field rule is violated.
        """
        raw = _parse_yaml(path=path)
        _check_missing_env_vars(raw=raw)
        interpolated = _interpolate(raw=raw)
        cfg = _build_config(resolved=interpolated)
        cfg = cfg.model_copy(
            update={"diagnostics": cfg.diagnostics.relative_to(path.parent)}
        )
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.scenario_loaded(
            name=cfg.name, num_checks=len(cfg.checks), threshold=cfg.threshold
        )
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigLoadError(path=path, reason=f"cannot read file ({exc})") from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason=f"invalid YAML ({exc})") from exc

    if not isinstance(raw, dict):
        raise ConfigLoadError(path=path, reason="top level must be a mapping")
    return raw


def _check_missing_env_vars(raw: Any) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _interpolate(raw: Any) -> Any:
    """Return a fully interpolated copy of raw with all ${ENV_VAR} substituted."""
    return interpolate(raw)


def _build_config(resolved: Any) -> ScenarioConfig:
    try:
        return ScenarioConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _emit_warnings(cfg: ScenarioConfig, observer: ConfigObserver) -> None:
    if cfg.threshold == 1:
        observer.scenario_threshold_lenient(name=cfg.name, threshold=cfg.threshold)
