"""Wiring for scenario test runners that supply their own log sink."""

from scenario_eval.config.domain.scenario import ScenarioConfig
from scenario_eval.evaluation.application.validator import ScenarioValidator
from scenario_eval.evaluation.domain.observer import EvaluationObserver
from scenario_eval.evaluation.infrastructure.composite_observer import (
    CompositeEvaluationObserver,
)
from scenario_eval.evaluation.infrastructure.harness_log_observer import (
    HarnessLogObserver,
    LogSink,
)
from scenario_eval.evaluation.infrastructure.observer import StructlogEvaluationObserver


def create_harness_validator(
    log_sink: LogSink,
    config: ScenarioConfig | None = None,
) -> ScenarioValidator:
    """
    Build a validator that logs to structlog and to the runner's own log.

    Falls back to the built-in C# build-fix scenario when no config is given.
    """
    observers: list[EvaluationObserver] = [
        StructlogEvaluationObserver(),
        HarnessLogObserver(sink=log_sink),
    ]
    return ScenarioValidator.from_config(
        config=config or ScenarioConfig.default(),
        observer=CompositeEvaluationObserver(observers=observers),
    )
