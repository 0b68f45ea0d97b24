"""CompositeEvaluationObserver — fans out all events to a list of observers."""

from scenario_eval.evaluation.domain.observer import EvaluationObserver


class CompositeEvaluationObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from EvaluationObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[EvaluationObserver]) -> None:
        self._observers = observers

    def validation_started(
        self, scenario: str, response_length: int, response_preview: str
    ) -> None:
        for obs in self._observers:
            obs.validation_started(
                scenario=scenario,
                response_length=response_length,
                response_preview=response_preview,
            )

    def behaviors_analyzed(
        self, scenario: str, matched_count: int, total_count: int, success: bool
    ) -> None:
        for obs in self._observers:
            obs.behaviors_analyzed(
                scenario=scenario,
                matched_count=matched_count,
                total_count=total_count,
                success=success,
            )

    def behavior_checked(self, scenario: str, name: str, matched: bool) -> None:
        for obs in self._observers:
            obs.behavior_checked(scenario=scenario, name=name, matched=matched)

    def tool_calls_found(self, scenario: str, tool_calls: list[str]) -> None:
        for obs in self._observers:
            obs.tool_calls_found(scenario=scenario, tool_calls=tool_calls)

    def diagnostic_written(self, path: str) -> None:
        for obs in self._observers:
            obs.diagnostic_written(path=path)

    def diagnostic_write_failed(self, path: str, reason: str) -> None:
        for obs in self._observers:
            obs.diagnostic_write_failed(path=path, reason=reason)
