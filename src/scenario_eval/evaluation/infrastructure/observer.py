"""StructlogEvaluationObserver — production observer that delegates to structlog."""

import structlog


class StructlogEvaluationObserver:
    """Logs evaluation domain events to structlog.

    Does NOT inherit from EvaluationObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def validation_started(
        self, scenario: str, response_length: int, response_preview: str
    ) -> None:
        self._log.info(
            "validation.started",
            scenario=scenario,
            response_length=response_length,
            response_preview=response_preview,
        )

    def behaviors_analyzed(
        self, scenario: str, matched_count: int, total_count: int, success: bool
    ) -> None:
        self._log.info(
            "validation.behaviors_analyzed",
            scenario=scenario,
            matched_count=matched_count,
            total_count=total_count,
            success=success,
        )

    def behavior_checked(self, scenario: str, name: str, matched: bool) -> None:
        self._log.debug(
            "validation.behavior_checked",
            scenario=scenario,
            name=name,
            matched=matched,
        )

    def tool_calls_found(self, scenario: str, tool_calls: list[str]) -> None:
        self._log.info(
            "validation.tool_calls_found",
            scenario=scenario,
            count=len(tool_calls),
            tool_calls=tool_calls,
        )

    def diagnostic_written(self, path: str) -> None:
        self._log.info("diagnostic.written", path=path)

    def diagnostic_write_failed(self, path: str, reason: str) -> None:
        self._log.warning("diagnostic.write_failed", path=path, reason=reason)
