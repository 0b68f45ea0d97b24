"""Observer port for the evaluation domain — defines events in domain language."""

from typing import Protocol


class EvaluationObserver(Protocol):
    """Observer port emitting structured events while a transcript is validated.

    Implementations may log to structlog, forward to a harness log, or record
    for tests.
    """

    def validation_started(
        self, scenario: str, response_length: int, response_preview: str
    ) -> None: ...

    def behaviors_analyzed(
        self, scenario: str, matched_count: int, total_count: int, success: bool
    ) -> None: ...

    def behavior_checked(self, scenario: str, name: str, matched: bool) -> None: ...

    def tool_calls_found(self, scenario: str, tool_calls: list[str]) -> None: ...

    def diagnostic_written(self, path: str) -> None: ...

    def diagnostic_write_failed(self, path: str, reason: str) -> None: ...
