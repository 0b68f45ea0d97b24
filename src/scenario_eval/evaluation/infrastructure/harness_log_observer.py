"""Renders evaluation events as lines for a scenario test runner's log."""

from collections.abc import Callable
from typing import TypeAlias

import typer

LogSink: TypeAlias = Callable[[str], None]

_PASS = "✅"
_FAIL = "❌"


class HarnessLogObserver:
    """Writes human-readable lines into a log sink supplied by the test runner.

    When the sink raises, the line is written to stderr instead; losing the
    runner's log is never fatal to a validation.
    """

    def __init__(self, sink: LogSink) -> None:
        self._sink = sink

    def validation_started(
        self, scenario: str, response_length: int, response_preview: str
    ) -> None:
        self._emit(f"[VALIDATION-START] Processing response of length: {response_length}")
        self._emit(f"[VALIDATION-DEBUG] Response preview: {response_preview}...")

    def behaviors_analyzed(
        self, scenario: str, matched_count: int, total_count: int, success: bool
    ) -> None:
        self._emit(
            f"[BEHAVIOR-ANALYSIS] Found {matched_count}/{total_count} expected behaviors"
        )
        self._emit(f"[BEHAVIOR-ANALYSIS] Success: {str(success).lower()}")

    def behavior_checked(self, scenario: str, name: str, matched: bool) -> None:
        self._emit(f"[BEHAVIOR-CHECK] {name}: {_PASS if matched else _FAIL}")

    def tool_calls_found(self, scenario: str, tool_calls: list[str]) -> None:
        self._emit(f"[TOOL-CALLS] Found tool calls: {', '.join(tool_calls)}")

    def diagnostic_written(self, path: str) -> None:
        self._emit(f"[FILE-OUTPUT] Analysis written to: {path}")

    def diagnostic_write_failed(self, path: str, reason: str) -> None:
        self._emit(f"[FILE-OUTPUT] Failed to write log: {reason}")

    def _emit(self, message: str) -> None:
        try:
            self._sink(message)
        except Exception:  # noqa: BLE001
            typer.echo(message, err=True)
