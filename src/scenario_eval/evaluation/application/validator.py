"""Application service a scenario test runner calls once per transcript."""

from collections.abc import Callable, Sequence
from typing import TypeAlias
from datetime import UTC, datetime

from scenario_eval.check.domain.check import BehaviorCheck
from scenario_eval.check.domain.defaults import DEFAULT_BEHAVIOR_LABEL
from scenario_eval.config.domain.scenario import DEFAULT_SCENARIO_NAME, ScenarioConfig
from scenario_eval.evaluation.domain.diagnostic import (
    DEFAULT_PREVIEW_CHARS,
    DiagnosticRecord,
)
from scenario_eval.evaluation.domain.evaluator import evaluate, validate_checklist
from scenario_eval.evaluation.domain.observer import EvaluationObserver
from scenario_eval.evaluation.domain.result import EvaluationResult
from scenario_eval.evaluation.domain.tool_calls import extract_tool_calls
from scenario_eval.evaluation.domain.verdict import (
    BatchReport,
    ScenarioVerdict,
    TranscriptVerdict,
)
from scenario_eval.evaluation.infrastructure.diagnostic_writer import (
    JsonDiagnosticWriter,
)
from scenario_eval.transcript.domain.transcript import Transcript

Clock: TypeAlias = Callable[[], datetime]

# Length of the preview included in the validation.started event.
_LOG_PREVIEW_CHARS = 200


def _utc_now() -> datetime:
    return datetime.now(UTC)


class ScenarioValidator:
    """Scores transcripts for one scenario and reports what it found.

    Scoring itself is delegated to the pure ``evaluate`` function; this class
    layers the side effects on top: observer events, tool-call extraction and
    the diagnostic record. None of those side effects can change the verdict.
    """

    def __init__(
        self,
        checks: Sequence[BehaviorCheck],
        threshold: int,
        observer: EvaluationObserver,
        diagnostic_writer: JsonDiagnosticWriter | None = None,
        behavior_label: str = DEFAULT_BEHAVIOR_LABEL,
        scenario_name: str = DEFAULT_SCENARIO_NAME,
        preview_chars: int = DEFAULT_PREVIEW_CHARS,
        clock: Clock = _utc_now,
    ) -> None:
        validate_checklist(checks=checks, threshold=threshold)
        self._checks = tuple(checks)
        self._threshold = threshold
        self._observer = observer
        self._diagnostic_writer = diagnostic_writer
        self._behavior_label = behavior_label
        self._scenario_name = scenario_name
        self._preview_chars = preview_chars
        self._clock = clock

    @classmethod
    def from_config(
        cls,
        config: ScenarioConfig,
        observer: EvaluationObserver,
        clock: Clock = _utc_now,
    ) -> "ScenarioValidator":
        """Build a validator, and its diagnostic writer if enabled, from config."""
        writer: JsonDiagnosticWriter | None = None
        if config.diagnostics.enabled:
            writer = JsonDiagnosticWriter(
                path=config.diagnostics.path,
                observer=observer,
                history_dir=config.diagnostics.resolved_history_dir(),
            )
        return cls(
            checks=config.checks,
            threshold=config.threshold,
            observer=observer,
            diagnostic_writer=writer,
            behavior_label=config.behavior_label,
            scenario_name=config.name,
            preview_chars=config.diagnostics.preview_chars,
            clock=clock,
        )

    @property
    def scenario_name(self) -> str:
        return self._scenario_name

    def score(self, full_response: str) -> EvaluationResult:
        """Return the raw EvaluationResult without emitting events or writing files."""
        return evaluate(
            transcript=full_response,
            checks=self._checks,
            threshold=self._threshold,
            behavior_label=self._behavior_label,
        )

    def validate(
        self,
        full_response: str,
        question: str = "",
        turn: int = 0,
        index: int = 0,
        commands: Sequence[object] = (),
        confirmations: Sequence[object] = (),
        file_trees: Sequence[object] = (),
    ) -> ScenarioVerdict:
        """
        Score one transcript and return the verdict for the test runner.

        Only ``full_response`` is inspected; the remaining arguments mirror what
        the runner passes and are accepted for signature compatibility.
        """
        scenario = self._scenario_name
        self._observer.validation_started(
            scenario=scenario,
            response_length=len(full_response),
            response_preview=full_response[:_LOG_PREVIEW_CHARS],
        )

        result = self.score(full_response)

        self._observer.behaviors_analyzed(
            scenario=scenario,
            matched_count=result.matched_count,
            total_count=result.total_count,
            success=result.success,
        )
        for outcome in result.outcomes:
            self._observer.behavior_checked(
                scenario=scenario, name=outcome.name, matched=outcome.matched
            )

        tool_calls = extract_tool_calls(full_response)
        self._observer.tool_calls_found(scenario=scenario, tool_calls=tool_calls)

        if self._diagnostic_writer is not None:
            record = DiagnosticRecord.build(
                scenario=scenario,
                transcript=full_response,
                result=result,
                tool_calls=tool_calls,
                timestamp=self._clock(),
                preview_chars=self._preview_chars,
            )
            self._diagnostic_writer.write(record)

        return ScenarioVerdict(success=result.success, error_message=result.error_message)

    def validate_many(self, transcripts: Sequence[Transcript]) -> BatchReport:
        """Validate each transcript in order and collect the verdicts."""
        verdicts = [
            TranscriptVerdict(
                transcript_id=transcript.transcript_id,
                verdict=self.validate(full_response=transcript.text),
            )
            for transcript in transcripts
        ]
        return BatchReport(scenario=self._scenario_name, verdicts=verdicts)
