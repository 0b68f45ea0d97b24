"""Tests for ScenarioValidator — events, diagnostics, and verdicts."""

import json
from datetime import UTC, datetime
from pathlib import Path

import pytest

from scenario_eval.check.domain.check import KeywordCheck
from scenario_eval.check.domain.defaults import BUILD_FIX_CHECKS
from scenario_eval.config.domain.diagnostics import DiagnosticsConfig
from scenario_eval.config.domain.scenario import ScenarioConfig
from scenario_eval.evaluation.application.validator import ScenarioValidator
from scenario_eval.evaluation.domain.errors import InvalidChecklistError
from scenario_eval.evaluation.domain.verdict import ScenarioVerdict
from scenario_eval.evaluation.infrastructure.diagnostic_writer import (
    JsonDiagnosticWriter,
)
from scenario_eval.transcript.domain.transcript import Transcript
from tests.evaluation.fake_observer import FakeEvaluationObserver

FULL_TRANSCRIPT = (
    "I'll run dotnet build in the terminal. I see error CS0103. "
    "Let me edit the file to fix it, then build again. run_in_terminal(dotnet build)"
)
IDLE_TRANSCRIPT = "Looking at the file."

_FIXED_TIME = datetime(2025, 6, 1, 12, 0, 0, tzinfo=UTC)


def _fixed_clock() -> datetime:
    return _FIXED_TIME


def _make_validator(
    observer: FakeEvaluationObserver,
    diagnostics_path: Path | None = None,
) -> ScenarioValidator:
    writer = None
    if diagnostics_path is not None:
        writer = JsonDiagnosticWriter(path=diagnostics_path, observer=observer)
    return ScenarioValidator(
        checks=BUILD_FIX_CHECKS,
        threshold=2,
        observer=observer,
        diagnostic_writer=writer,
        clock=_fixed_clock,
    )


class TestVerdict:
    def test_passing_transcript(self) -> None:
        validator = _make_validator(observer=FakeEvaluationObserver())

        verdict = validator.validate(full_response=FULL_TRANSCRIPT)

        assert verdict == ScenarioVerdict(success=True, error_message=None)

    def test_failing_transcript_carries_message(self) -> None:
        validator = _make_validator(observer=FakeEvaluationObserver())

        verdict = validator.validate(full_response=IDLE_TRANSCRIPT)

        assert verdict.success is False
        assert verdict.error_message == (
            "Expected agent to demonstrate C# build-fix behaviors, but only"
            " 0 out of 5 behaviors were found"
        )

    def test_runner_metadata_is_ignored(self) -> None:
        validator = _make_validator(observer=FakeEvaluationObserver())

        with_metadata = validator.validate(
            full_response=IDLE_TRANSCRIPT,
            question="Fix the build",
            turn=3,
            index=1,
            commands=["dotnet build"],
            confirmations=[{"accepted": True}],
            file_trees=[{"Program.cs": "..."}],
        )

        assert with_metadata == validator.validate(full_response=IDLE_TRANSCRIPT)

    def test_invalid_threshold_rejected_at_construction(self) -> None:
        with pytest.raises(InvalidChecklistError):
            ScenarioValidator(
                checks=BUILD_FIX_CHECKS,
                threshold=6,
                observer=FakeEvaluationObserver(),
            )


class TestEvents:
    def test_emits_start_analysis_checks_and_tool_calls(self) -> None:
        observer = FakeEvaluationObserver()
        validator = _make_validator(observer=observer)

        validator.validate(full_response=FULL_TRANSCRIPT)

        assert observer.started[0].response_length == len(FULL_TRANSCRIPT)
        assert observer.analyzed[0].matched_count == 5
        assert observer.analyzed[0].success is True
        assert [e.name for e in observer.checked] == [
            check.name for check in BUILD_FIX_CHECKS
        ]
        assert all(e.matched for e in observer.checked)
        assert observer.tool_calls[0].tool_calls == ["run_in_terminal("]

    def test_start_preview_is_capped_at_200_chars(self) -> None:
        observer = FakeEvaluationObserver()
        validator = _make_validator(observer=observer)

        validator.validate(full_response="x" * 1000)

        assert observer.started[0].response_preview == "x" * 200

    def test_events_carry_scenario_name(self) -> None:
        observer = FakeEvaluationObserver()
        validator = ScenarioValidator(
            checks=[KeywordCheck.any_of("hello", "hello")],
            threshold=1,
            observer=observer,
            scenario_name="greeting",
        )

        validator.validate(full_response="hello")

        assert observer.analyzed[0].scenario == "greeting"


class TestDiagnostics:
    def test_writes_diagnostic_record(self, tmp_path: Path) -> None:
        path = tmp_path / "debug-analysis.json"
        observer = FakeEvaluationObserver()
        validator = _make_validator(observer=observer, diagnostics_path=path)

        validator.validate(full_response=FULL_TRANSCRIPT)

        parsed = json.loads(path.read_text(encoding="utf-8"))
        assert parsed["matchedCount"] == 5
        assert parsed["totalCount"] == 5
        assert parsed["success"] is True
        assert parsed["extractedToolCalls"] == ["run_in_terminal("]
        assert parsed["fullResponse"] == FULL_TRANSCRIPT
        assert parsed["timestamp"].startswith("2025-06-01T12:00:00")

    def test_write_failure_does_not_change_verdict(self, tmp_path: Path) -> None:
        blocked = tmp_path / "blocked"
        blocked.mkdir()
        observer = FakeEvaluationObserver()
        validator = _make_validator(observer=observer, diagnostics_path=blocked)

        verdict = validator.validate(full_response=FULL_TRANSCRIPT)

        assert verdict.success is True
        assert len(observer.write_failed) == 1

    def test_unserializable_transcript_still_gets_a_verdict(
        self, tmp_path: Path
    ) -> None:
        path = tmp_path / "debug-analysis.json"
        observer = FakeEvaluationObserver()
        validator = _make_validator(observer=observer, diagnostics_path=path)

        verdict = validator.validate(full_response="dotnet build error CS1 \udcff")

        assert verdict == ScenarioVerdict(success=True, error_message=None)
        assert len(observer.write_failed) == 1
        assert observer.write_failed[0].path == str(path)
        assert observer.written == []
        assert not path.exists()

    def test_no_writer_means_no_file(self, tmp_path: Path) -> None:
        observer = FakeEvaluationObserver()
        validator = _make_validator(observer=observer)

        validator.validate(full_response=FULL_TRANSCRIPT)

        assert observer.written == []
        assert list(tmp_path.iterdir()) == []


class TestFromConfig:
    def test_uses_config_values(self, tmp_path: Path) -> None:
        config = ScenarioConfig(
            name="custom",
            behavior_label="custom",
            threshold=1,
            checks=[KeywordCheck.any_of("hello", "hello")],
            diagnostics=DiagnosticsConfig(path=tmp_path / "d.json", preview_chars=3),
        )
        observer = FakeEvaluationObserver()
        validator = ScenarioValidator.from_config(
            config=config, observer=observer, clock=_fixed_clock
        )

        verdict = validator.validate(full_response="goodbye")

        assert verdict.error_message == (
            "Expected agent to demonstrate custom behaviors, but only"
            " 0 out of 1 behaviors were found"
        )
        parsed = json.loads((tmp_path / "d.json").read_text(encoding="utf-8"))
        assert parsed["responsePreview"] == "goo"
        assert parsed["scenario"] == "custom"

    def test_disabled_diagnostics_write_nothing(self, tmp_path: Path) -> None:
        config = ScenarioConfig(
            name="quiet",
            diagnostics=DiagnosticsConfig(enabled=False, path=tmp_path / "d.json"),
        )
        validator = ScenarioValidator.from_config(
            config=config, observer=FakeEvaluationObserver()
        )

        validator.validate(full_response=FULL_TRANSCRIPT)

        assert not (tmp_path / "d.json").exists()

    def test_keep_history_writes_copies(self, tmp_path: Path) -> None:
        config = ScenarioConfig(
            name="history",
            diagnostics=DiagnosticsConfig(
                path=tmp_path / "debug-analysis.json", keep_history=True
            ),
        )
        validator = ScenarioValidator.from_config(
            config=config, observer=FakeEvaluationObserver(), clock=_fixed_clock
        )

        validator.validate(full_response=FULL_TRANSCRIPT)

        assert (tmp_path / "history").is_dir()
        assert len(list((tmp_path / "history").iterdir())) == 1


class TestValidateMany:
    def test_verdicts_in_input_order(self) -> None:
        validator = _make_validator(observer=FakeEvaluationObserver())

        report = validator.validate_many(
            [
                Transcript(transcript_id="full", text=FULL_TRANSCRIPT),
                Transcript(transcript_id="idle", text=IDLE_TRANSCRIPT),
            ]
        )

        assert [v.transcript_id for v in report.verdicts] == ["full", "idle"]
        assert report.passed == 1
        assert report.total == 2
        assert report.scenario == "csharp-build-fix"
