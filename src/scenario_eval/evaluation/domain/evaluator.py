"""Scores a transcript against an ordered checklist of behavior checks."""

from collections.abc import Sequence

from scenario_eval.check.domain.check import BehaviorCheck
from scenario_eval.evaluation.domain.errors import InvalidChecklistError
from scenario_eval.evaluation.domain.result import CheckOutcome, EvaluationResult


def evaluate(
    transcript: str,
    checks: Sequence[BehaviorCheck],
    threshold: int,
    *,
    behavior_label: str = "expected",
) -> EvaluationResult:
    """
    Apply each check to the transcript, in order, and decide pass/fail.

    The run passes when at least ``threshold`` checks match. This function is
    pure: it performs no I/O and keeps no state, so identical inputs always
    produce equal results. Absence of expected text is a non-match, never an
    error.

    Raises:
        InvalidChecklistError: if ``checks`` is empty or ``threshold`` lies
            outside ``[1, len(checks)]``.
    """
    validate_checklist(checks=checks, threshold=threshold)

    outcomes = [
        CheckOutcome(name=check.name, matched=check.test(transcript))
        for check in checks
    ]
    matched_names = [outcome.name for outcome in outcomes if outcome.matched]
    matched_count = len(matched_names)
    total_count = len(outcomes)
    success = matched_count >= threshold

    return EvaluationResult(
        success=success,
        matched_count=matched_count,
        total_count=total_count,
        matched_names=matched_names,
        outcomes=outcomes,
        error_message=None
        if success
        else failure_message(
            behavior_label=behavior_label,
            matched_count=matched_count,
            total_count=total_count,
        ),
    )


def failure_message(behavior_label: str, matched_count: int, total_count: int) -> str:
    return (
        f"Expected agent to demonstrate {behavior_label} behaviors, but only"
        f" {matched_count} out of {total_count} behaviors were found"
    )


def validate_checklist(checks: Sequence[BehaviorCheck], threshold: int) -> None:
    if not checks:
        raise InvalidChecklistError("checklist is empty")
    if not 1 <= threshold <= len(checks):
        raise InvalidChecklistError(
            f"threshold {threshold} must be between 1 and {len(checks)}"
        )
