"""EvaluationResult — the verdict of scoring one transcript against a checklist."""

from typing import Self

from pydantic import BaseModel, Field, model_validator


class CheckOutcome(BaseModel, frozen=True):
    """Whether a single named check matched the transcript."""

    name: str
    matched: bool


class EvaluationResult(BaseModel, frozen=True):
    """Immutable result of one ``evaluate`` call.

    ``outcomes`` preserves checklist order; ``matched_names`` is the subset of
    outcome names that matched, in the same order.
    """

    success: bool
    matched_count: int = Field(ge=0)
    total_count: int = Field(ge=1)
    matched_names: list[str]
    outcomes: list[CheckOutcome]
    error_message: str | None = None

    @model_validator(mode="after")
    def _counts_are_consistent(self) -> Self:
        if self.matched_count > self.total_count:
            raise ValueError("matched_count cannot exceed total_count")
        if self.matched_count != len(self.matched_names):
            raise ValueError("matched_count must equal the number of matched names")
        if len(self.outcomes) != self.total_count:
            raise ValueError("there must be exactly one outcome per check")
        if self.success and self.error_message is not None:
            raise ValueError("a successful result carries no error message")
        if not self.success and self.error_message is None:
            raise ValueError("a failed result must carry an error message")
        return self
