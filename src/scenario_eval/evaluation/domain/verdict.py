"""ScenarioVerdict and BatchReport — what the harness receives back."""

from pydantic import BaseModel, Field


class ScenarioVerdict(BaseModel, frozen=True):
    """Pass/fail outcome returned to the scenario test runner."""

    success: bool
    error_message: str | None = None


class TranscriptVerdict(BaseModel, frozen=True):
    """A verdict tagged with the transcript it was computed for."""

    transcript_id: str = Field(min_length=1)
    verdict: ScenarioVerdict


class BatchReport(BaseModel, frozen=True):
    """Verdicts for a batch of transcripts, in input order."""

    scenario: str
    verdicts: list[TranscriptVerdict]

    @property
    def total(self) -> int:
        return len(self.verdicts)

    @property
    def passed(self) -> int:
        return sum(1 for item in self.verdicts if item.verdict.success)

    @property
    def all_passed(self) -> bool:
        return self.passed == self.total
