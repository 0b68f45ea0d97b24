"""DiagnosticRecord — the persisted JSON snapshot of one evaluation."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from scenario_eval.evaluation.domain.result import EvaluationResult

DEFAULT_PREVIEW_CHARS = 500


class DiagnosticRecord(BaseModel):
    """Immutable record of one evaluation's inputs and outputs for offline inspection.

    Serialized with camelCase keys (``responseLength``, ``matchedCount`` ...) so
    the file reads the same as the artifacts produced by the harness.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    timestamp: datetime
    scenario: str
    response_length: int = Field(ge=0)
    matched_count: int = Field(ge=0)
    total_count: int = Field(ge=1)
    success: bool
    matched_names: list[str]
    extracted_tool_calls: list[str]
    response_preview: str
    full_response: str

    @classmethod
    def build(
        cls,
        scenario: str,
        transcript: str,
        result: EvaluationResult,
        tool_calls: list[str],
        timestamp: datetime,
        preview_chars: int = DEFAULT_PREVIEW_CHARS,
    ) -> "DiagnosticRecord":
        return cls(
            timestamp=timestamp,
            scenario=scenario,
            response_length=len(transcript),
            matched_count=result.matched_count,
            total_count=result.total_count,
            success=result.success,
            matched_names=list(result.matched_names),
            extracted_tool_calls=list(tool_calls),
            response_preview=transcript[:preview_chars],
            full_response=transcript,
        )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)
