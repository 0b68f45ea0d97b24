"""ScenarioConfig aggregate — the root configuration of a scoring scenario."""

from typing import Self

from pydantic import BaseModel, Field, model_validator

from scenario_eval.check.domain.check import KeywordCheck
from scenario_eval.check.domain.defaults import (
    BUILD_FIX_CHECKS,
    DEFAULT_BEHAVIOR_LABEL,
    DEFAULT_THRESHOLD,
)
from scenario_eval.config.domain.diagnostics import DiagnosticsConfig

DEFAULT_SCENARIO_NAME = "csharp-build-fix"


class ScenarioConfig(BaseModel, frozen=True):
    """Root configuration for scoring transcripts of one scenario."""

    name: str = Field(min_length=1)
    description: str = "Fix C# project build errors iteratively"
    language: str = "csharp"
    behavior_label: str = Field(default=DEFAULT_BEHAVIOR_LABEL, min_length=1)
    threshold: int = Field(default=DEFAULT_THRESHOLD, ge=1)
    checks: list[KeywordCheck] = Field(
        default_factory=lambda: list(BUILD_FIX_CHECKS), min_length=1
    )
    diagnostics: DiagnosticsConfig = DiagnosticsConfig()

    @model_validator(mode="after")
    def _threshold_within_checklist(self) -> Self:
        if self.threshold > len(self.checks):
            raise ValueError(
                f"threshold {self.threshold} exceeds the number of checks"
                f" ({len(self.checks)})"
            )
        names = [check.name for check in self.checks]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"duplicate check names: {', '.join(duplicates)}")
        return self

    @classmethod
    def default(cls) -> "ScenarioConfig":
        """The built-in C# build-fix scenario."""
        return cls(name=DEFAULT_SCENARIO_NAME)
