"""Error types raised by transcript infrastructure."""

from scenario_eval.core.errors import ScenarioEvalError


class TranscriptLoadError(ScenarioEvalError):
    """Raised when a transcript file cannot be read or a batch file is malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to load transcript: {reason}")
