"""Error types raised by the evaluation domain."""

from scenario_eval.core.errors import ScenarioEvalError


class InvalidChecklistError(ScenarioEvalError):
    """Raised when a checklist or threshold cannot be used for scoring."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to evaluate transcript: {reason}")
