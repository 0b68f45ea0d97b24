"""Error types raised by config infrastructure."""

from pathlib import Path

from scenario_eval.core.errors import ScenarioEvalError


class MissingEnvVarsError(ScenarioEvalError):
    """Raised when one or more required environment variables are not set."""

    def __init__(self, missing_vars: list[str]) -> None:
        self.missing_vars = missing_vars
        var_list = ", ".join(sorted(missing_vars))
        super().__init__(
            f"Failed to load scenario: missing environment variables: {var_list}"
        )


class ConfigValidationError(ScenarioEvalError):
    """Raised when the loaded scenario fails schema or semantic validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate scenario: {reason}")


class ConfigLoadError(ScenarioEvalError):
    """Raised when the scenario file cannot be opened or parsed."""

    def __init__(self, path: Path, reason: str = "file not found") -> None:
        self.path = path
        super().__init__(f"Failed to load scenario: {reason}: {path}")
