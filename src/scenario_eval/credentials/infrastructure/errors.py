"""Error types raised by credential resolution."""

from pathlib import Path

from scenario_eval.core.errors import ScenarioEvalError
from scenario_eval.credentials.domain.token import TOKEN_VARIABLES


class MissingCredentialsError(ScenarioEvalError):
    """Raised when no GitHub token is found in the environment, .env file, or prompt."""

    def __init__(self, dotenv_path: Path) -> None:
        self.dotenv_path = dotenv_path
        names = " or ".join(TOKEN_VARIABLES)
        super().__init__(
            f"Failed to resolve GitHub token: set {names} in the environment"
            f" or in {dotenv_path}"
        )
