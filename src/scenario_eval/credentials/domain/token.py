"""GitHub token value object and where the token was found."""

from typing import Literal, TypeAlias

from pydantic import BaseModel, SecretStr

TOKEN_VARIABLES: tuple[str, ...] = ("GITHUB_OAUTH_TOKEN", "GITHUB_PAT")

TokenSource: TypeAlias = Literal["env", "dotenv", "prompt"]


class GitHubToken(BaseModel, frozen=True):
    """A resolved token. ``value`` never appears in repr or logs."""

    value: SecretStr
    source: TokenSource
    variable: str

    def masked(self) -> str:
        """Show the first four characters only, e.g. ``ghp_****``."""
        raw = self.value.get_secret_value()
        return f"{raw[:4]}****" if len(raw) > 4 else "****"
