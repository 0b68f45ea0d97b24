"""GitHub token discovery: process environment, then .env file, then a prompt."""

from collections.abc import Callable, Mapping
from typing import TypeAlias
from pathlib import Path

from dotenv import dotenv_values

from scenario_eval.credentials.domain.token import (
    TOKEN_VARIABLES,
    GitHubToken,
    TokenSource,
)
from scenario_eval.credentials.infrastructure.errors import MissingCredentialsError

Prompt: TypeAlias = Callable[[], str | None]

DEFAULT_DOTENV_PATH = Path(".env")


def resolve_github_token(
    environ: Mapping[str, str],
    dotenv_path: Path = DEFAULT_DOTENV_PATH,
    prompt: Prompt | None = None,
) -> GitHubToken:
    """
    Resolve a GitHub token once, before any scenario is run.

    Both variable names are accepted interchangeably; within one source the
    first name in TOKEN_VARIABLES wins. Empty values are treated as unset.

    Raises:
        MissingCredentialsError: if no source yields a token.
    """
    token = _from_mapping(environ, source="env")
    if token is not None:
        return token

    if dotenv_path.is_file():
        values = {k: v for k, v in dotenv_values(dotenv_path).items() if v is not None}
        token = _from_mapping(values, source="dotenv")
        if token is not None:
            return token

    if prompt is not None:
        answer = (prompt() or "").strip()
        if answer:
            return GitHubToken(
                value=answer, source="prompt", variable=TOKEN_VARIABLES[0]
            )

    raise MissingCredentialsError(dotenv_path=dotenv_path)


def _from_mapping(values: Mapping[str, str], source: TokenSource) -> GitHubToken | None:
    for variable in TOKEN_VARIABLES:
        value = values.get(variable, "").strip()
        if value:
            return GitHubToken(value=value, source=source, variable=variable)
    return None
