"""${ENV_VAR} and ${ENV_VAR:-default} expansion over raw scenario data."""

import os
import re
from collections.abc import Iterator
from typing import TypeAlias

_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}")

RawValue: TypeAlias = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def _iter_strings(data: RawValue) -> Iterator[str]:
    if isinstance(data, str):
        yield data
    elif isinstance(data, list):
        for item in data:
            yield from _iter_strings(item)
    elif isinstance(data, dict):
        for value in data.values():
            yield from _iter_strings(value)


def collect_missing_vars(data: RawValue) -> list[str]:
    """
    Names of referenced variables that are unset and carry no ``:-`` default,
    unique and in order of first appearance.
    """
    missing: list[str] = []
    for text in _iter_strings(data):
        for match in _ENV_VAR_PATTERN.finditer(text):
            var_name, default = match.group(1), match.group(2)
            if default is None and var_name not in os.environ:
                missing.append(var_name)
    return list(dict.fromkeys(missing))


def _substitute(match: re.Match[str]) -> str:
    var_name, default = match.group(1), match.group(2)
    return os.environ.get(var_name, default or "")


def interpolate(data: RawValue) -> RawValue:
    """
    Return a copy of ``data`` with every variable reference expanded.

    Run `collect_missing_vars` first; a variable that is neither set nor
    defaulted expands to the empty string here.
    """
    if isinstance(data, str):
        return _ENV_VAR_PATTERN.sub(_substitute, data)
    if isinstance(data, list):
        return [interpolate(item) for item in data]
    if isinstance(data, dict):
        return {key: interpolate(value) for key, value in data.items()}
    return data
