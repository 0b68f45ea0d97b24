"""Finds ``name(`` tool-call tokens in a transcript, for diagnostics only."""

import re

_TOOL_CALL_PATTERN = re.compile(r"(\w+_\w+|\w+)\(")


def extract_tool_calls(transcript: str) -> list[str]:
    """
    Return every ``identifier(`` token in order of appearance, duplicates kept.

    Each entry includes the trailing parenthesis, e.g. ``"run_in_terminal("``.
    Never used for scoring.
    """
    return [match.group(0) for match in _TOOL_CALL_PATTERN.finditer(transcript)]
