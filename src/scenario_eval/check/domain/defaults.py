"""The built-in checklist for the iterative C# build-fix scenario."""

from scenario_eval.check.domain.check import KeywordCheck

DEFAULT_THRESHOLD = 2
DEFAULT_BEHAVIOR_LABEL = "C# build-fix"

# Order is significant: outcomes and diagnostics are reported in this order.
BUILD_FIX_CHECKS: tuple[KeywordCheck, ...] = (
    KeywordCheck.any_of("dotnet build command", "dotnet build", "building", "compile"),
    KeywordCheck.any_of("run_in_terminal usage", "run_in_terminal", "terminal"),
    KeywordCheck(name="error analysis", all_of=[["error"], ["CS", "build"]]),
    KeywordCheck.any_of("file editing", "replace_string_in_file", "edit", "fix"),
    KeywordCheck(name="retry building", all_of=[["build"], ["again"]]),
)
