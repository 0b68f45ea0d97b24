"""Behavior checks: named predicates applied to an agent transcript."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, TypeAlias

from pydantic import BaseModel, Field, field_validator

TermGroup: TypeAlias = list[str]


class BehaviorCheck(Protocol):
    """Structural interface satisfied by every behavior check.

    A check is a named, total predicate over the transcript text. It must
    never raise for any string input, including the empty string.
    """

    @property
    def name(self) -> str: ...

    def test(self, text: str) -> bool: ...


class KeywordCheck(BaseModel, frozen=True):
    """A check expressed as data: a conjunction of keyword alternatives.

    Matches when every group in ``all_of`` has at least one term that occurs
    in the text. Terms are literal, case-sensitive substrings: "Building"
    does not satisfy the term "building".
    """

    name: str = Field(min_length=1)
    all_of: list[TermGroup] = Field(min_length=1)

    @field_validator("all_of")
    @classmethod
    def _groups_are_non_empty(cls, groups: list[TermGroup]) -> list[TermGroup]:
        for position, group in enumerate(groups):
            if not group:
                raise ValueError(f"term group {position} is empty")
            if any(term == "" for term in group):
                raise ValueError(f"term group {position} contains an empty term")
        return groups

    @classmethod
    def any_of(cls, name: str, *terms: str) -> "KeywordCheck":
        """Build a check that matches when any one of ``terms`` is present."""
        return cls(name=name, all_of=[list(terms)])

    def test(self, text: str) -> bool:
        return all(any(term in text for term in group) for group in self.all_of)


@dataclass(frozen=True)
class PredicateCheck:
    """A check backed by an arbitrary callable, for checklists built in code."""

    name: str
    predicate: Callable[[str], bool]

    def test(self, text: str) -> bool:
        return bool(self.predicate(text))
