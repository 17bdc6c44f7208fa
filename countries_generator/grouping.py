"""Group countries by dialing code and enforce the priority rules.

For every dialing code shared by more than one country exactly one of them
must carry priority 1. That country is moved to the end of its group so a
front-to-back lookup only falls back to it after every area-code-bearing
candidate has been tried.

Errors are collected across all groups; any error fails the whole run and
no grouping is returned.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .country_parser import Country


class GroupValidationError(Exception):
    """A dialing code whose group breaks the priority rules."""

    def __init__(self, dial_code: int, message: str):
        self.dial_code = dial_code
        super().__init__(message)


class MissingPriority(GroupValidationError):
    def __init__(self, dial_code: int):
        super().__init__(dial_code, f"No country with priority 1 for +{dial_code}")


class DuplicatePriority(GroupValidationError):
    def __init__(self, dial_code: int, count: int):
        self.count = count
        super().__init__(dial_code, f"{count} countries with priority 1 for +{dial_code}")


@dataclass
class GroupingResult:
    """Outcome of group_and_validate: a grouping or the list of errors, never both."""

    groups: dict[int, tuple[Country, ...]] | None
    errors: list[GroupValidationError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.groups is not None


def group_countries(countries: Iterable[Country]) -> dict[int, list[Country]]:
    """Bucket countries by dial code, keeping first-seen order."""
    groups: dict[int, list[Country]] = {}
    for country in countries:
        groups.setdefault(country.dial_code, []).append(country)
    return groups


def order_group(
    dial_code: int, members: list[Country],
) -> tuple[tuple[Country, ...] | None, GroupValidationError | None]:
    """Move the single priority country of a group to the end.

    Returns (ordered members, None) or (None, error).
    """
    if len(members) == 1:
        return tuple(members), None

    priority = [c for c in members if c.is_priority]
    if not priority:
        return None, MissingPriority(dial_code)
    if len(priority) > 1:
        return None, DuplicatePriority(dial_code, len(priority))

    others = [c for c in members if not c.is_priority]
    return tuple(others + priority), None


def group_and_validate(countries: Iterable[Country]) -> GroupingResult:
    """Group, validate and reorder the country list."""
    ordered: dict[int, tuple[Country, ...]] = {}
    errors: list[GroupValidationError] = []

    for dial_code, members in group_countries(countries).items():
        group, error = order_group(dial_code, members)
        if error is not None:
            errors.append(error)
        else:
            ordered[dial_code] = group

    if errors:
        return GroupingResult(groups=None, errors=errors)
    return GroupingResult(groups=ordered)
