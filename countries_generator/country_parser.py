"""Turn raw country records into Country values.

Handles:
- iso2 as a non-empty string safe inside a Java literal (uniqueness not required)
- dialCode as int or numeric string, normalised to int
- priority as 0/1 (JSON booleans accepted)
- areaCodes absent/null vs. a non-empty list of digit strings

Every malformed record is reported, not just the first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class CountryDataError(ValueError):
    """Raised when the country list contains malformed records."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__(f"{len(problems)} malformed country record(s)")


@dataclass(frozen=True)
class Country:
    iso2: str
    dial_code: int
    priority: int
    area_codes: tuple[str, ...] | None = None

    @property
    def is_priority(self) -> bool:
        return self.priority == 1


def _parse_iso2(value: Any) -> str:
    # Emitted inside a Java string literal
    if not isinstance(value, str) or not value or '"' in value or "\\" in value:
        raise ValueError(f"iso2 must be a non-empty string without quotes or backslashes, got {value!r}")
    return value


def _parse_dial_code(value: Any) -> int:
    # bool is an int subclass
    if isinstance(value, bool):
        raise ValueError(f"dialCode must be numeric, got {value!r}")
    if isinstance(value, str):
        if not value.isdigit():
            raise ValueError(f"dialCode must be numeric, got {value!r}")
        value = int(value)
    if not isinstance(value, int) or value <= 0:
        raise ValueError(f"dialCode must be a positive integer, got {value!r}")
    return value


def _parse_priority(value: Any) -> int:
    if value not in (0, 1) or not isinstance(value, int):
        raise ValueError(f"priority must be 0 or 1, got {value!r}")
    return int(value)


def _parse_area_codes(value: Any) -> tuple[str, ...] | None:
    if value is None:
        return None
    if not isinstance(value, list) or not value:
        raise ValueError(f"areaCodes must be null or a non-empty list, got {value!r}")
    for code in value:
        if not isinstance(code, str) or not code.isdigit():
            raise ValueError(f"area code must be a digit string, got {code!r}")
    return tuple(value)


def parse_country(record: Any, index: int) -> Country:
    """Validate one raw record and build a Country from it."""
    if not isinstance(record, dict):
        raise CountryDataError([f"record {index}: expected an object, got {type(record).__name__}"])

    missing = [key for key in ("iso2", "dialCode", "priority") if key not in record]
    if missing:
        raise CountryDataError([f"record {index}: missing field(s) {', '.join(missing)}"])

    try:
        return Country(
            iso2=_parse_iso2(record["iso2"]),
            dial_code=_parse_dial_code(record["dialCode"]),
            priority=_parse_priority(record["priority"]),
            area_codes=_parse_area_codes(record.get("areaCodes")),
        )
    except ValueError as exc:
        label = record.get("iso2", "?")
        raise CountryDataError([f"record {index} ({label}): {exc}"]) from exc


def parse_countries(records: Any) -> list[Country]:
    """Parse the full country list, preserving input order."""
    if not isinstance(records, list):
        raise CountryDataError([f"expected a list of countries, got {type(records).__name__}"])

    countries: list[Country] = []
    problems: list[str] = []
    for index, record in enumerate(records):
        try:
            countries.append(parse_country(record, index))
        except CountryDataError as exc:
            problems.extend(exc.problems)

    if problems:
        raise CountryDataError(problems)
    return countries
