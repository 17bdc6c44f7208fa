"""Entry point: python -m countries_generator

Reads data/countries.json, generates generated/Countries.java.
Nothing is written when the country list is invalid.
"""

from __future__ import annotations

import sys

from .codegen import generate
from .context_builder import build_context
from .country_parser import CountryDataError, parse_countries
from .grouping import group_and_validate
from .loader import load_countries


def main() -> int:
    try:
        countries = parse_countries(load_countries())
    except CountryDataError as exc:
        for problem in exc.problems:
            print(problem, file=sys.stderr)
        print(f"{exc}; nothing generated", file=sys.stderr)
        return 1

    result = group_and_validate(countries)
    if not result.ok:
        for error in result.errors:
            print(error, file=sys.stderr)
        print(f"{len(result.errors)} invalid dial code(s); nothing generated", file=sys.stderr)
        return 1

    context = build_context(result.groups)
    generate(context)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
