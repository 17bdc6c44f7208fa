"""Build Jinja2 template context from a validated grouping.

Renders each country as a Java constructor expression and assembles the
full context dict for Countries.java.j2.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from .country_parser import Country

JAVA_PACKAGE = "com.github.ialokim.phonefield"
CLASS_NAME = "Countries"

# Column of `COUNTRIES.put(` inside the static initialiser
_PUT_INDENT = 8
# Column of each entry inside Arrays.asList(...)
_ENTRY_INDENT = 12


def _java_string(value: str) -> str:
    return f'"{value}"'


def _java_bool(priority: int) -> str:
    return "true" if priority == 1 else "false"


def render_country(country: Country, indent: int) -> str:
    """Render a Country as a Java constructor call.

    `indent` is the column the expression starts at; multi-line area code
    lists are indented relative to it.
    """
    start = (
        f"new Country({_java_string(country.iso2)}, {country.dial_code}, "
        f"{_java_bool(country.priority)}"
    )
    if country.area_codes is None:
        return start + ")"

    if len(country.area_codes) == 1:
        # Collections.singletonList is cheaper than Arrays.asList for one item
        return f"{start}, Collections.singletonList({_java_string(country.area_codes[0])}))"

    pad = " " * (indent + 4)
    lines = [f"{start}, Arrays.asList("]
    last = len(country.area_codes) - 1
    for idx, code in enumerate(country.area_codes):
        lines.append(pad + _java_string(code) + ("" if idx == last else ","))
    lines.append(" " * indent + "))")
    return "\n".join(lines)


def build_group(dial_code: int, countries: Sequence[Country]) -> dict[str, Any]:
    """Build the template entry for one dialing code."""
    is_single = len(countries) == 1
    indent = _PUT_INDENT if is_single else _ENTRY_INDENT
    return {
        "dial_code": dial_code,
        "is_single": is_single,
        "entries": [render_country(c, indent) for c in countries],
        "iso2s": [c.iso2 for c in countries],
    }


def build_context(groups: Mapping[int, Sequence[Country]]) -> dict[str, Any]:
    """Build the full template context from the grouped countries."""
    rendered = [build_group(code, members) for code, members in groups.items()]
    return {
        "package": JAVA_PACKAGE,
        "class_name": CLASS_NAME,
        "groups": rendered,
        "group_count": len(rendered),
        "country_count": sum(len(members) for members in groups.values()),
    }
