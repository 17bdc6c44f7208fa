"""Shared fixtures for the generator tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from countries_generator import codegen, loader
from countries_generator.country_parser import Country


@pytest.fixture
def country() -> Callable[..., Country]:
    """Build a Country with short keyword arguments.

    Usage::

        us = country("US", 1, 1)
        ca = country("CA", 1, 0, ["204", "226"])
    """
    def _make(iso2: str, dial_code: int, priority: int = 0, area_codes: list[str] | None = None) -> Country:
        return Country(
            iso2=iso2,
            dial_code=dial_code,
            priority=priority,
            area_codes=tuple(area_codes) if area_codes is not None else None,
        )
    return _make


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Callable[[list[Any]], Path]:
    """Point the loader and codegen at a temporary data file and output dir.

    Returns a callable that writes the given records as the country list
    and returns the output directory.
    """
    data_path = tmp_path / "countries.json"
    output_dir = tmp_path / "generated"
    monkeypatch.setattr(loader, "DATA_PATH", data_path)
    monkeypatch.setattr(codegen, "OUTPUT_DIR", output_dir)

    def _write(records: list[Any]) -> Path:
        data_path.write_text(json.dumps(records))
        return output_dir
    return _write
