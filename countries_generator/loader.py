"""Load the raw country list.

Reads data/countries.json and returns the decoded records untouched.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

DATA_PATH = Path(__file__).parent.parent / "data" / "countries.json"


def load_countries(path: Path | None = None) -> Any:
    """Load the country records from disk.

    Returns the decoded JSON as-is, normally a list of raw record dicts;
    shape checks happen in country_parser.
    """
    data_file = path or DATA_PATH
    with open(data_file, encoding="utf-8") as f:
        return json.load(f)
