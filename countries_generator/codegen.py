"""Render templates and write generated output.

Takes the context from context_builder and produces generated/Countries.java.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

TEMPLATE_DIR = Path(__file__).parent.parent / "templates"
OUTPUT_DIR = Path(__file__).parent.parent / "generated"
TEMPLATE_NAME = "Countries.java.j2"


def render(context: dict[str, Any]) -> str:
    """Render the Countries template to a string."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )
    template = env.get_template(TEMPLATE_NAME)
    return template.render(**context)


def generate(context: dict[str, Any], output_dir: Path | None = None) -> Path:
    """Render the Countries template and write it to <output_dir>/<class_name>.java."""
    output = render(context)

    out_dir = output_dir or OUTPUT_DIR
    out_dir.mkdir(parents=True, exist_ok=True)
    output_path = out_dir / f"{context['class_name']}.java"
    output_path.write_text(output, encoding="utf-8")

    print(
        f"Generated {output_path} ({context['country_count']} countries,"
        f" {context['group_count']} dial codes)"
    )
    return output_path
