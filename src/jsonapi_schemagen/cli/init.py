"""CLI handler for ``schemagen init``: writes a starter definition file."""

from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path

_TEMPLATE = """\
name: {name}
# schema_name: {pascal}

model:
  columns:
    - {{name: id, type: integer}}
    - {{name: name, type: string}}
    - {{name: created_at, type: datetime}}

relationships:
  belongs_to: {{}}
  has_many: {{}}

nullable_attributes: []
excluded_response_attributes: []
optional_create_request_attributes: []
optional_update_request_attributes: []
excluded_create_request_attributes: [id, created_at]
excluded_update_request_attributes: [id, created_at]
"""


def render_template(name: str) -> str:
    pascal = "".join(part.capitalize() for part in name.split("_"))
    return _TEMPLATE.format(name=name, pascal=pascal)


def run_init(args: Namespace) -> None:
    name = args.name.strip()
    if not name:
        print("Error: entity name must not be empty", file=sys.stderr)
        sys.exit(1)

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / f"{name}.yaml"
    if path.exists():
        print(f"Skipping {path}: file already exists", file=sys.stderr)
        return

    path.write_text(render_template(name), encoding="utf-8")
    print(f"Created {path}")
