"""Generate JSON Schema for entity definition YAML authoring and validation."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from jsonapi_schemagen.definition.models import EntityDefinition
from jsonapi_schemagen.introspection.static import ModelSpec


def build_schema() -> dict:
    schema = EntityDefinition.model_json_schema()
    # YAML files spell the model key ``model`` and accept a static column table or an import path.
    properties = schema.get("properties", {})
    properties.pop("orm_model", None)
    model_schema = ModelSpec.model_json_schema()
    defs = schema.setdefault("$defs", {})
    defs.update(model_schema.pop("$defs", {}))
    defs["ModelSpec"] = model_schema
    properties["model"] = {
        "anyOf": [
            {"type": "string", "pattern": r"^[\w.]+:\w+$"},
            {"$ref": "#/$defs/ModelSpec"},
            {"type": "null"},
        ],
        "default": None,
    }
    return schema


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("docs/definition.schema.json"),
        help="Path to write the generated JSON schema.",
    )
    args = parser.parse_args()

    output_path = args.output
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(build_schema(), indent=2) + "\n", encoding="utf-8")
    print(f"Wrote definition schema to {output_path}")


if __name__ == "__main__":
    main()
