"""CLI handler for ``schemagen validate``."""

from __future__ import annotations

import json
import sys
from argparse import Namespace

from jsonapi_schemagen.definition.validator import validate_definition_directory


def run_validate(args: Namespace) -> None:
    count, errors = validate_definition_directory(args.definitions)

    if args.json:
        print(json.dumps({"definitions": count, "errors": errors}, indent=2))
    else:
        for err in errors:
            print(f"  {err}")
        status = "OK" if not errors else f"{len(errors)} problem(s)"
        print(f"Checked {count} definition(s): {status}")

    if errors:
        sys.exit(1)
