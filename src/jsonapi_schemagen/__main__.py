"""CLI entry point: python -m jsonapi_schemagen <command>."""

from __future__ import annotations

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="schemagen",
        description="JSON:API JSON-Schema generator",
    )
    sub = parser.add_subparsers(dest="command")

    gen = sub.add_parser("generate", help="Generate named schemas for entity definitions")
    gen.add_argument("--definitions", required=True, help="Path to definition YAML directory")
    gen.add_argument("--config", default="", help="Path to a SchemaConfig YAML file")
    gen.add_argument(
        "--entity",
        action="append",
        default=[],
        help="Only generate this entity (repeatable; default: all)",
    )
    gen.add_argument("--output", default="", help="Write JSON here instead of stdout")
    gen.add_argument("--indent", type=int, default=2)
    gen.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )

    val = sub.add_parser("validate", help="Check definition YAML files for mistakes")
    val.add_argument("--definitions", required=True, help="Path to definition YAML directory")
    val.add_argument("--json", action="store_true", default=False, help="Output as JSON")

    init = sub.add_parser("init", help="Write a starter definition YAML file")
    init.add_argument("name", help="Entity name (JSON:API type)")
    init.add_argument("--output-dir", default=".", help="Directory to write into")

    args = parser.parse_args(argv)

    if args.command == "generate":
        from jsonapi_schemagen.cli.generate import run_generate
        run_generate(args)
    elif args.command == "validate":
        from jsonapi_schemagen.cli.validate import run_validate
        run_validate(args)
    elif args.command == "init":
        from jsonapi_schemagen.cli.init import run_init
        run_init(args)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
