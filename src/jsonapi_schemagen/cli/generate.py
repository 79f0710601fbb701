"""CLI handler for ``schemagen generate``."""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from pathlib import Path

from jsonapi_schemagen.config import SchemaConfig, load_config_file
from jsonapi_schemagen.errors import SchemaGenError
from jsonapi_schemagen.generator import SchemaGenerator
from jsonapi_schemagen.telemetry import (
    FanOutTelemetrySink,
    LoggerTelemetrySink,
    SummaryTelemetrySink,
)

logger = logging.getLogger(__name__)


def run_generate(args: Namespace) -> None:
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    definitions_dir = Path(args.definitions)
    if not definitions_dir.is_dir():
        print(f"Error: definition directory does not exist: {definitions_dir}", file=sys.stderr)
        sys.exit(1)

    try:
        config = load_config_file(args.config) if args.config else SchemaConfig()
    except (OSError, ValueError, TypeError) as exc:
        print(f"Error: cannot read config {args.config}: {exc}", file=sys.stderr)
        sys.exit(1)

    summary = SummaryTelemetrySink()
    generator = SchemaGenerator.from_directory(
        definitions_dir,
        config,
        telemetry_sink=FanOutTelemetrySink(LoggerTelemetrySink(level=logging.DEBUG), summary),
    )
    if len(generator.registry) == 0:
        print("No entity definitions loaded.", file=sys.stderr)
        sys.exit(1)

    try:
        schemas = generator.aggregate(args.entity or None)
    except (SchemaGenError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    logger.info("%s", summary.describe())

    document = json.dumps(schemas, indent=args.indent or None)
    if args.output:
        Path(args.output).write_text(document + "\n", encoding="utf-8")
        print(f"Wrote {len(schemas)} schemas to {args.output}", file=sys.stderr)
    else:
        print(document)
