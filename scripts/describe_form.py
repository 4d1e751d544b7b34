#!/usr/bin/env python3
"""Command-line entry point: describe one resource and print its form model."""
from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

# Ensure the project root (containing the ``rdf_form`` package) is on ``sys.path``
# so the script can be executed directly without an editable install.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from rdf_form import EngineConfig, FormError, FormSession
from rdf_form.config import parse_languages
from rdf_form.reporting import build_form_report, save_report

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build a typed form from a SPARQL DESCRIBE response")
    parser.add_argument("--endpoint", help="SPARQL endpoint URL (defaults to RDF_FORM_ENDPOINT or DBpedia)")
    parser.add_argument("--iri", help="Resource to describe (defaults to RDF_FORM_RESOURCE)")
    parser.add_argument("--turtle", type=Path, help="Read Turtle from this file instead of querying the endpoint")
    parser.add_argument("--threshold", type=int, help="Length above which untyped literals become text areas")
    parser.add_argument("--languages", help="Comma-separated label language preference, e.g. fr,en")
    parser.add_argument("--exclude-rdf-type", action="store_true", help="Leave rdf:type out of the field list")
    parser.add_argument("--no-post-fallback", action="store_true", help="Do not retry a failed GET with POST")
    parser.add_argument("--timeout", type=float, help="HTTP timeout in seconds")
    parser.add_argument("--report", type=Path, help="Optional JSON report path")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> EngineConfig:
    config = EngineConfig.from_env()
    overrides = {}
    if args.endpoint:
        overrides["endpoint"] = args.endpoint
    if args.iri:
        overrides["resource_iri"] = args.iri
    if args.threshold is not None:
        overrides["textarea_threshold"] = args.threshold
    if args.languages:
        overrides["languages"] = parse_languages(args.languages)
    if args.exclude_rdf_type:
        overrides["exclude_rdf_type"] = True
    if args.no_post_fallback:
        overrides["post_fallback"] = False
    if args.timeout is not None:
        overrides["timeout"] = args.timeout
    return dataclasses.replace(config, **overrides)


def _format_value(value: object) -> str:
    if value is None:
        return "(unset)"
    text = str(value)
    return text if len(text) <= 80 else text[:77] + "..."


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        config = build_config(args)
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    session = FormSession(config)
    try:
        if args.turtle:
            model = session.load_turtle(args.turtle.read_text(encoding="utf-8"), config.resource_iri)
        else:
            model = session.load(config.resource_iri)
    except (FormError, ValueError) as exc:
        logger.error("Describe aborted: %s", exc)
        return 1
    finally:
        session.close()

    print(f"Resource: {model.subject}")
    if model.types:
        print("Types:")
        for info in model.types:
            line = f"- {info.label} ({info.iri})"
            if info.description:
                line += f": {_format_value(info.description)}"
            print(line)
    print("Fields:")
    for field in model.fields.values():
        print(f"- {field.label} [{field.kind}] = {_format_value(field.value)}")

    if args.report:
        save_report(build_form_report(model, session.store), args.report)
        print(f"Report written to {args.report}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
