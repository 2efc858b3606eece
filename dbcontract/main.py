"""Command-line entry point: registry checks and codec lookups.

``check`` is meant for CI: it composes the configured registry and exits
non-zero on a name collision or a malformed slice, so the failure surfaces at
build time rather than in a running client.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from pydantic import ValidationError

from dbcontract.codec import VOCABULARIES
from dbcontract.config.loader import load_client_config
from dbcontract.config.models import ClientConfig
from dbcontract.core.errors import ConfigurationError, CoreError
from dbcontract.store import build_registry_from_config
from dbcontract.telemetry import configure_logging

logger = logging.getLogger("dbcontract.cli")


def _load_config(path: str | None) -> ClientConfig:
    if path is None:
        return ClientConfig()
    try:
        return load_client_config(path)
    except (OSError, ValueError, TypeError, ValidationError) as exc:
        raise ConfigurationError(f"Cannot load config {path}: {exc}") from exc


def _parse_wire_value(raw: str) -> Any:
    """Interpret a shell argument as JSON (``2``, ``null``, ``"MYSQL"``) or a bare name."""

    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _cmd_check(args: argparse.Namespace) -> int:
    config = _load_config(args.config)
    log_dir = Path(config.logging.log_dir) if config.logging.log_dir else None
    configure_logging(level=config.logging.level, log_dir=log_dir, logger_name=config.logging.logger_name)
    registry = build_registry_from_config(config)
    print(f"OK: {len(registry.slices)} slices, {len(registry)} names")
    return 0


def _cmd_names(args: argparse.Namespace) -> int:
    registry = build_registry_from_config(_load_config(args.config))
    for name in registry.names():
        print(f"{name}\t{registry.origin(name)}")
    return 0


def _cmd_decode(args: argparse.Namespace) -> int:
    member = VOCABULARIES[args.vocabulary].from_json(_parse_wire_value(args.value))
    print(f"{int(member)}\t{member.name}")
    return 0


def _cmd_encode(args: argparse.Namespace) -> int:
    print(VOCABULARIES[args.vocabulary].to_json(_parse_wire_value(args.ordinal)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dbcontract", description="Client contract layer tools")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser("check", help="Compose the store registry and fail on collisions")
    check_parser.add_argument("--config", help="Path to client.yml")
    check_parser.set_defaults(handler=_cmd_check)

    names_parser = subparsers.add_parser("names", help="List registered names and their slices")
    names_parser.add_argument("--config", help="Path to client.yml")
    names_parser.set_defaults(handler=_cmd_names)

    decode_parser = subparsers.add_parser("decode", help="Decode a wire value into an ordinal")
    decode_parser.add_argument("vocabulary", choices=sorted(VOCABULARIES))
    decode_parser.add_argument("value")
    decode_parser.set_defaults(handler=_cmd_decode)

    encode_parser = subparsers.add_parser("encode", help="Encode an ordinal into its wire name")
    encode_parser.add_argument("vocabulary", choices=sorted(VOCABULARIES))
    encode_parser.add_argument("ordinal")
    encode_parser.set_defaults(handler=_cmd_encode)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.handler(args)
    except (CoreError, ImportError) as exc:
        logger.error("Command failed", extra={"command": args.command, "error": str(exc)})
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
