from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Sequence

from .errors import ConfigUnavailableError
from .services.config_service import ConfigService


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gathio-config",
        description="Inspect the gathio instance configuration",
    )
    parser.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="Configuration file (default: ./config/config.toml)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("check", help="Validate that the configuration file loads")
    subparsers.add_parser("frontend", help="Print the client-safe configuration")
    subparsers.add_parser("rules", help="Print the instance rules")
    return parser


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def main(argv: Sequence[str] | None = None) -> int:
    parsed = _build_parser().parse_args(list(sys.argv[1:] if argv is None else argv))
    service = ConfigService(parsed.config_path)

    if parsed.command == "check":
        try:
            service.read_config()
        except ConfigUnavailableError as exc:
            print(json.dumps(exc.to_payload(), ensure_ascii=False, indent=2), file=sys.stderr)
            return 1
        _print_json({"ok": True, "config_path": str(service.config_path)})
        return 0

    if parsed.command == "frontend":
        _print_json(service.frontend_config().model_dump(mode="json", by_alias=True))
        return 0

    _print_json([rule.model_dump(mode="json") for rule in service.instance_rules()])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
