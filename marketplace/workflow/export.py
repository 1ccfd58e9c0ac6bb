"""Export status machines as JSON so client code shares one source of truth.

Run: python -m marketplace.workflow.export --output frontend/generated/status-machines.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from marketplace.core.config import get_config
from marketplace.core.exceptions import NotFoundError
from marketplace.workflow.registry import StateMachineRegistry, default_registry

logger = logging.getLogger(__name__)


def export_status_machines(
    registry: StateMachineRegistry = default_registry,
    entities: Sequence[str] | None = None,
) -> str:
    return json.dumps(registry.describe_all(entities), indent=2, sort_keys=True)


def build_parser(registry: StateMachineRegistry = default_registry) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Export status transition tables as JSON.")
    parser.add_argument(
        "--entity",
        action="append",
        dest="entities",
        metavar="ENTITY",
        help=f"Entity to export (repeatable). One of: {', '.join(registry.keys())}.",
    )
    parser.add_argument(
        "--output",
        help="Write to this path instead of stdout (defaults to STATUS_EXPORT_PATH when set).",
    )
    return parser


def main(argv: Sequence[str] | None = None, registry: StateMachineRegistry = default_registry) -> int:
    parser = build_parser(registry)
    args = parser.parse_args(argv)

    try:
        payload = export_status_machines(registry, args.entities)
    except NotFoundError as exc:
        parser.error(str(exc))

    output = args.output or get_config().STATUS_EXPORT_PATH
    if output is None:
        sys.stdout.write(payload + "\n")
        return 0

    path = Path(output)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(payload + "\n", encoding="utf-8")
    logger.info(
        "status.export.written",
        extra={"event": "status.export.written", "path": str(path), "entities": args.entities or registry.keys()},
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
