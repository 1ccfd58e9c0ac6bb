"""Startup validation and bootstrap helpers."""

from __future__ import annotations

import logging

from marketplace.core.config import get_config
from marketplace.core.logging_config import configure_logging
from marketplace.workflow.registry import StateMachineRegistry, default_registry

logger = logging.getLogger(__name__)


def validate_status_machines(registry: StateMachineRegistry = default_registry) -> None:
    """Warn about statuses no entity can ever reach from its initial status."""
    for entity in registry.keys():
        unreachable = registry.machine(entity).unreachable_statuses()
        if unreachable:
            logger.warning(
                "startup.status_machine.unreachable_statuses",
                extra={
                    "event": "startup.status_machine.unreachable_statuses",
                    "entity": entity,
                    "statuses": [status.value for status in unreachable],
                },
            )

    logger.info(
        "startup.status_machines.loaded",
        extra={"event": "startup.status_machines.loaded", "entities": registry.keys()},
    )


def bootstrap() -> None:
    """Initialize logging and validate runtime configuration."""
    configure_logging()
    config = get_config()
    validate_status_machines()
    logger.info(
        "startup.config.validated",
        extra={"event": "startup.config.validated", "env": config.ENV, "app_version": config.APP_VERSION},
    )
