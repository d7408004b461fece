#!/usr/bin/env python3
"""Delete read notifications past the retention window.

Intended to run from a scheduler (cron, a Kubernetes CronJob). The window
defaults to ``NOTIFICATIONS__RETENTION_DAYS`` and can be overridden with
the first argument:

    python scripts/purge_notifications.py 7
"""

import asyncio
import sys

import logfire
from dishka import Scope

from skillswap.config import Settings
from skillswap.domain.service import NotificationService
from skillswap.util.di.container import create_container
from skillswap.util.logging import setup_logging
from skillswap.util.observability import configure_logfire


async def purge(days: int | None) -> int:
    container = create_container()
    try:
        # The request scope commits the session when it closes
        async with container(scope=Scope.REQUEST) as request_container:
            notification_service = await request_container.get(NotificationService)
            return await notification_service.purge_read_older_than(days)
    finally:
        await container.close()


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    days = int(sys.argv[1]) if len(sys.argv) > 1 else None
    try:
        purged = asyncio.run(purge(days))
        logfire.info("Notification purge finished", purged=purged)
        return 0
    except Exception as e:
        logfire.error(
            "Notification purge failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
