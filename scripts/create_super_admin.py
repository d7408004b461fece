#!/usr/bin/env python3
"""Bootstrap the first super admin.

    python scripts/create_super_admin.py "Site Owner" owner@example.com

The password is prompted for, or read from ``SUPER_ADMIN_PASSWORD`` when
running non-interactively.
"""

import asyncio
import getpass
import os
import sys

import logfire
from dishka import Scope

from skillswap.config import Settings
from skillswap.domain.model import Admin
from skillswap.domain.service import AdminService
from skillswap.domain.value import EmailAddress
from skillswap.util.di.container import create_container
from skillswap.util.logging import setup_logging
from skillswap.util.observability import configure_logfire

MIN_PASSWORD_LENGTH = 6


async def create(name: str, email: EmailAddress, password: str) -> Admin:
    container = create_container()
    try:
        async with container(scope=Scope.REQUEST) as request_container:
            admin_service = await request_container.get(AdminService)
            return await admin_service.create_super_admin(name, email, password)
    finally:
        await container.close()


def main() -> int:
    if len(sys.argv) != 3:
        print(f"Usage: {sys.argv[0]} NAME EMAIL", file=sys.stderr)
        return 2

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    name, email = sys.argv[1], EmailAddress(sys.argv[2])
    password = os.environ.get("SUPER_ADMIN_PASSWORD") or getpass.getpass()
    if len(password) < MIN_PASSWORD_LENGTH:
        print(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
            file=sys.stderr,
        )
        return 2

    admin = asyncio.run(create(name, email, password))
    logfire.info("Super admin created", admin_id=str(admin.id), email=email.root)
    print(f"Created super admin {admin.email.root} ({admin.id})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
