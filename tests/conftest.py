"""Test configuration and fixtures."""

import os

# Settings are read from the environment; pin them before anything builds one
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret-key-long-enough-for-hs256-signing")
os.environ.setdefault("EMAIL__ENABLED", "false")

import logfire  # noqa: E402

logfire.configure(send_to_logfire=False, console=False)
