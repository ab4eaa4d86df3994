"""Test configuration and fixtures."""

import os

# Must run before any Settings() is built
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")

import logfire  # noqa: E402

logfire.configure(send_to_logfire=False, console=False)
