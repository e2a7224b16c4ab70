"""Test environment: in-memory store, auth off; set before auth_service modules are imported."""

import os

os.environ.setdefault("APP_ENV", "dev")
os.environ.setdefault("USE_IN_MEMORY_DATABASE", "true")
os.environ.setdefault("AUTH_ENABLED", "false")
os.environ.setdefault("RETENTION_ENABLED", "false")
