"""
Library-level configuration knobs.

Applications describe their own variables with
:class:`~common_utils.environment.EnvironmentBuilder`; this module only holds
the few optional settings the package itself reads (logging).
"""

from __future__ import annotations

import os

LOG_LEVELS = ("DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "text")

# APP_ENV values that silence debug output
PRODUCTION_ENVS = ("pro", "prod", "production")


def env(key: str, default: str = "") -> str:
    return os.environ.get(key, default)


def is_production(app_env: str | None = None) -> bool:
    if app_env is None:
        app_env = env("APP_ENV", "development")
    return app_env.lower() in PRODUCTION_ENVS
