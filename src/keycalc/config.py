"""
Runtime configuration for the keycalc hosts.

Settings come from KEYCALC_* environment variables; CLI options override them.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 5000
    debug: bool = False
    log_level: str = "WARNING"
    max_sessions: int = 1000

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read instead of os.environ

        Raises:
            ValueError: If a numeric variable is not an integer
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            host=env.get("KEYCALC_HOST", defaults.host),
            port=int(env.get("KEYCALC_PORT", defaults.port)),
            debug=env.get("KEYCALC_DEBUG", "").strip().lower() in _TRUTHY,
            log_level=env.get("KEYCALC_LOG_LEVEL", defaults.log_level).upper(),
            max_sessions=int(env.get("KEYCALC_MAX_SESSIONS", defaults.max_sessions)),
        )

    def override(self, **changes) -> "Settings":
        """Return a copy with the non-None values in ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
