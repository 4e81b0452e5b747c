"""Process configuration read from environment variables.

    PORT       TCP port for --server mode (default 3000, 0..65535)
    BASE_PATH  URL prefix for the generate route, e.g. "/lab/genpi" (default "")
    LOG_LEVEL  logging level name (default INFO)
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass

from .domain.errors import InvalidConfiguration

DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"

_PORT_PATTERN = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class Config:
    base_path: str = ""
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Config:
        """Build a Config from ``environ`` (``os.environ`` by default).

        Raises:
            InvalidConfiguration: If PORT, BASE_PATH or LOG_LEVEL is malformed.
        """
        env = os.environ if environ is None else environ
        return cls(
            base_path=_parse_base_path(env.get("BASE_PATH", "")),
            port=_parse_port(env.get("PORT")),
            log_level=_parse_log_level(env.get("LOG_LEVEL")),
        )


def _parse_port(raw: str | None) -> int:
    if raw is None:
        return DEFAULT_PORT
    # ASCII digits only, no padding or digit grouping
    if not _PORT_PATTERN.fullmatch(raw):
        raise InvalidConfiguration("PORT range is (0..=65535)")
    port = int(raw, 10)
    if not 0 <= port <= 65535:
        raise InvalidConfiguration("PORT range is (0..=65535)")
    return port


def _parse_base_path(raw: str) -> str:
    base_path = raw.strip().rstrip("/")
    if base_path and not base_path.startswith("/"):
        raise InvalidConfiguration(f"BASE_PATH must start with '/': {raw!r}")
    return base_path


def _parse_log_level(raw: str | None) -> str:
    if not raw:
        return DEFAULT_LOG_LEVEL
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise InvalidConfiguration(f"Unknown LOG_LEVEL: {raw!r}")
    return level
