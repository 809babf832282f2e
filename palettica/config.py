"""Runtime settings read from environment variables.

  PALETTICA_LOG_LEVEL  logging level name (default WARNING)
  PALETTICA_ICON_DIR   directory holding <RRGGBB>.png swatches; unset means no icons

Only the process environment is consulted.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

ENV_LOG_LEVEL = 'PALETTICA_LOG_LEVEL'
ENV_ICON_DIR = 'PALETTICA_ICON_DIR'
DEFAULT_LOG_LEVEL = 'WARNING'


def _parse_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f'Unknown log level in {ENV_LOG_LEVEL}: {name!r}')
    return level


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.WARNING
    icon_dir: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        icon_dir = env.get(ENV_ICON_DIR, '').strip() or None
        return cls(
            log_level=_parse_level(env.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)),
            icon_dir=icon_dir,
        )
