"""
Shell configuration.

The prompt, name and banner are fixed; only the log level can be changed,
through the TSH_LOG_LEVEL environment variable.
"""

from dataclasses import dataclass
from typing import Mapping, Optional
import logging
import os

LOG_LEVEL_VAR = 'TSH_LOG_LEVEL'


@dataclass(frozen=True)
class ShellConfig:
    """
    Settings for one shell session.

    Example:
        >>> ShellConfig.from_env({'TSH_LOG_LEVEL': 'debug'}).log_level
        'DEBUG'
    """

    name: str = 'tsh'
    prompt: str = '--> '
    banner: str = 'TurboShell (TSH) — a minimal custom shell'
    log_level: str = 'WARNING'

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> 'ShellConfig':
        """
        Build a config from environment variables.

        Unknown log level names fall back to the default.
        """
        if env is None:
            env = os.environ
        level = env.get(LOG_LEVEL_VAR, '').strip().upper()
        if not level or not isinstance(logging.getLevelName(level), int):
            level = cls.log_level
        return cls(log_level=level)
