"""
Command-line entry point for turboshell.

Arguments given to the shell binary are accepted and ignored.
"""

import logging
import sys
from typing import List, Optional

from .config import ShellConfig
from .shell import Shell

LOG_FORMAT = '%(name)s: %(levelname)s: %(message)s'


def setup_logging(config: ShellConfig):
    logging.basicConfig(level=config.log_level, format=LOG_FORMAT, stream=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run an interactive session on the process's standard streams.

    Args:
        argv: Command-line arguments (unused)

    Returns:
        Exit status for the shell process
    """
    config = ShellConfig.from_env()
    setup_logging(config)
    return Shell(config).run()
