"""
CommandContext - everything a builtin needs besides its own arguments.

Builtins receive the context through their Process instead of reaching
into the Shell, which keeps them testable in isolation.
"""

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING
import logging
import os

if TYPE_CHECKING:
    from .builtins import BuiltinRegistry
    from .config import ShellConfig

logger = logging.getLogger(__name__)


@dataclass
class CommandContext:
    """
    Encapsulates the shell-wide state visible to commands.

    The working directory is not stored here: it is the operating system's
    per-process cwd, so spawned children inherit it without any copying.

    Example:
        >>> ctx = CommandContext(shell_name='tsh')
        >>> ctx.change_directory('/tmp')
        >>> ctx.cwd
        '/tmp'
    """

    shell_name: str = 'tsh'
    banner: str = ''
    builtins: Optional['BuiltinRegistry'] = None

    @classmethod
    def from_config(cls, config: 'ShellConfig',
                    builtins: Optional['BuiltinRegistry'] = None) -> 'CommandContext':
        return cls(shell_name=config.name, banner=config.banner, builtins=builtins)

    @property
    def cwd(self) -> str:
        """Current working directory of the shell process"""
        return os.getcwd()

    def change_directory(self, path: str) -> None:
        """
        Change the process working directory.

        Args:
            path: Absolute or relative target directory

        Raises:
            OSError: The directory does not exist, is not a directory,
                or cannot be entered
        """
        os.chdir(path)
        logger.debug("cwd is now %s", self.cwd)

    def __repr__(self):
        count = len(self.builtins) if self.builtins is not None else 0
        return f"CommandContext(shell_name={self.shell_name!r}, builtins={count})"
