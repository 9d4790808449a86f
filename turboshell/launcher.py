"""
Process launcher: runs external programs for the shell.

All non-portable process handling (fork, exec, wait) lives in
PosixProcessLauncher. The rest of the shell only sees the ProcessLauncher
interface, so tests can substitute a launcher that never forks.
"""

import logging
import os
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from .exceptions import ProcessCreationError
from .exit_codes import EXIT_CODE_EXEC_FAILED
from .process import Process

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExitStatus:
    """
    How a spawned child terminated.

    Exactly one of exit_code and signal is set.
    """

    pid: int
    exit_code: Optional[int] = None
    signal: Optional[int] = None

    @classmethod
    def from_wait_status(cls, pid: int, status: int) -> 'ExitStatus':
        """Decode a raw waitpid() status for a terminated child"""
        if os.WIFSIGNALED(status):
            return cls(pid, signal=os.WTERMSIG(status))
        return cls(pid, exit_code=os.WEXITSTATUS(status))

    def __str__(self):
        if self.signal is not None:
            return f"pid {self.pid} killed by signal {self.signal}"
        return f"pid {self.pid} exited with status {self.exit_code}"


class ProcessLauncher(ABC):
    """Runs a command as an external program and waits for it."""

    @abstractmethod
    def spawn(self, argv: List[str]) -> ExitStatus:
        """
        Start argv[0] with argv and block until it terminates.

        Args:
            argv: Non-empty argument vector; argv[0] is looked up on PATH
                unless it contains a slash

        Returns:
            The child's exit disposition

        Raises:
            ProcessCreationError: No child could be created
        """

    def launch(self, process: Process) -> bool:
        """
        Run a process as an external program.

        A failure to create the child is reported on the process's error
        stream. The child's own exit status is never surfaced.

        Returns:
            Continue signal (always True)
        """
        argv = process.argv
        if not argv or not argv[0]:
            return True

        try:
            status = self.spawn(argv)
        except ProcessCreationError as e:
            process.error(e.message)
            return True

        logger.debug("%s: %s", process.command, status)
        return True


class PosixProcessLauncher(ProcessLauncher):
    """fork/execvp/waitpid implementation of ProcessLauncher.

    Attributes:
        shell_name: Prefix for the child's exec failure message
    """

    def __init__(self, shell_name: str = 'tsh'):
        self.shell_name = shell_name

    def spawn(self, argv: List[str]) -> ExitStatus:
        if not argv:
            raise ValueError("cannot spawn an empty command")

        # Buffered output would otherwise be written twice, once per process
        sys.stdout.flush()
        sys.stderr.flush()

        try:
            pid = os.fork()
        except OSError as e:
            raise ProcessCreationError(argv[0], e.strerror or str(e), errno=e.errno) from e

        if pid == 0:
            self._exec_child(argv)

        logger.debug("spawned %s as pid %d", argv[0], pid)
        return self._wait(pid)

    def _exec_child(self, argv: List[str]):
        """Replace the child's image with argv. Never returns."""
        try:
            os.execvp(argv[0], argv)
        except (OSError, ValueError) as e:
            message = getattr(e, 'strerror', None) or str(e)
            os.write(2, f"{self.shell_name}: {message}\n".encode('utf-8', 'replace'))
        finally:
            os._exit(EXIT_CODE_EXEC_FAILED)

    def _wait(self, pid: int) -> ExitStatus:
        """Block until the child has exited or been killed by a signal."""
        while True:
            _, status = os.waitpid(pid, 0)
            if os.WIFEXITED(status) or os.WIFSIGNALED(status):
                return ExitStatus.from_wait_status(pid, status)
