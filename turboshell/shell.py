"""
Shell: the command dispatcher and the read-eval loop.

One line is read, split into words and fully executed (builtin run, or
external program spawned and waited for) before the next prompt.
"""

import logging
from typing import List, Optional

from .builtins import BuiltinRegistry, build_builtin_registry
from .config import ShellConfig
from .context import CommandContext
from .exceptions import InputError, ShellError
from .exit_codes import EXIT_SUCCESS
from .launcher import ProcessLauncher, PosixProcessLauncher
from .lexer import split_line
from .process import Process
from .reader import LineReader
from .streams import InputStream, OutputStream, ErrorStream

logger = logging.getLogger(__name__)


class Shell:
    """Interactive command interpreter.

    Attributes:
        config: Session settings (prompt, name, banner)
        builtins: Read-only builtin registry
        launcher: Runs anything that is not a builtin
        context: Context handed to every builtin
        running: False once a builtin asked the loop to stop
    """

    def __init__(
        self,
        config: Optional[ShellConfig] = None,
        builtins: Optional[BuiltinRegistry] = None,
        launcher: Optional[ProcessLauncher] = None,
        stdin: Optional[InputStream] = None,
        stdout: Optional[OutputStream] = None,
        stderr: Optional[ErrorStream] = None,
    ):
        self.config = config or ShellConfig()
        self.builtins = builtins if builtins is not None else build_builtin_registry()
        self.launcher = launcher or PosixProcessLauncher(self.config.name)
        self.stdin = stdin or InputStream.from_stdin()
        self.stdout = stdout or OutputStream.to_stdout()
        self.stderr = stderr or ErrorStream.to_stderr()
        self.context = CommandContext.from_config(self.config, self.builtins)
        self.reader = LineReader(self.stdin, self.stderr, self.config.name)
        self.running = True

    def dispatch(self, argv: List[str]) -> bool:
        """
        Run one tokenized command.

        Args:
            argv: Words of the command line; may be empty

        Returns:
            Continue signal: False only when a builtin asks to stop
        """
        if not argv:
            return True

        handler = self.builtins.get(argv[0])
        process = Process.from_argv(
            argv,
            stdout=self.stdout,
            stderr=self.stderr,
            executor=handler,
            context=self.context,
        )

        try:
            if process.is_builtin:
                logger.debug("builtin: %r", process)
                return process.execute()
            logger.debug("external: %r", process)
            self.launcher.launch(process)
        except ShellError as e:
            process.error(e.message)
        return True

    def execute(self, line: str) -> bool:
        """Tokenize a line and dispatch it."""
        return self.dispatch(split_line(line))

    def prompt(self):
        self.stdout.write(self.config.prompt)
        self.stdout.flush()

    def run(self) -> int:
        """
        Read and execute lines until exit or end of input.

        Returns:
            Exit status for the shell process: 0 after `exit` or end of
            input, non-zero if reading input failed
        """
        while self.running:
            self.prompt()
            try:
                line = self.reader.read_line()
            except InputError as e:
                logger.debug("input closed: %s", e)
                return e.exit_code
            self.running = self.execute(line)
        return EXIT_SUCCESS
