"""Process class: one command invocation as seen by a builtin or the launcher"""

from typing import List, Optional, Callable

from .context import CommandContext
from .streams import OutputStream, ErrorStream


class Process:
    """Represents a single tokenized command and the streams it runs with"""

    def __init__(
        self,
        command: str,
        args: List[str],
        stdout: Optional[OutputStream] = None,
        stderr: Optional[ErrorStream] = None,
        executor: Optional[Callable[['Process'], bool]] = None,
        context: Optional[CommandContext] = None,
    ):
        """
        Initialize a process

        Args:
            command: Command name (first word of the line)
            args: Remaining words
            stdout: Output stream
            stderr: Error stream
            executor: Builtin handler, or None for an external program
            context: Shell-wide context; a default one is created if omitted
        """
        self.command = command
        self.args = args
        self.stdout = stdout or OutputStream.to_buffer()
        self.stderr = stderr or ErrorStream.to_buffer()
        self.executor = executor
        self.context = context if context is not None else CommandContext()

    @classmethod
    def from_argv(cls, argv: List[str], **kwargs) -> 'Process':
        """Build a process from a non-empty tokenized command"""
        if not argv:
            raise ValueError("cannot build a process from an empty command")
        return cls(argv[0], list(argv[1:]), **kwargs)

    @property
    def argv(self) -> List[str]:
        """Full argument vector, command name first"""
        return [self.command] + self.args

    @property
    def is_builtin(self) -> bool:
        return self.executor is not None

    def execute(self) -> bool:
        """
        Run the builtin handler attached to this process

        Returns:
            Continue signal: True keeps the shell running, False stops it
        """
        if self.executor is None:
            raise RuntimeError(f"{self.command} has no builtin handler")

        try:
            return self.executor(self)
        finally:
            self.stdout.flush()
            self.stderr.flush()

    def error(self, message: str):
        """Write one diagnostic line prefixed with the shell name"""
        self.stderr.write_line(self.context.shell_name, message)

    def get_stdout(self) -> bytes:
        """Get stdout contents"""
        return self.stdout.get_value()

    def get_stderr(self) -> bytes:
        """Get stderr contents"""
        return self.stderr.get_value()

    def __repr__(self):
        args_str = ' '.join(self.args) if self.args else ''
        return f"Process({self.command} {args_str})"
