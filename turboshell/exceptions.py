"""
Exception hierarchy for turboshell.

Every error the shell can detect is a ShellError. Recoverable errors are
reported by the component that catches them and folded into a continue
signal; only InputError subclasses end the REPL loop early.

Usage:
    from turboshell.exceptions import BuiltinUsageError

    if not process.args:
        raise BuiltinUsageError('cd', 'expected argument to "cd"')
"""

from typing import Optional

from .exit_codes import EXIT_SUCCESS, EXIT_FAILURE


class ShellError(Exception):
    """
    Base class for all shell errors.

    Attributes:
        message: Error message, without the shell name prefix
        exit_code: Suggested exit code (default: 1)
    """

    def __init__(self, message: str, exit_code: int = EXIT_FAILURE):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


# =============================================================================
# Command Errors
# =============================================================================

class CommandError(ShellError):
    """
    Base class for command-related errors.

    Raised when a builtin or an external command cannot be run.
    """

    def __init__(self, command: str, message: str, exit_code: int = EXIT_FAILURE):
        super().__init__(message, exit_code)
        self.command = command


class BuiltinUsageError(CommandError):
    """
    Raised when a builtin is invoked with the wrong arguments.

    Example:
        raise BuiltinUsageError('cd', 'expected argument to "cd"')
    """

    def __init__(self, command: str, message: Optional[str] = None):
        if message is None:
            message = f'expected argument to "{command}"'
        super().__init__(command, message)


class ProcessCreationError(CommandError):
    """
    Raised when a child process could not be created.

    Example:
        raise ProcessCreationError('ls', 'Resource temporarily unavailable')
    """

    def __init__(self, command: str, message: str, errno: Optional[int] = None):
        super().__init__(command, message)
        self.errno = errno


# =============================================================================
# Input Errors
# =============================================================================

class InputError(ShellError):
    """
    Base class for conditions that end the read loop.

    The REPL turns these into the shell's own exit status.
    """
    pass


class EndOfInput(InputError):
    """Raised when the input stream is exhausted. Not a failure."""

    def __init__(self):
        super().__init__("end of input", exit_code=EXIT_SUCCESS)


class InputReadError(InputError):
    """
    Raised when reading a line fails for a reason other than end of input.

    Example:
        raise InputReadError("Input/output error")
    """

    def __init__(self, details: str):
        super().__init__(f"readline: {details}", exit_code=EXIT_FAILURE)
        self.details = details
