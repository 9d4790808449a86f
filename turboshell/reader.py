"""
Line reader for the REPL.

LineReader.read_line() either returns one complete line of input or raises
an InputError; it never hands back a partial or empty result.
"""

import logging

from .exceptions import EndOfInput, InputReadError
from .streams import InputStream, ErrorStream

logger = logging.getLogger(__name__)


class LineReader:
    """Reads command lines from an input stream.

    Attributes:
        stdin: Stream lines are read from
        stderr: Stream read failures are reported to
        shell_name: Prefix for error lines
    """

    def __init__(self, stdin: InputStream, stderr: ErrorStream, shell_name: str = 'tsh',
                 encoding: str = 'utf-8'):
        self.stdin = stdin
        self.stderr = stderr
        self.shell_name = shell_name
        self.encoding = encoding

    def read_line(self) -> str:
        """Block until one line is available.

        Returns:
            The line without its terminator

        Raises:
            EndOfInput: The stream is exhausted
            InputReadError: Reading or decoding failed; already reported
                to the error stream
        """
        try:
            raw = self.stdin.readline()
            if not raw:
                logger.debug("end of input")
                raise EndOfInput()
            line = raw.decode(self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            error = InputReadError(_describe(e))
            self.stderr.write_line(self.shell_name, error.message)
            raise error from e

        if line.endswith('\n'):
            line = line[:-1]
            if line.endswith('\r'):
                line = line[:-1]
        return line


def _describe(error: Exception) -> str:
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    return str(error)
