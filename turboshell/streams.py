"""
Byte-oriented stream wrappers shared by the reader, builtins and shell.

Builtins and the REPL write through these wrappers rather than touching
sys.stdout/sys.stderr directly, so tests can swap in in-memory buffers.
"""

import io
import sys
from typing import BinaryIO, Optional, Union


class InputStream:
    """Readable byte stream"""

    def __init__(self, stream: BinaryIO):
        self._stream = stream

    @classmethod
    def from_bytes(cls, data: bytes) -> 'InputStream':
        """Create an input stream over an in-memory buffer"""
        return cls(io.BytesIO(data))

    @classmethod
    def from_stdin(cls) -> 'InputStream':
        """Create an input stream over the process's standard input"""
        return cls(sys.stdin.buffer)

    def readline(self) -> bytes:
        """
        Read one line including its terminator.

        Returns:
            The line as bytes, or b'' once the stream is exhausted
        """
        return self._stream.readline()


class OutputStream:
    """Writable byte stream accepting both str and bytes"""

    encoding = 'utf-8'

    def __init__(self, stream: Optional[BinaryIO] = None):
        self._stream = stream if stream is not None else io.BytesIO()

    @classmethod
    def to_buffer(cls) -> 'OutputStream':
        """Create a stream that collects everything in memory"""
        return cls(io.BytesIO())

    @classmethod
    def to_stdout(cls) -> 'OutputStream':
        return cls(sys.stdout.buffer)

    def write(self, data: Union[str, bytes]) -> int:
        if isinstance(data, str):
            data = data.encode(self.encoding)
        return self._stream.write(data)

    def flush(self):
        self._stream.flush()

    def get_value(self) -> bytes:
        """
        Get everything written so far.

        Only meaningful for in-memory streams; returns b'' otherwise.
        """
        if isinstance(self._stream, io.BytesIO):
            return self._stream.getvalue()
        return b''


class ErrorStream(OutputStream):
    """Writable stream for diagnostics"""

    @classmethod
    def to_stderr(cls) -> 'ErrorStream':
        return cls(sys.stderr.buffer)

    def write_line(self, prefix: str, message: str) -> int:
        """
        Write a single diagnostic line and flush it immediately.

        Args:
            prefix: Shell name printed before the message
            message: Human-readable error description
        """
        written = self.write(f"{prefix}: {message}\n")
        self.flush()
        return written
