"""
Helpers shared by builtin command modules.
"""

from typing import Union

from ..process import Process


def os_error_message(error: Union[OSError, ValueError]) -> str:
    """
    Describe an OS call failure the way the C library would.

    ValueError covers arguments the OS call rejects before it is made,
    such as paths with an embedded NUL byte.

    Example:
        >>> os_error_message(FileNotFoundError(2, 'No such file or directory', 'x'))
        'No such file or directory'
    """
    return getattr(error, 'strerror', None) or str(error)


def handle_os_error(process: Process, error: Union[OSError, ValueError]) -> bool:
    """
    Report a failed OS call made by a builtin and keep the shell running.

    Returns:
        Continue signal (always True)
    """
    process.error(os_error_message(error))
    return True


__all__ = [
    'os_error_message',
    'handle_os_error',
]
