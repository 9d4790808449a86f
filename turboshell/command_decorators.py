"""
Decorator applied to every builtin handler.

Builtins must never raise into the dispatcher. @command() reports any
exception raised inside a handler as one error line and turns it into the
continue signal. KeyboardInterrupt still propagates.
"""

import functools
import logging
from typing import Callable

from .exceptions import ShellError
from .process import Process

logger = logging.getLogger(__name__)

BuiltinHandler = Callable[[Process], bool]


def command() -> Callable[[BuiltinHandler], BuiltinHandler]:
    """
    Wrap a builtin handler so errors become a reported message.

    Example:
        @command()
        @register_command('cd')
        def cmd_cd(process):
            ...
    """
    def decorator(func: BuiltinHandler) -> BuiltinHandler:
        @functools.wraps(func)
        def wrapper(process: Process) -> bool:
            try:
                return bool(func(process))
            except ShellError as e:
                logger.debug("%s failed: %s", process.command, e)
                process.error(e.message)
            except Exception as e:
                logger.debug("%s raised", process.command, exc_info=True)
                process.error(f"{process.command}: {e}")
            return True
        return wrapper
    return decorator
