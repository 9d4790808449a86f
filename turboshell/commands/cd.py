"""
CD command - change the working directory.
"""

from ..process import Process
from ..command_decorators import command
from ..exceptions import BuiltinUsageError
from . import register_command
from .base import handle_os_error


@command()
@register_command('cd')
def cmd_cd(process: Process) -> bool:
    """
    Change the shell's working directory

    Usage: cd <path>

    Only the first argument is used. The new directory is inherited by
    every command spawned afterwards.
    """
    if not process.args:
        raise BuiltinUsageError('cd')

    try:
        process.context.change_directory(process.args[0])
    except (OSError, ValueError) as e:
        return handle_os_error(process, e)
    return True
