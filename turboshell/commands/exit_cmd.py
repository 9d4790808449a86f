"""
EXIT command - leave the shell.

Note: Module name is exit_cmd.py to avoid shadowing the exit() builtin.
"""

from ..process import Process
from ..command_decorators import command
from . import register_command


@command()
@register_command('exit')
def cmd_exit(process: Process) -> bool:
    """
    Stop the read loop

    Usage: exit

    Arguments are accepted and ignored; the shell always exits with status 0.
    """
    return False
