"""
HELP command - list the builtins.
"""

from ..process import Process
from ..command_decorators import command
from . import register_command


@command()
@register_command('help')
def cmd_help(process: Process) -> bool:
    """
    Print the shell banner and the registered builtin names

    Usage: help
    """
    ctx = process.context
    if ctx.banner:
        process.stdout.write(f"{ctx.banner}\n")
    process.stdout.write("Built-in commands:\n")
    if ctx.builtins is not None:
        for name in ctx.builtins.names():
            process.stdout.write(f"  {name}\n")
    return True
