"""
Builtin command modules.

Each module defines one handler tagged with @register_command(name).
Tagging only records the name on the function; the registry itself is
built by turboshell.builtins.build_builtin_registry().
"""

import importlib
from typing import Callable, List, Tuple

# Registration order, which is also the order `help` lists them in
COMMAND_MODULES = ['cd', 'help', 'exit_cmd']


def register_command(name: str) -> Callable:
    """
    Tag a handler with the builtin name it answers to.

    Args:
        name: Exact, case-sensitive command name
    """
    def decorator(func):
        func.command_name = name
        return func
    return decorator


def load_all_commands() -> List[Tuple[str, Callable]]:
    """
    Import every builtin module and collect its tagged handlers.

    Returns:
        (name, handler) pairs in COMMAND_MODULES order
    """
    handlers = []
    for module_name in COMMAND_MODULES:
        module = importlib.import_module(f'{__name__}.{module_name}')
        for attr in vars(module).values():
            name = getattr(attr, 'command_name', None)
            if callable(attr) and name:
                handlers.append((name, attr))
    return handlers
