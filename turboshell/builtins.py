"""Builtin command registry for turboshell.

This module provides the BuiltinRegistry class which handles:
- Mapping builtin names to their handlers
- Exact, case-sensitive lookup by command name
- Listing builtin names in registration order

A registry is built once before the read loop starts and is read-only
afterwards. It is handed to the Shell explicitly; there is no module-level
table to mutate.
"""

from types import MappingProxyType
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from .commands import load_all_commands
from .process import Process

BuiltinHandler = Callable[[Process], bool]


class BuiltinRegistry:
    """Immutable registry of builtin commands.

    Example:
        >>> registry = build_builtin_registry()
        >>> registry.names()
        ['cd', 'help', 'exit']
        >>> registry.get('CD') is None
        True

    Attributes:
        _handlers: Read-only view mapping names to handlers
    """

    def __init__(self, entries: Iterable[Tuple[str, BuiltinHandler]]):
        """Build the registry.

        Args:
            entries: (name, handler) pairs; order is kept for names()

        Raises:
            ValueError: The same name appears twice
        """
        handlers: Dict[str, BuiltinHandler] = {}
        for name, handler in entries:
            if name in handlers:
                raise ValueError(f"duplicate builtin: {name}")
            handlers[name] = handler
        self._handlers = MappingProxyType(handlers)

    def get(self, name: str) -> Optional[BuiltinHandler]:
        """Look up a builtin handler.

        Args:
            name: Command name, matched exactly

        Returns:
            The handler, or None if no builtin has that name
        """
        return self._handlers.get(name)

    def names(self) -> List[str]:
        """List builtin names in registration order."""
        return list(self._handlers)

    def __contains__(self, name: str) -> bool:
        return name in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __repr__(self) -> str:
        return f"BuiltinRegistry({', '.join(self._handlers)})"


def build_builtin_registry() -> BuiltinRegistry:
    """Load every builtin command module and build the registry."""
    return BuiltinRegistry(load_all_commands())
