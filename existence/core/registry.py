# existence/core/registry.py
from __future__ import annotations

from typing import Any, Awaitable, Callable

# handler(ctx, message, command)
CommandHandler = Callable[..., Awaitable[Any]]


class CommandRegistry:
    """Chat command name -> handler. One per bot; nothing is shared across instances."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}

    def register(self, name: str, handler: CommandHandler) -> None:
        if name in self._handlers:
            raise ValueError(f"command already registered: {name}")
        self._handlers[name] = handler

    def replace(self, name: str, handler: CommandHandler) -> None:
        if name not in self._handlers:
            raise KeyError(name)
        self._handlers[name] = handler

    def get(self, name: str) -> CommandHandler | None:
        return self._handlers.get(name)

    def names(self) -> list[str]:
        return sorted(self._handlers)

    def __contains__(self, name: object) -> bool:
        return name in self._handlers
