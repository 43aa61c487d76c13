"""Named event hooks for plugins.

Plugins register handlers under an event name; the core calls every
handler for that name, in registration order, at fixed points. The
page assembler fires ``ASSEMBLE_EVENT`` with itself right before it
renders, which is the last chance to add, move or drop slots.

Free-threading safety:
    - Handler lists are replaced, never mutated in place
    - ``EventBus`` uses a Lock to protect the registry
"""

import logging
import threading
from collections.abc import Callable
from typing import Any

logger = logging.getLogger("killboard.events")

ASSEMBLE_EVENT = "pageAssembly_assemble"
"""Fired by ``PageAssembly.assemble()`` with the assembler as sole argument."""


class EventBus:
    """Synchronous event registry.

    Usage::

        events = EventBus()

        def add_banner(page):
            page.add_before("content", banner, priority=1)

        events.register(ASSEMBLE_EVENT, add_banner)
        page = KillPage(events=events)
    """

    __slots__ = ("_handlers", "_lock")

    def __init__(self) -> None:
        self._handlers: dict[str, tuple[Callable[..., Any], ...]] = {}
        self._lock = threading.Lock()

    def register(self, name: str, handler: Callable[..., Any]) -> None:
        """Add *handler* to the end of the handler list for *name*."""
        with self._lock:
            self._handlers[name] = (*self._handlers.get(name, ()), handler)

    def unregister(self, name: str, handler: Callable[..., Any]) -> bool:
        """Remove *handler* from *name*. Returns False if it was not registered."""
        with self._lock:
            handlers = self._handlers.get(name, ())
            if handler not in handlers:
                return False
            remaining = tuple(h for h in handlers if h != handler)
            if remaining:
                self._handlers[name] = remaining
            else:
                del self._handlers[name]
            return True

    def handlers(self, name: str) -> tuple[Callable[..., Any], ...]:
        return self._handlers.get(name, ())

    def call(self, name: str, *args: Any) -> None:
        """Call every handler registered for *name* with *args*."""
        handlers = self._handlers.get(name, ())
        if handlers:
            logger.debug("Dispatching %s to %d handler(s)", name, len(handlers))
        for handler in handlers:
            handler(*args)
