"""Request-scoped router via ContextVar.

Provides:
- ``router_var``: The ``UriRouter`` for the request being handled.
- ``bind_router()``: Install a router for the duration of a block.

Parsed arguments and the resolved board root live on the router, so
binding a fresh router per request is all it takes to keep one
request's link state out of the next.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local under
    free-threading. No locks needed.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from killboard.uri.router import UriRouter

router_var: ContextVar[UriRouter] = ContextVar("killboard_router")
"""The current request's router. Set by ``bind_router()``."""


def get_router() -> UriRouter:
    """Return the current request's router.

    Raises ``LookupError`` if called outside ``bind_router()``.
    """
    return router_var.get()


@contextmanager
def bind_router(router: UriRouter) -> Iterator[UriRouter]:
    """Make *router* the current router until the block exits.

    Usage::

        with bind_router(UriRouter.from_scope(scope, config)) as router:
            result = router.parse()
            ...
    """
    token = router_var.set(router)
    try:
        yield router
    finally:
        router_var.reset(token)
