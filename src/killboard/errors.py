"""Killboard exception hierarchy.

Shared across the URI router and the page assembler so every module
raises and catches the same types.
"""


class KillboardError(Exception):
    """Base for all killboard-specific errors."""


class ConfigurationError(KillboardError):
    """Raised when board configuration is invalid or incomplete."""


class UnknownSlotError(KillboardError, LookupError):
    """An assembly operation referenced a slot that was never queued.

    Raised by ``add_before``, ``add_behind``, ``replace`` and ``filter``
    so a plugin hooking a misspelled slot fails loudly instead of
    vanishing from the page.
    """

    def __init__(self, slot_id: str) -> None:
        self.slot_id = slot_id
        super().__init__(f"Unknown slot {slot_id!r}. Call queue({slot_id!r}) first.")


class StaleLinkError(KillboardError):
    """Arguments were requested for a request that must be redirected.

    The request carried both path-info and an ``a=`` query parameter.
    Callers should send the ``RedirectRequired`` returned by
    ``UriRouter.parse()`` instead of rendering a page.
    """

    def __init__(self, location: str) -> None:
        self.location = location
        super().__init__(f"Stale link, redirect to {location!r}")
