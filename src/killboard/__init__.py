"""Killboard — URI routing and page assembly for an EVE Online killboard.

Two pieces: a router that reads and writes board links in either
path-info (``/index.php/kill_detail/45/``) or query-string
(``/?a=kill_detail&amp;id=45``) style, and a page assembler that lets
plugins hook, replace, filter or drop named blocks of the page.

Basic usage::

    from killboard import KillboardConfig, PageAssembly, UriRouter

    router = UriRouter(KillboardConfig(kb_host="http://kb.example.com"),
                       path_info="/kill_detail/45", query_string="")
    router.get_arg("a")            # "kill_detail"
    router.page("pilot_detail", 9, "plt_id")

    class KillPage(PageAssembly):
        def summary(self):
            return "<div>...</div>"

    page = KillPage()
    page.queue("summary")
    html = page.assemble()
"""

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "EventBus",
    "KillboardConfig",
    "KillboardError",
    "MenuItem",
    "PageAssembly",
    "RedirectRequired",
    "StaleLinkError",
    "UnknownSlotError",
    "UriParam",
    "UriRouter",
    "get_router",
]

# name -> (module, attribute)
_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "ConfigurationError": ("killboard.errors", "ConfigurationError"),
    "EventBus": ("killboard.events", "EventBus"),
    "KillboardConfig": ("killboard.config", "KillboardConfig"),
    "KillboardError": ("killboard.errors", "KillboardError"),
    "MenuItem": ("killboard.assembly.menu", "MenuItem"),
    "PageAssembly": ("killboard.assembly.page", "PageAssembly"),
    "RedirectRequired": ("killboard.uri.params", "RedirectRequired"),
    "StaleLinkError": ("killboard.errors", "StaleLinkError"),
    "UnknownSlotError": ("killboard.errors", "UnknownSlotError"),
    "UriParam": ("killboard.uri.params", "UriParam"),
    "UriRouter": ("killboard.uri.router", "UriRouter"),
    "get_router": ("killboard.context", "get_router"),
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import killboard`` fast while providing a clean top-level API.
    """
    target = _LAZY_IMPORTS.get(name)
    if target is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    module_name, attr = target
    return getattr(importlib.import_module(module_name), attr)
