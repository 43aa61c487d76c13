"""Page assembly — named page blocks that plugins can hook, replace or drop.

Usage::

    page = KillDetail(kill, events=events)
    page.add_behind("summary", (Widgets, "fitting"), priority=1)
    html = page.assemble()
"""

from killboard.assembly.callbacks import (
    FunctionCallback,
    MethodCallback,
    StaticCallback,
    to_callback,
)
from killboard.assembly.menu import MenuItem, render_menu
from killboard.assembly.page import PageAssembly

__all__ = [
    "FunctionCallback",
    "MenuItem",
    "MethodCallback",
    "PageAssembly",
    "StaticCallback",
    "render_menu",
    "to_callback",
]
