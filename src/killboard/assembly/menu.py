"""Side menu items and the standard menu box.

Pages collect ``MenuItem`` records while they are set up; the layout
renders them into the side box with ``render_menu()``.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from functools import lru_cache

from kida import Environment

_MENU_TEMPLATE = """\
<table class="kb-table kb-menu" style="width: {{ width }}px">
{% if title %}<tr><td class="kb-table-header">{{ title }}</td></tr>
{% end %}
{% for item in items %}
{% if item.type == "caption" %}<tr><td class="kb-table-header">{{ item.name }}</td></tr>
{% elif item.type == "img" %}<tr><td class="kb-table-cell" align="center"><img src="{{ item.url }}" alt="{{ item.name }}" width="{{ item.width }}" height="{{ item.height }}"></td></tr>
{% elif item.type == "points" %}<tr><td class="kb-table-cell kb-points">{{ item.name }}</td></tr>
{% elif item.onclick %}<tr><td class="kb-table-cell"><a class="kb-menu-link" href="{{ item.url }}" onclick="{{ item.onclick }}">{{ item.name }}</a></td></tr>
{% else %}<tr><td class="kb-table-cell"><a class="kb-menu-link" href="{{ item.url }}">{{ item.name }}</a></td></tr>
{% end %}
{% end %}
</table>
"""


@dataclass(frozen=True, slots=True)
class MenuItem:
    """One entry of the side menu.

    Attributes:
        type: ``caption``, ``img``, ``link`` or ``points``.
        name: Text to display (alt text for images).
        url: Link target or image source. Only links and images need it.
        width: Image width in pixels.
        height: Image height in pixels.
        onclick: JavaScript for the link's ``onclick``, or ``None``.
    """

    type: str
    name: str
    url: str = ""
    width: int = 145
    height: int = 145
    onclick: str | None = None


@lru_cache(maxsize=2)
def _environment(autoescape: bool) -> Environment:
    return Environment(autoescape=autoescape, trim_blocks=True, lstrip_blocks=True)


def render_menu(
    items: Sequence[MenuItem],
    *,
    title: str = "",
    width: int = 145,
    autoescape: bool = True,
) -> str:
    """Render menu items into the standard side box.

    Returns an empty string when there is nothing to show.
    """
    if not items:
        return ""
    template = _environment(autoescape).from_string(_MENU_TEMPLATE)
    return template.render({"items": list(items), "title": title, "width": width})
