"""Page assembly — an ordered queue of named page blocks.

A page queues its blocks (slots) during setup. Plugins then hook
around them, replace them, filter their output or drop them, and
``assemble()`` renders everything in queue order::

    class KillDetail(PageAssembly):
        def __init__(self, kill, events=None):
            super().__init__(events)
            self.kill = kill
            self.queue("summary")
            self.queue("involved")

        def summary(self):
            return render_summary(self.kill)

        def involved(self):
            return render_involved(self.kill)

    page = KillDetail(kill, events=events)
    page.add_before("involved", top_damage_box, priority=1)
    page.filter("summary", str.strip)
    html = page.assemble()
"""

import logging
from collections.abc import Mapping

from killboard.assembly.callbacks import (
    Callback,
    CallbackLike,
    MethodCallback,
    describe,
    resolve,
    to_callback,
)
from killboard.assembly.menu import MenuItem, render_menu
from killboard.assembly.slots import DEFAULT_PRIORITY, Hook, Slot, by_priority
from killboard.errors import UnknownSlotError
from killboard.events import ASSEMBLE_EVENT, EventBus

logger = logging.getLogger("killboard.assembly")


class PageAssembly:
    """Ordered, pluggable page builder.

    Each slot renders as: ``before`` hooks by priority, the slot's own
    callback piped through its filters by priority, then ``behind``
    hooks by priority. Lower priorities run first; equal priorities run
    in the order they were added.

    A callback that cannot be resolved when the page renders contributes
    nothing (filters pass text through). Exceptions raised by a callback
    propagate.
    """

    def __init__(self, events: EventBus | None = None) -> None:
        self._events = events
        self._slots: dict[str, Slot] = {}
        self._menu: list[MenuItem] = []
        self._views: dict[str, Callback] = {}
        self.view: str | None = None

    # -- Queue --

    def queue(self, slot_id: str) -> None:
        """Add a slot rendered by ``self.<slot_id>()``.

        Queuing an existing id resets its callback and hooks but keeps
        its position.
        """
        self._slots[slot_id] = Slot.for_method(slot_id)

    def add_before(
        self, slot_id: str, callback: CallbackLike, priority: int = DEFAULT_PRIORITY
    ) -> None:
        """Render *callback* right before slot *slot_id*."""
        self._slot(slot_id).before.append(Hook(to_callback(callback), priority))

    def add_behind(
        self, slot_id: str, callback: CallbackLike, priority: int = DEFAULT_PRIORITY
    ) -> None:
        """Render *callback* right after slot *slot_id*."""
        self._slot(slot_id).behind.append(Hook(to_callback(callback), priority))

    def replace(self, slot_id: str, callback: CallbackLike) -> None:
        """Render slot *slot_id* with *callback* instead of its own method."""
        self._slot(slot_id).callback = to_callback(callback)

    def filter(
        self, slot_id: str, callback: CallbackLike, priority: int = DEFAULT_PRIORITY
    ) -> None:
        """Pass the output of slot *slot_id* through *callback*.

        Filters receive the text produced so far and return the
        replacement text.
        """
        self._slot(slot_id).filters.append(Hook(to_callback(callback), priority))

    def delete(self, slot_id: str) -> None:
        """Drop slot *slot_id* and its hooks. Unknown ids are ignored."""
        self._slots.pop(slot_id, None)

    @property
    def slots(self) -> tuple[str, ...]:
        """Queued slot ids in render order."""
        return tuple(self._slots)

    def __contains__(self, slot_id: object) -> bool:
        return slot_id in self._slots

    def _slot(self, slot_id: str) -> Slot:
        try:
            return self._slots[slot_id]
        except KeyError:
            raise UnknownSlotError(slot_id) from None

    # -- Rendering --

    def assemble(self) -> str:
        """Render all queued slots and return the page HTML."""
        if self._events is not None:
            self._events.call(ASSEMBLE_EVENT, self)

        output: list[str] = []
        for slot in list(self._slots.values()):
            output.extend(self._call(hook.callback) for hook in by_priority(slot.before))

            text = self._call(slot.callback)
            for hook in by_priority(slot.filters):
                text = self._call_filter(hook.callback, text)
            output.append(text)

            output.extend(self._call(hook.callback) for hook in by_priority(slot.behind))
        return "".join(output)

    def _call(self, callback: Callback) -> str:
        target = resolve(callback, self)
        if target is None:
            logger.warning("Skipping unresolvable page callback %s", describe(callback))
            return ""
        result = target() if isinstance(callback, MethodCallback) else target(self)
        if result is None or result is False:
            return ""
        return str(result)

    def _call_filter(self, callback: Callback, text: str) -> str:
        target = resolve(callback, self)
        if target is None:
            logger.warning("Skipping unresolvable page filter %s", describe(callback))
            return text
        result = target(text)
        return "" if result is None else str(result)

    # -- Menu --

    def add_menu_item(
        self,
        type: str,
        name: str,
        url: str = "",
        width: int | str = 145,
        height: int | str = 145,
        onclick: str | None = None,
    ) -> None:
        """Add an item to the side menu.

        Types are ``caption``, ``img``, ``link`` and ``points``. Only links
        need a url; only images need a size.
        """
        self._menu.append(MenuItem(type, name, url, int(width), int(height), onclick or None))

    @property
    def menu_items(self) -> tuple[MenuItem, ...]:
        return tuple(self._menu)

    def render_menu(self, title: str = "", width: int = 145) -> str:
        """Render the collected menu items as the standard side box."""
        return render_menu(self._menu, title=title, width=width)

    # -- Views --

    def add_view(self, view: str, callback: CallbackLike) -> None:
        """Register *callback* to render the page when *view* is selected."""
        self._views[view] = to_callback(callback)

    @property
    def views(self) -> Mapping[str, Callback]:
        return dict(self._views)

    def get_view(self) -> str | None:
        """Return the selected view name."""
        return self.view

    def render_view(self) -> str:
        """Render the callback registered for the selected view.

        Returns an empty string when no view is selected or the selected
        view has no callback.
        """
        callback = self._views.get(self.view) if self.view is not None else None
        if callback is None:
            return ""
        return self._call(callback)
