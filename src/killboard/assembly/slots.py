"""Assembly slot records."""

from dataclasses import dataclass, field
from operator import attrgetter

from killboard.assembly.callbacks import Callback, MethodCallback

DEFAULT_PRIORITY = 5


@dataclass(frozen=True, slots=True)
class Hook:
    """A callback attached to a slot. Lower priority runs first."""

    callback: Callback
    priority: int = DEFAULT_PRIORITY


@dataclass(slots=True)
class Slot:
    """A named block of the page.

    Renders as: ``before`` hooks, then ``callback`` piped through
    ``filters``, then ``behind`` hooks.
    """

    id: str
    callback: Callback
    before: list[Hook] = field(default_factory=list)
    behind: list[Hook] = field(default_factory=list)
    filters: list[Hook] = field(default_factory=list)

    @classmethod
    def for_method(cls, slot_id: str) -> "Slot":
        return cls(id=slot_id, callback=MethodCallback(slot_id))


def by_priority(hooks: list[Hook]) -> list[Hook]:
    """Sort hooks by ascending priority. Equal priorities keep insertion order."""
    return sorted(hooks, key=attrgetter("priority"))
