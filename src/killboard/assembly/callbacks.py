"""Render and filter callbacks for the page assembler.

A callback is one of three kinds, decided once when it is registered:

- ``MethodCallback``: a method of the assembler, looked up by name.
  Every queued slot starts out with one named after the slot.
- ``FunctionCallback``: any callable. Called with the assembler.
- ``StaticCallback``: an attribute of a class, looked up by name.
  Called with the assembler.

Lookups by name may fail at render time (a plugin removed a method, a
typo in a class attribute). ``resolve()`` returns ``None`` for those
and the assembler renders nothing in their place.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeAlias


@dataclass(frozen=True, slots=True)
class MethodCallback:
    """Method of the assembler named *name*. Called without arguments."""

    name: str


@dataclass(frozen=True, slots=True)
class FunctionCallback:
    """Free function or any other callable."""

    func: Callable[..., Any]


@dataclass(frozen=True, slots=True)
class StaticCallback:
    """Attribute *name* of class *owner* (static method or classmethod)."""

    owner: type
    name: str


Callback: TypeAlias = MethodCallback | FunctionCallback | StaticCallback
CallbackLike: TypeAlias = Callback | str | tuple[type, str] | Callable[..., Any]


def to_callback(value: CallbackLike) -> Callback:
    """Classify *value* as one of the three callback kinds.

    ``"summary"`` -> ``MethodCallback("summary")``
    ``(Widgets, "banner")`` -> ``StaticCallback(Widgets, "banner")``
    ``render_banner`` -> ``FunctionCallback(render_banner)``

    Raises ``TypeError`` for anything else.
    """
    if isinstance(value, MethodCallback | FunctionCallback | StaticCallback):
        return value
    if isinstance(value, str):
        return MethodCallback(value)
    if (
        isinstance(value, tuple)
        and len(value) == 2
        and isinstance(value[0], type)
        and isinstance(value[1], str)
    ):
        return StaticCallback(value[0], value[1])
    if callable(value):
        return FunctionCallback(value)
    msg = f"Cannot use {value!r} as a page callback"
    raise TypeError(msg)


def resolve(callback: Callback, page: object) -> Callable[..., Any] | None:
    """Return a ready-to-call target, or ``None`` if it cannot be found.

    Method targets come back bound to *page*; the other kinds come back
    as-is and expect *page* as their argument.
    """
    match callback:
        case MethodCallback(name):
            target = getattr(page, name, None)
        case StaticCallback(owner, name):
            target = getattr(owner, name, None)
        case FunctionCallback(func):
            target = func
    return target if callable(target) else None


def describe(callback: Callback) -> str:
    """Human-readable callback name for log messages."""
    match callback:
        case MethodCallback(name):
            return f"self.{name}"
        case StaticCallback(owner, name):
            return f"{owner.__qualname__}.{name}"
        case FunctionCallback(func):
            return getattr(func, "__qualname__", repr(func))
