"""URI parameter model shared by the parser and the builder.

A board link is an ordered list of ``UriParam`` triples. Position in
the path (``/kill_detail/45/``) or in the query string
(``?a=kill_detail&id=45``) is recorded on each parameter so links can
be regenerated in either style.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Literal, TypeAlias

FLAG: Literal[True] = True
"""Value of a bare parameter with no ``=value`` (``?unlimited``, ``/unlimited/``)."""

ParamValue: TypeAlias = str | Literal[True]


@dataclass(frozen=True, slots=True)
class UriParam:
    """A single link parameter.

    Attributes:
        name: Parameter name. ``a`` names the page (the action).
        value: Parameter value, or ``FLAG`` when the parameter has none.
        positional: True when the parameter lives in the path.
    """

    name: str
    value: ParamValue
    positional: bool = False

    @property
    def is_flag(self) -> bool:
        return self.value is FLAG

    def as_tuple(self) -> tuple[str, ParamValue, bool]:
        return (self.name, self.value, self.positional)


@dataclass(frozen=True, slots=True)
class RedirectRequired:
    """Result of parsing an old-style link that must be redirected.

    Returned by the parser instead of a parameter list. The caller sends
    an HTTP redirect to ``location`` and renders nothing else.
    """

    location: str
    status: int = 302


ParamLike: TypeAlias = UriParam | tuple[str, ParamValue, bool] | tuple[str, ParamValue]


def to_param(item: ParamLike) -> UriParam:
    """Coerce a ``UriParam`` or a ``(name, value[, positional])`` tuple."""
    if isinstance(item, UriParam):
        return item
    if isinstance(item, tuple) and len(item) in (2, 3):
        name, value, *rest = item
        value = FLAG if value is True else str(value)
        return UriParam(str(name), value, bool(rest[0]) if rest else False)
    msg = f"Expected UriParam or (name, value, positional) tuple, got {item!r}"
    raise TypeError(msg)


def _is_single(item: object) -> bool:
    return isinstance(item, UriParam) or (
        isinstance(item, tuple) and bool(item) and isinstance(item[0], str)
    )


def normalize_params(*args: ParamLike | Sequence[ParamLike]) -> list[UriParam]:
    """Flatten the calling conventions accepted by ``UriRouter.build``.

    Each of these produces the same list::

        normalize_params(("a", "kill_detail", True), ("id", "45", True))
        normalize_params([("a", "kill_detail", True), ("id", "45", True)])
        normalize_params([("a", "kill_detail", True)], ("id", "45", True))
    """
    params: list[UriParam] = []
    for arg in args:
        if _is_single(arg):
            params.append(to_param(arg))  # type: ignore[arg-type]
        elif isinstance(arg, Iterable):
            params.extend(to_param(item) for item in arg)
        else:
            msg = f"Expected a parameter or a sequence of parameters, got {arg!r}"
            raise TypeError(msg)
    return params
