"""Typed view of the parts of an ASGI HTTP scope the router needs.

Replaces the raw ``Scope = MutableMapping[str, Any]`` with a small
frozen dataclass. Users never see this; they call
``UriRouter.from_scope()``.
"""

from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any, TypeAlias

Scope: TypeAlias = MutableMapping[str, Any]


@dataclass(frozen=True, slots=True)
class RequestLocation:
    """Where a request landed, split the way the board reads it.

    Attributes:
        host: ``Host`` header value, or ``server`` host:port.
        script_path: Mount point plus board script, e.g. ``/kb/index.php``.
        path_info: Path below the board script, e.g. ``/kill_detail/45``.
        query_string: Raw query string, decoded as latin-1.
        scheme: ``http`` or ``https``.
    """

    host: str
    script_path: str
    path_info: str
    query_string: str
    scheme: str = "http"

    @property
    def origin(self) -> str:
        """``scheme://host``, or ``""`` when the host is unknown."""
        if not self.host:
            return ""
        return f"{self.scheme}://{self.host}"

    @classmethod
    def from_scope(cls, scope: Scope, script_name: str = "index.php") -> "RequestLocation":
        """Parse a raw ASGI HTTP scope.

        ``path_info`` is whatever follows ``/{script_name}`` in the path.
        The script may also be named without its extension
        (``/index/kill_detail/45``). Requests that do not name the script
        (``/kb/?a=home``) have empty path-info, just like a PHP front
        controller reached through a directory index.
        """
        root_path = scope.get("root_path", "").rstrip("/")
        path = scope.get("path", "/")
        if root_path and path.startswith(root_path):
            path = path[len(root_path) :]

        script = f"/{script_name.strip('/')}" if script_name else ""
        path_info = ""
        for prefix in _script_prefixes(script):
            if path == prefix or path.startswith(prefix + "/"):
                path_info = path[len(prefix) :]
                break

        return cls(
            host=_host(scope),
            script_path=root_path + script,
            path_info=path_info,
            query_string=scope.get("query_string", b"").decode("latin-1"),
            scheme=scope.get("scheme", "http"),
        )


def _script_prefixes(script: str) -> tuple[str, ...]:
    if not script:
        return ()
    stem, dot, _ = script.rpartition(".")
    if dot and stem and "/" not in script[len(stem) :]:
        return (script, stem)
    return (script,)


def _host(scope: Scope) -> str:
    for name, value in scope.get("headers", ()):
        if name.lower() == b"host":
            return value.decode("latin-1")
    server = scope.get("server")
    if server:
        host, port = server
        return f"{host}:{port}" if port not in (80, 443, None) else host
    return ""
