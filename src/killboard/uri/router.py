"""Per-request URI router.

Reads the current board link once, answers argument lookups against
it, and writes new links in the configured style. One ``UriRouter``
belongs to one request; nothing is cached at module level, so a
long-running server never serves one request's arguments to another.
"""

import html
import logging
from collections.abc import Sequence

from killboard._internal.asgi import RequestLocation, Scope
from killboard.config import KillboardConfig
from killboard.errors import StaleLinkError
from killboard.uri.builder import build_uri
from killboard.uri.keys import KeyProvider, StaticKeyProvider
from killboard.uri.params import (
    ParamLike,
    ParamValue,
    RedirectRequired,
    UriParam,
    normalize_params,
)
from killboard.uri.parser import parse_uri

logger = logging.getLogger("killboard.uri")


class UriRouter:
    """Parse and generate board links for a single request.

    Usage::

        router = UriRouter(config, path_info="/kill_detail/45/unlimited",
                           query_string="", key_provider=keys)
        result = router.parse()
        if isinstance(result, RedirectRequired):
            return Redirect(result.location)

        router.get_arg("a")              # "kill_detail"
        router.get_arg("id", 1)          # "45"
        router.get_arg("unlimited", 2)   # True
        router.build(("a", "pilot_detail", True), ("plt_id", "9", True))
    """

    __slots__ = (
        "_args",
        "_config",
        "_key_provider",
        "_path_info",
        "_path_style",
        "_query_string",
        "_request_origin",
        "_root",
        "_root_pinned",
        "_script_path",
    )

    def __init__(
        self,
        config: KillboardConfig | None = None,
        *,
        path_info: str = "",
        query_string: str = "",
        key_provider: KeyProvider | None = None,
        request_origin: str = "",
        script_path: str = "/index.php",
    ) -> None:
        self._config = config or KillboardConfig()
        self._path_info = path_info
        self._query_string = query_string
        self._key_provider = key_provider or StaticKeyProvider()
        self._request_origin = request_origin
        self._script_path = script_path
        self._path_style = self._config.path_info
        self._args: list[UriParam] | RedirectRequired | None = None
        self._root: str | None = None
        self._root_pinned = False

    @classmethod
    def from_scope(
        cls,
        scope: Scope,
        config: KillboardConfig | None = None,
        key_provider: KeyProvider | None = None,
    ) -> "UriRouter":
        """Create a router for the request described by an ASGI scope."""
        config = config or KillboardConfig()
        location = RequestLocation.from_scope(scope, config.script_name)
        return cls(
            config,
            path_info=location.path_info,
            query_string=location.query_string,
            key_provider=key_provider,
            request_origin=location.origin,
            script_path=location.script_path,
        )

    @property
    def config(self) -> KillboardConfig:
        return self._config

    @property
    def path_style(self) -> bool:
        """Whether generated links use path segments."""
        return self._path_style

    # -- Parsing --

    def parse(self) -> tuple[UriParam, ...] | RedirectRequired:
        """Parse the request link, once.

        Returns the ordered parameters, or ``RedirectRequired`` when the
        link mixes path-info with an ``a=`` query parameter. The caller
        must then send the redirect and stop handling the request.
        """
        if self._args is None:
            self._args = parse_uri(
                self._path_info,
                self._query_string,
                redirect_root=self._board_root(),
                default_page=self._config.default_page,
                script_stem=self._config.script_name.rsplit(".", 1)[0],
            )
        if isinstance(self._args, RedirectRequired):
            return self._args
        return tuple(self._args)

    @property
    def args(self) -> tuple[UriParam, ...]:
        """The parsed parameters. Raises ``StaleLinkError`` on a redirect."""
        result = self.parse()
        if isinstance(result, RedirectRequired):
            raise StaleLinkError(result.location)
        return result

    def get_arg(self, name: str, position: int | None = None) -> ParamValue | bool:
        """Return the value of argument *name*, or ``False`` if absent.

        If no argument has that name and *position* is given, a bare
        flag at that position answers with its own name. That lets a
        page read ``/kill_detail/45/`` and ``?a=kill_detail&id=45`` the
        same way::

            router.get_arg("id", 1)  # "45" for both links
        """
        args = self.args
        for arg in args:
            if arg.name == name:
                return arg.value
        if position is not None and 0 <= position < len(args):
            arg = args[position]
            if arg.is_flag:
                return arg.name
        return False

    # -- Generation --

    @property
    def root(self) -> str:
        """Board root that generated links start with."""
        if self._root is None:
            self._root = self._resolve_root()
            logger.debug("Resolved board root %r", self._root)
        return self._root

    def set_root(self, host: str) -> None:
        """Use *host* verbatim as the root of generated links."""
        self._root = host
        self._root_pinned = True

    def use_path(self, path_info: bool = False) -> None:
        """Switch between path-style and query-style link generation."""
        self._path_style = bool(path_info)
        if not self._root_pinned:
            self._root = None

    def build(self, *params: ParamLike | Sequence[ParamLike]) -> str:
        """Create a link from the given parameters.

        Accepts a single parameter, a list of parameters, or a list plus
        extra trailing parameters::

            router.build(("all_id", "1234", True))
            router.build([("all_id", "1234", True), ("view", "kills", True)])
            router.build([("all_id", "1234", True)], ("view", "kills", True))

        When no ``a`` parameter leads the list, the current page is used.
        The session key is always appended as a query parameter.
        """
        items = normalize_params(*params)
        items.append(UriParam(self._config.key_param, self._key_provider.make_key()))
        return build_uri(
            items,
            root=self.root,
            path_style=self._path_style,
            current_page=str(self.get_arg("a", 0)),
        )

    def page(self, page: str | None = None, id: int | str = 0, id_name: str = "id") -> str:
        """Link to a page, optionally with an id.

        ``page("alliance_detail", 1234, "all_id")`` links to
        ``alliance_detail/1234/`` or ``?a=alliance_detail&amp;all_id=1234``.
        ``page()`` links to the board root.
        """
        if page is None:
            return self.root
        if id and str(id) != "0":
            return self.build(("a", page, True), (id_name, html.escape(str(id)), True))
        return self.build(("a", page, True))

    # -- Internals --

    def _resolve_root(self) -> str:
        if self._config.kb_host:
            root = self._config.kb_host.rstrip("/") + "/"
            if self._path_style:
                root += f"{self._config.script_name}/"
            return root
        root = f"{self._request_origin}{self._script_path}"
        if self._path_style:
            root += "/"
        return root

    def _board_root(self) -> str:
        if self._config.kb_host:
            return self._config.kb_host.rstrip("/")
        directory = self._script_path.rsplit("/", 1)[0]
        return f"{self._request_origin}{directory}"
