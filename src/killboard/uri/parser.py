"""Parse incoming board links into ordered ``UriParam`` lists.

The path is read as ``page/id/flag/flag`` and the query string as
``key=value`` or bare ``key`` pairs. Both styles describe the same
page, so ``/kill_detail/45/unlimited`` and
``?a=kill_detail&id=45&unlimited`` resolve to the same ``a`` value and
answer the same ``get_arg()`` lookups.
"""

import logging
import re
from urllib.parse import unquote_plus

from killboard.uri.params import FLAG, RedirectRequired, UriParam

logger = logging.getLogger("killboard.uri")

_NUMERIC = re.compile(r"[0-9]+")


def parse_path(path_info: str, script_stem: str = "index") -> list[UriParam]:
    """Split path-info into positional parameters.

    A leading *script_stem* segment followed by more segments is the
    front script reached without its extension and is dropped. Later
    segments named ``a`` are dropped so the page stays the only ``a``.

    Examples::

        "/kill_detail/45/unlimited"       -> [(a, kill_detail), (45, FLAG), (unlimited, FLAG)]
        "/index/kill_detail/45/unlimited" -> [(a, kill_detail), (45, FLAG), (unlimited, FLAG)]
        "/45"                             -> [(a, home), (45, FLAG)]
        "/"                               -> []
    """
    parts = [part for part in path_info.strip("/").split("/") if part]
    if len(parts) > 1 and parts[0] == script_stem:
        parts = parts[1:]

    params: list[UriParam] = []
    for part in parts:
        if params:
            if part == "a":
                logger.debug("Ignoring path segment 'a' in %r", path_info)
                continue
            params.append(UriParam(part, FLAG, positional=True))
        elif _NUMERIC.fullmatch(part):
            # A bare id continues the front page
            params.append(UriParam("a", "home", positional=True))
            params.append(UriParam(part, FLAG, positional=True))
        else:
            params.append(UriParam("a", part, positional=True))
    return params


def parse_uri(
    path_info: str,
    query_string: str,
    *,
    redirect_root: str = "",
    default_page: str = "home",
    script_stem: str = "index",
) -> list[UriParam] | RedirectRequired:
    """Parse path-info and query string into an ordered parameter list.

    The first parameter of the result is always the page, named ``a``.
    A query ``a=`` overrides any page implied by the path when there is
    no path-info; when both are present the link predates path-style
    URLs and a ``RedirectRequired`` pointing at
    ``{redirect_root}/?{query_string}`` is returned instead.

    Args:
        path_info: Request path below the board script, e.g. ``/kill_detail/45``.
        query_string: Raw query string without the leading ``?``.
        redirect_root: Board root used to build the redirect location.
        default_page: Page used when neither part names one.
        script_stem: Front script name without extension; a leading
            segment with this name is dropped from the path.
    """
    path_info = path_info.strip("/")
    params = parse_path(path_info, script_stem)
    page_found = bool(params)

    for piece in query_string.split("&"):
        if not piece:
            continue
        raw_name, sep, raw_value = piece.partition("=")
        name = unquote_plus(raw_name)
        if name == "a":
            if not raw_value:
                continue
            if path_info:
                location = f"{redirect_root}/?{query_string}"
                logger.info("Stale link %r with path %r, redirecting", query_string, path_info)
                return RedirectRequired(location)
            page = UriParam("a", unquote_plus(raw_value))
            # Last a= wins; the list keeps a single page parameter
            if page_found:
                params[0] = page
            else:
                params.insert(0, page)
            page_found = True
        else:
            value = unquote_plus(raw_value) if sep else FLAG
            params.append(UriParam(name, value))

    if not page_found:
        params.insert(0, UriParam("a", default_page))

    first = params[0]
    if first.value == "index":
        params[0] = UriParam(first.name, "home", first.positional)
    return params
