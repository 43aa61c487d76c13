"""Generate board links from ordered ``UriParam`` lists.

Pure string assembly. Root resolution, session keys and the current
page come from ``UriRouter``, which calls ``build_uri`` with all of
them already resolved.
"""

from collections.abc import Sequence

from killboard.uri.params import UriParam

QUERY_SEPARATOR = "&amp;"
"""Links are written into HTML, so the ampersand is entity-escaped."""


def _query_pair(param: UriParam) -> str:
    if param.is_flag:
        return param.name
    return f"{param.name}={param.value}"


def _path_segment(param: UriParam) -> str:
    if param.is_flag:
        return param.name
    return str(param.value)


def build_uri(
    params: Sequence[UriParam],
    *,
    root: str,
    path_style: bool,
    current_page: str,
) -> str:
    """Build a link to a board page.

    If the first parameter is not the page (``a``), the current page is
    assumed. With path-style enabled positional parameters become path
    segments::

        [(a, kill_detail, True), (id, 45, True), (unlimited, FLAG, True)]
        path style:  {root}kill_detail/45/unlimited/
        query style: {root}?a=kill_detail&amp;id=45&amp;unlimited

    Args:
        params: Ordered parameters, including any session key.
        root: Board root, ending with ``/`` (plus ``index.php/`` for path style).
        path_style: Emit positional parameters as path segments.
        current_page: Page of the current request, used when none is given.
    """
    names_page = bool(params) and params[0].name == "a"
    path: list[str] = []
    query: list[str] = []
    for param in params:
        if param.positional and path_style:
            path.append(_path_segment(param))
        else:
            query.append(_query_pair(param))

    url = root
    if path_style:
        if not names_page:
            url += f"{current_page}/"
        if path:
            url += "/".join(path) + "/"
        if query:
            url += "?"
    elif not query:
        url += f"?a={current_page}"
    elif not names_page:
        url += f"?a={current_page}&"
    else:
        url += "?"
    return url + QUERY_SEPARATOR.join(query)
