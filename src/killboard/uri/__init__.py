"""Board links — parse the current request, generate new links.

Two link styles describe the same page::

    path style:  /index.php/kill_detail/45/unlimited/
    query style: /?a=kill_detail&amp;id=45&amp;unlimited

``UriRouter`` reads either and writes whichever the board is set to.
"""

from killboard.uri.params import FLAG, RedirectRequired, UriParam, normalize_params
from killboard.uri.router import UriRouter

__all__ = [
    "FLAG",
    "RedirectRequired",
    "UriParam",
    "UriRouter",
    "normalize_params",
]
