"""Killboard configuration.

KillboardConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class KillboardConfig:
    """Board configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = KillboardConfig(kb_host="http://kb.example.com", path_info=True)
    """

    # URIs
    kb_host: str = ""  # Empty: derive the root from the request host + script name
    path_info: bool = False  # Generate /index.php/page/id/ style links
    script_name: str = "index.php"
    default_page: str = "home"
    key_param: str = "akey"

    # Session keys
    secret_key: str = ""
    key_max_age: int | None = 3600

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "KillboardConfig":
        """Build a config from ``KB_*`` environment variables.

        Recognised: ``KB_HOST``, ``KB_PATH_INFO`` (``1``/``true``/``yes``/``on``)
        and ``KB_SECRET_KEY``. Missing variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        path_info = env.get("KB_PATH_INFO", "")
        return cls(
            kb_host=env.get("KB_HOST", "").rstrip("/"),
            path_info=path_info.lower() in ("1", "true", "yes", "on"),
            secret_key=env.get("KB_SECRET_KEY", ""),
        )
