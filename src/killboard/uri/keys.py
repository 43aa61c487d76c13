"""Session key providers for generated links.

Every link the router builds carries an ``akey`` parameter so that
state-changing pages can check the link came from this board. The
router only needs ``make_key()``; where the key comes from is up to
the session layer.

``SignedKeyProvider`` signs the session id with ``itsdangerous``, the
same way signed cookie sessions are handled.
"""

import secrets
from typing import Protocol, runtime_checkable

from itsdangerous import BadData, URLSafeTimedSerializer

from killboard.config import KillboardConfig
from killboard.errors import ConfigurationError


@runtime_checkable
class KeyProvider(Protocol):
    """Anything that can hand out the current session key."""

    def make_key(self) -> str: ...


class StaticKeyProvider:
    """Returns the same key for every link. Handy for tests and static exports."""

    __slots__ = ("_key",)

    def __init__(self, key: str = "") -> None:
        self._key = key

    def make_key(self) -> str:
        return self._key


class SignedKeyProvider:
    """Sign a session id into a URL-safe, timestamped key.

    Usage::

        keys = SignedKeyProvider("s3cr3t", session_id=session["id"])
        router = UriRouter(config, key_provider=keys, ...)

        # On the receiving page:
        if keys.verify(router.get_arg("akey"), max_age=3600):
            ...
    """

    __slots__ = ("_max_age", "_serializer", "_session_id")

    salt = "killboard-akey"

    def __init__(
        self,
        secret_key: str,
        session_id: str | None = None,
        max_age: int | None = None,
    ) -> None:
        if not secret_key:
            msg = "SignedKeyProvider requires a non-empty secret_key."
            raise ConfigurationError(msg)
        self._serializer = URLSafeTimedSerializer(secret_key, salt=self.salt)
        self._session_id = session_id or secrets.token_hex(8)
        self._max_age = max_age

    @classmethod
    def from_config(
        cls, config: KillboardConfig, session_id: str | None = None
    ) -> "SignedKeyProvider":
        """Use ``config.secret_key`` and ``config.key_max_age``."""
        return cls(config.secret_key, session_id, max_age=config.key_max_age)

    @property
    def session_id(self) -> str:
        return self._session_id

    def make_key(self) -> str:
        return self._serializer.dumps(self._session_id)

    def verify(self, key: object, max_age: int | None = None) -> bool:
        """Check that *key* was signed for this session and is not expired.

        *max_age* defaults to the provider's own limit; ``None`` for both
        means keys never expire.
        """
        if not isinstance(key, str) or not key:
            return False
        try:
            session_id = self._serializer.loads(
                key, max_age=self._max_age if max_age is None else max_age
            )
        except BadData:
            return False
        return session_id == self._session_id
