"""Tests for killboard.uri.keys — session keys carried by generated links."""

import time

import pytest

from killboard.config import KillboardConfig
from killboard.errors import ConfigurationError
from killboard.uri.keys import KeyProvider, SignedKeyProvider, StaticKeyProvider


class TestStaticKeyProvider:
    def test_returns_key(self) -> None:
        assert StaticKeyProvider("abc").make_key() == "abc"
        assert StaticKeyProvider().make_key() == ""

    def test_is_key_provider(self) -> None:
        assert isinstance(StaticKeyProvider(), KeyProvider)


class TestSignedKeyProvider:
    def test_round_trip(self) -> None:
        keys = SignedKeyProvider("s3cr3t", session_id="session-1")
        key = keys.make_key()
        assert keys.verify(key) is True

    def test_other_session_rejected(self) -> None:
        key = SignedKeyProvider("s3cr3t", session_id="session-1").make_key()
        assert SignedKeyProvider("s3cr3t", session_id="session-2").verify(key) is False

    def test_other_secret_rejected(self) -> None:
        key = SignedKeyProvider("s3cr3t", session_id="session-1").make_key()
        assert SignedKeyProvider("different", session_id="session-1").verify(key) is False

    @pytest.mark.parametrize("key", ["", "garbage", None, False, 42])
    def test_malformed_rejected(self, key: object) -> None:
        assert SignedKeyProvider("s3cr3t").verify(key) is False

    def test_random_session_id(self) -> None:
        a = SignedKeyProvider("s3cr3t")
        b = SignedKeyProvider("s3cr3t")
        assert a.session_id != b.session_id
        assert a.verify(b.make_key()) is False

    def test_requires_secret(self) -> None:
        with pytest.raises(ConfigurationError, match="secret_key"):
            SignedKeyProvider("")

    def test_from_config(self) -> None:
        config = KillboardConfig(secret_key="s3cr3t", key_max_age=60)
        keys = SignedKeyProvider.from_config(config, session_id="abc")
        assert keys.session_id == "abc"
        assert keys.verify(keys.make_key()) is True

    def test_is_key_provider(self) -> None:
        assert isinstance(SignedKeyProvider("s3cr3t"), KeyProvider)

    def test_explicit_max_age_overrides_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        keys = SignedKeyProvider("s3cr3t", session_id="abc", max_age=3600)
        now = time.time()
        key = keys.make_key()
        monkeypatch.setattr(time, "time", lambda: now + 10)
        assert keys.verify(key) is True
        assert keys.verify(key, max_age=5) is False
        assert keys.verify(key, max_age=0) is False

    def test_provider_max_age_expires(self, monkeypatch: pytest.MonkeyPatch) -> None:
        keys = SignedKeyProvider("s3cr3t", session_id="abc", max_age=5)
        now = time.time()
        key = keys.make_key()
        monkeypatch.setattr(time, "time", lambda: now + 10)
        assert keys.verify(key) is False
        assert keys.verify(key, max_age=60) is True
