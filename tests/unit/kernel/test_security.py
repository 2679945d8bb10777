"""Unit tests for kernel security – AuthToken."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from actiongate.kernel.security import AuthToken


class TestAuthToken:
    def test_frozen(self) -> None:
        token = AuthToken("fp")
        with pytest.raises((AttributeError, TypeError)):
            token.fingerprint = "other"  # type: ignore[misc]

    def test_str_is_fingerprint(self) -> None:
        assert str(AuthToken("fp-1")) == "fp-1"

    def test_from_none(self) -> None:
        assert AuthToken.from_value(None) is None

    def test_from_token_is_identity(self) -> None:
        token = AuthToken("fp")
        assert AuthToken.from_value(token) is token

    def test_from_mapping(self) -> None:
        assert AuthToken.from_value({"fingerprint": "fp", "extra": 1}) == AuthToken("fp")

    def test_from_object_attribute(self) -> None:
        assert AuthToken.from_value(SimpleNamespace(fingerprint="fp")) == AuthToken("fp")

    @pytest.mark.parametrize("value", [{}, {"fingerprint": 42}, "fp", 0, SimpleNamespace()])
    def test_without_string_fingerprint_is_none(self, value: object) -> None:
        assert AuthToken.from_value(value) is None
