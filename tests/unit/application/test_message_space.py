"""Unit tests for Message, StreamMeta and Space."""

from __future__ import annotations

import pytest

from actiongate.application.dispatch import Message, Space, StreamMeta, build_space
from actiongate.kernel.security import AuthToken


class TestMessage:
    def test_from_transport_keys(self) -> None:
        msg = Message.from_mapping(
            {"action": "getBalance", "args": ["acc-1"], "_isSecure": True, "_auth": {"fingerprint": "fp"}}
        )
        assert msg == Message("getBalance", ("acc-1",), True, AuthToken("fp"))

    def test_accepts_plain_keys(self) -> None:
        msg = Message.from_mapping({"action": "a", "secure": 1, "auth": AuthToken("fp")})
        assert msg.secure is True
        assert msg.auth == AuthToken("fp")

    @pytest.mark.parametrize("args", [None, "acc-1", {"a": 1}, 5])
    def test_non_sequence_args_become_empty(self, args: object) -> None:
        assert Message.from_mapping({"action": "a", "args": args}).args == ()

    def test_defaults(self) -> None:
        msg = Message.from_mapping({})
        assert msg.action is None
        assert msg.secure is False
        assert msg.auth is None

    def test_coerce_passes_messages_through(self) -> None:
        msg = Message("a")
        assert Message.coerce(msg) is msg

    def test_coerce_garbage_has_no_action(self) -> None:
        assert Message.coerce("not a mapping").action is None  # type: ignore[arg-type]


class TestStreamMeta:
    def test_from_mapping_keeps_raw(self) -> None:
        raw = {"args": [1], "_isSecure": True, "_auth": {"fingerprint": "fp"}, "topic": "t"}
        meta = StreamMeta.from_mapping(raw)
        assert meta.args == (1,)
        assert meta.secure is True
        assert meta.auth == AuthToken("fp")
        assert meta.raw is raw

    def test_none_meta(self) -> None:
        meta = StreamMeta.from_mapping(None)
        assert meta.secure is False
        assert meta.raw == {}


class TestSpace:
    def test_splits_service(self) -> None:
        assert build_space("rest:wallet:v2") == Space("rest:wallet:v2", ("rest", "wallet", "v2"))

    def test_single_segment(self) -> None:
        assert build_space("wallet").segments == ("wallet",)

    def test_custom_separator(self) -> None:
        assert build_space("rest.wallet", separator=".").segments == ("rest", "wallet")

    def test_message_is_ignored(self) -> None:
        assert build_space("a:b", Message("x")) == build_space("a:b")
