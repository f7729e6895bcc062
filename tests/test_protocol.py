"""Tests for protocol selection."""

import pytest

from comodoro import protocol
from comodoro.config import Config, TcpConfig
from comodoro.errors import MissingConfigError, MissingProtocolError, ProtocolError
from comodoro.protocol import (
    Protocol,
    default_protocols,
    register_binder,
    register_client,
    to_binders,
    to_client,
)
from comodoro.transport import TcpBinder, TcpClient

TCP_CONFIG = Config(tcp=TcpConfig("localhost", 3000))


@pytest.fixture
def no_transports(monkeypatch: pytest.MonkeyPatch) -> None:
    """Simulate an installation without any transport."""
    monkeypatch.setattr(protocol, "BINDERS", {})
    monkeypatch.setattr(protocol, "CLIENTS", {})


class TestProtocolEnum:
    def test_default_is_none(self) -> None:
        assert Protocol.default() is Protocol.NONE

    def test_values_exclude_none(self) -> None:
        assert Protocol.values() == [Protocol.TCP]

    @pytest.mark.parametrize("text", ["tcp", "TCP", "Tcp"])
    def test_parse_ignores_case(self, text: str) -> None:
        assert Protocol.parse(text) is Protocol.TCP

    def test_every_value_round_trips(self) -> None:
        for value in Protocol.values():
            assert Protocol.parse(str(value)) is value
            assert Protocol.parse(str(value).upper()) is value

    @pytest.mark.parametrize("text", ["none", "None", "udp", ""])
    def test_parse_rejects(self, text: str) -> None:
        with pytest.raises(ValueError, match="invalid protocol"):
            Protocol.parse(text)

    def test_unavailable_protocol_not_parseable(self, no_transports: None) -> None:
        assert Protocol.values() == []
        with pytest.raises(ValueError):
            Protocol.parse("tcp")

    def test_register_none_rejected(self) -> None:
        with pytest.raises(ValueError):
            register_binder(Protocol.NONE, TcpBinder)


class TestToBinders:
    def test_default_protocols(self) -> None:
        assert default_protocols() == [Protocol.TCP]

    def test_empty_request_uses_defaults(self) -> None:
        binders = to_binders(TCP_CONFIG, [])

        assert len(binders) == 1
        assert isinstance(binders[0], TcpBinder)
        assert (binders[0].host, binders[0].port) == ("localhost", 3000)

    def test_empty_request_without_transports(self, no_transports: None) -> None:
        assert to_binders(TCP_CONFIG, []) == []

    def test_missing_section_is_dropped(self) -> None:
        assert to_binders(Config(), [Protocol.TCP]) == []

    def test_none_never_binds(self) -> None:
        assert to_binders(TCP_CONFIG, [Protocol.NONE]) == []

    def test_duplicates_collapse(self) -> None:
        assert len(to_binders(TCP_CONFIG, [Protocol.TCP, Protocol.TCP])) == 1

    def test_registered_factory_is_used(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(protocol, "BINDERS", {})
        register_binder(Protocol.TCP, lambda host, port: ("custom", host, port))

        assert to_binders(TCP_CONFIG, [Protocol.TCP]) == [("custom", "localhost", 3000)]


class TestToClient:
    def test_none_always_fails(self) -> None:
        with pytest.raises(MissingProtocolError, match="missing protocol"):
            to_client(Protocol.NONE, TCP_CONFIG)
        with pytest.raises(MissingProtocolError):
            to_client(Protocol.NONE, Config())

    def test_missing_section(self) -> None:
        with pytest.raises(MissingConfigError, match="missing tcp config") as exc_info:
            to_client(Protocol.TCP, Config())

        assert exc_info.value.protocol is Protocol.TCP

    def test_client_bound_to_section(self) -> None:
        client = to_client(Protocol.TCP, TCP_CONFIG)

        assert isinstance(client, TcpClient)
        assert (client.host, client.port) == ("localhost", 3000)

    def test_register_none_rejected(self) -> None:
        with pytest.raises(ValueError):
            register_client(Protocol.NONE, TcpClient)

    def test_registered_factory_is_used(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(protocol, "CLIENTS", {})
        register_client(Protocol.TCP, lambda host, port: ("custom", host, port))

        assert to_client(Protocol.TCP, TCP_CONFIG) == ("custom", "localhost", 3000)

    def test_unavailable_transport(self, no_transports: None) -> None:
        with pytest.raises(ProtocolError, match="not available"):
            to_client(Protocol.TCP, TCP_CONFIG)
