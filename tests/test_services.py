import pytest

from game2048.services import ServiceError, ServiceLocator, Signal


class _Dummy:
    pass


def test_signal_emits_to_connected_handlers():
    signal = Signal()
    received = []
    signal.connect(received.append)
    signal.emit("payload")
    assert received == ["payload"]


def test_signal_connect_twice_calls_once():
    signal = Signal()
    received = []
    signal.connect(received.append)
    signal.connect(received.append)
    signal.emit(7)
    assert received == [7]
    assert len(signal) == 1


def test_signal_disconnect_stops_delivery():
    signal = Signal()
    received = []
    signal.connect(received.append)
    signal.disconnect(received.append)
    signal.emit(1)
    assert received == []
    assert len(signal) == 0


def test_signal_disconnect_unknown_handler_is_harmless():
    signal = Signal()
    received = []
    signal.connect(received.append)
    signal.disconnect(print)
    signal.emit(3)
    assert received == [3]


def test_signal_handler_may_disconnect_during_emit():
    signal = Signal()
    calls = []

    def first(value):
        calls.append(("first", value))
        signal.disconnect(first)

    def second(value):
        calls.append(("second", value))

    signal.connect(first)
    signal.connect(second)
    signal.emit(5)
    assert len(signal) == 1
    signal.emit(6)
    assert calls == [("first", 5), ("second", 5), ("second", 6)]


def test_signal_passes_multiple_arguments():
    signal = Signal()
    received = []
    signal.connect(lambda a, b: received.append((a, b)))
    signal.emit(10, 20)
    assert received == [(10, 20)]


def test_locator_register_and_get():
    locator = ServiceLocator()
    service = _Dummy()
    locator.register(_Dummy, service)
    assert locator.get(_Dummy) is service
    assert _Dummy in locator


def test_locator_double_registration_raises():
    locator = ServiceLocator()
    first = _Dummy()
    locator.register(_Dummy, first)
    with pytest.raises(ServiceError, match="already registered"):
        locator.register(_Dummy, _Dummy())
    assert locator.get(_Dummy) is first


def test_locator_missing_service_raises():
    locator = ServiceLocator()
    with pytest.raises(ServiceError, match="_Dummy"):
        locator.get(_Dummy)


def test_locator_clear_removes_services():
    locator = ServiceLocator()
    locator.register(_Dummy, _Dummy())
    locator.clear()
    assert _Dummy not in locator
    with pytest.raises(ServiceError):
        locator.get(_Dummy)


def test_service_error_is_lookup_error():
    locator = ServiceLocator()
    with pytest.raises(LookupError):
        locator.get("missing")