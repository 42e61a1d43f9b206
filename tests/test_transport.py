import pytest

from oledgfx.transport import RecordingBus, Transport, TransportError


def _transport(bus, **kwargs):
    delays = []
    transport = Transport(bus, 0x3C, sleep=delays.append, **kwargs)
    return transport, delays


def test_commands_are_prefixed_with_command_control_byte():
    bus = RecordingBus()
    transport, _ = _transport(bus)
    transport.send_commands(bytes([0xAE, 0xAF]))
    assert bus.writes == [(0x3C, b"\x00\xae\xaf")]


def test_data_is_prefixed_with_data_control_byte():
    bus = RecordingBus()
    transport, _ = _transport(bus)
    transport.send_data(b"\x01\x02\x03")
    assert bus.writes == [(0x3C, b"\x40\x01\x02\x03")]


def test_commands_accept_a_list_of_ints():
    bus = RecordingBus()
    transport, _ = _transport(bus)
    transport.send_commands([0x81, 0x7F])
    assert bus.writes[0][1] == bytes([0x00, 0x81, 0x7F])


def test_commands_retry_after_transient_failures():
    bus = RecordingBus(fail_next=2)
    transport, delays = _transport(bus)
    transport.send_commands(b"\xa6")
    assert bus.attempts == 3
    assert bus.writes == [(0x3C, b"\x00\xa6")]
    assert len(delays) == 2


def test_commands_fail_after_all_retries():
    bus = RecordingBus(fail_next=3)
    transport, delays = _transport(bus)
    with pytest.raises(TransportError):
        transport.send_commands(b"\xa6")
    assert bus.attempts == 3
    assert bus.writes == []
    assert len(delays) == 2


def test_retry_count_is_configurable():
    bus = RecordingBus(fail_next=5)
    transport, _ = _transport(bus, retries=1)
    with pytest.raises(TransportError):
        transport.send_commands(b"\xa6")
    assert bus.attempts == 1


def test_data_transfer_is_not_retried():
    bus = RecordingBus(fail_next=1)
    transport, delays = _transport(bus)
    with pytest.raises(TransportError):
        transport.send_data(b"\xff")
    assert bus.attempts == 1
    assert delays == []


@pytest.mark.parametrize("address", [-1, 0x80])
def test_rejects_invalid_address(address):
    with pytest.raises(ValueError):
        Transport(RecordingBus(), address)


def test_rejects_zero_retries():
    with pytest.raises(ValueError):
        Transport(RecordingBus(), 0x3C, retries=0)