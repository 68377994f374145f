from dataclasses import FrozenInstanceError
from datetime import timedelta

import pytest

from kiiroo.core.event import Event
from kiiroo.core.errors import EventFormatError, KiirooError

def test_decode_single_event():
    e = Event.from_text("1.00:2")
    assert e == Event(timedelta(milliseconds=1000), 2)
    assert e.time_ms == 1000
    assert e.value == 2

def test_encode_single_event():
    assert Event.from_millis(1000, 2).to_text() == "1.00:2"
    assert Event.from_millis(0, 0).to_text() == "0.00:0"
    assert Event.from_millis(12500, 4).to_text() == "12.50:4"
    assert str(Event.from_millis(250, 1)) == "0.25:1"

def test_single_event_roundtrip():
    for ms in (0, 250, 500, 750, 1000, 1500, 2000, 10000, 60500):
        for value in range(5):
            e = Event.from_millis(ms, value)
            assert Event.from_text(e.to_text()) == e

def test_decode_truncates_instead_of_rounding():
    assert Event.from_text("1.0009:1").time_ms == 1000
    assert Event.from_text("0.0015:0").time_ms == 1
    assert Event.from_text("0.5:3").time_ms == 500

def test_decode_accepts_signed_and_exponent_forms():
    assert Event.from_text("+1.5:+3") == Event.from_millis(1500, 3)
    assert Event.from_text("1e1:0").time_ms == 10000
    assert Event.from_text(".25:4").time_ms == 250
    assert Event.from_text("2:1").time_ms == 2000

def test_decode_accepts_bytes():
    assert Event.from_text(b"0.50:2") == Event.from_millis(500, 2)

@pytest.mark.parametrize("text", [
    "bad",
    "",
    ":",
    "1.0",
    "1.0:2:3",
    "x:2",
    "1.0:x",
    "1.0:2.5",
    "1.0:",
    ":2",
    " 1.0:2",
    "1.0:2 ",
    "1_0:2",
    "inf:1",
    "nan:1",
    "1e400:1",
    "-1.0:1",
    "1.0:" + "0" * 5000 + "2",
])
def test_decode_malformed(text):
    with pytest.raises(EventFormatError):
        Event.from_text(text)

@pytest.mark.parametrize("text", ["1.0:9", "1.0:-1", "1.0:5", "1.0:99999999"])
def test_decode_value_out_of_range(text):
    with pytest.raises(EventFormatError) as exc:
        Event.from_text(text)
    assert exc.value.kind == "malformed-event-format"

def test_decode_non_ascii_bytes():
    with pytest.raises(EventFormatError):
        Event.from_text("1.0:٢".encode("utf-8"))

def test_construction_validates():
    with pytest.raises(EventFormatError):
        Event.from_millis(0, 5)
    with pytest.raises(EventFormatError):
        Event.from_millis(-1, 1)
    with pytest.raises(EventFormatError):
        Event(timedelta(microseconds=1500), 1)
    with pytest.raises(EventFormatError):
        Event(timedelta(0), True)
    with pytest.raises(EventFormatError):
        Event(1.0, 1)

def test_error_kinds_are_value_errors():
    with pytest.raises(ValueError):
        Event.from_text("bad")
    with pytest.raises(KiirooError):
        Event.from_text("bad")

def test_event_is_immutable():
    e = Event.from_millis(100, 1)
    with pytest.raises(FrozenInstanceError):
        e.value = 3

def test_encode_revalidates_tampered_event():
    e = Event.from_millis(100, 1)
    object.__setattr__(e, "value", 7)
    with pytest.raises(EventFormatError):
        e.to_text()
