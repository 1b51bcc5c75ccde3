from businesshours.core.errors import (
    ErrorKind,
    InvalidBusinessHours,
    InvalidFormat,
    InvalidHour,
    InvalidWeekday,
)


def test_message_carries_offending_value():
    err = InvalidWeekday("Foo", detail="is not a valid weekday")
    assert str(err) == "couldn't parse weekday: 'Foo' is not a valid weekday"


def test_wrapped_message_includes_cause():
    cause = InvalidHour("24:01", detail="invalid format")
    err = InvalidBusinessHours("09:00-24:01", cause=cause)
    assert str(err) == (
        "couldn't parse business hours: '09:00-24:01': couldn't parse hour: '24:01' invalid format"
    )


def test_matches_walks_cause_chain():
    err = InvalidBusinessHours("x", cause=InvalidFormat("x"))
    assert err.matches(ErrorKind.INVALID_BUSINESS_HOURS)
    assert err.matches(ErrorKind.INVALID_FORMAT)
    assert not err.matches(ErrorKind.INVALID_HOUR)


def test_matches_stops_at_foreign_cause():
    err = InvalidBusinessHours("x", cause=KeyError("x"))
    assert not err.matches(ErrorKind.INVALID_TIMEZONE)


def test_to_dict():
    err = InvalidWeekday("Foo")
    assert err.to_dict() == {"kind": "invalid_weekday", "value": "Foo", "message": "couldn't parse weekday: 'Foo'"}
