"""
Datetime arbitrary, derived from number through milliseconds since the epoch.

    datetime(start, end)   uniform between the endpoints; shrinks exactly as
                           number(start_ms, end_ms), translated back to dates
    datetime() / datetime  a date driven by the size hint alone:
                           DATETIME_CONST + x * DATETIME_SCALE ms for x drawn
                           from number; not shrinkable

DATETIME_CONST and DATETIME_SCALE fix the default corpus. Changing either
changes every date the default form has ever generated.
"""

from __future__ import annotations

from datetime import datetime as _datetime, timedelta, timezone

from arbitrary import show
from arbitrary.core.arbitrary import Arbitrary, extend_with_default
from arbitrary.engine import shrink
from arbitrary.primitives.numeric import number

DATETIME_CONST = 1416499879495  # 2014-11-20T16:11:19.495Z
DATETIME_SCALE = 768000000  # ms per unit of generated number

EPOCH = _datetime(1970, 1, 1, tzinfo=timezone.utc)
NAIVE_EPOCH = _datetime(1970, 1, 1)

_MILLISECOND = timedelta(milliseconds=1)


def _epoch_for(dt: _datetime) -> _datetime:
    return NAIVE_EPOCH if dt.tzinfo is None else EPOCH


def to_millis(dt: _datetime) -> float:
    """Milliseconds since the epoch; naive datetimes count from a naive epoch."""
    return (dt - _epoch_for(dt)) / _MILLISECOND


def _bounded(start: _datetime, end: _datetime) -> Arbitrary[_datetime]:
    epoch = _epoch_for(start)

    # rounds to the nearest microsecond, so a candidate can land back on the
    # value being shrunk; isomap drops it
    def to_date(ms: float) -> _datetime:
        return epoch + timedelta(milliseconds=ms)

    return number(to_millis(start), to_millis(end)).smap(to_date, to_millis)


def _default_to_date(x: float) -> _datetime:
    return EPOCH + timedelta(milliseconds=x * DATETIME_SCALE + DATETIME_CONST)


def _datetime_arb(*bounds: _datetime) -> Arbitrary[_datetime]:
    """Datetimes, either between two endpoints or derived from the size hint."""
    if len(bounds) == 2:
        return _bounded(*bounds)
    if bounds:
        raise TypeError(f"datetime() takes 0 or 2 bounds ({len(bounds)} given)")
    return Arbitrary(
        generator=number.generator.map(_default_to_date),
        shrink=shrink.noop,
        show=show.default,
    )


_datetime_arb.__name__ = "datetime"

datetime = extend_with_default(_datetime_arb)
