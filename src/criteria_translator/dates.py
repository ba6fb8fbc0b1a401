"""IsoDateParser — RFC 3339 timestamps to timezone-aware UTC datetimes."""

from __future__ import annotations

import re
from datetime import datetime, timezone

from .exceptions import DateCoercionError

# date-time from RFC 3339 section 5.6; the offset is optional here so that a
# naive timestamp gets its own error message.
_RFC3339 = re.compile(
    r"(?P<date>\d{4}-\d{2}-\d{2})[Tt ](?P<time>\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})?"
)


class IsoDateParser:
    """Parse RFC 3339 timestamps and normalize them to UTC.

    A UTC offset (or ``Z``) is required; naive timestamps are rejected.
    Fractional seconds of any length are accepted and truncated to
    microseconds, so nanosecond timestamps parse on every supported Python.
    """

    def from_iso8601(self, value: str) -> datetime:
        match = _RFC3339.fullmatch(value.strip())
        if match is None:
            raise DateCoercionError(
                f"invalid date {value!r}: not an RFC 3339 timestamp"
            )
        if match["offset"] is None:
            raise DateCoercionError(f"invalid date {value!r}: missing UTC offset")

        fraction = (match["fraction"] or "")[:6].ljust(6, "0")
        offset = "+00:00" if match["offset"] in ("Z", "z") else match["offset"]
        try:
            parsed = datetime.fromisoformat(
                f"{match['date']}T{match['time']}.{fraction}{offset}"
            )
        except ValueError as e:
            raise DateCoercionError(f"invalid date {value!r}: {e}") from e
        return parsed.astimezone(timezone.utc)
