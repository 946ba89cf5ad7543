from __future__ import annotations

from datetime import UTC, datetime, tzinfo

from payments_query.application.ports import ClockProvider


class SystemClockProvider(ClockProvider):
    """Production clock reading the system time in a fixed zone."""

    def __init__(self, zone: tzinfo = UTC) -> None:
        self._zone = zone

    def now(self) -> datetime:
        return datetime.now(self._zone)


class FixedClockProvider(ClockProvider):
    """Test clock with a controllable fixed timestamp.

    Note: This implementation is NOT thread-safe. set_time() is meant for
    single-threaded tests.
    """

    def __init__(self, fixed_time: datetime) -> None:
        self._validate_aware(fixed_time)
        self._fixed_time = fixed_time

    def now(self) -> datetime:
        return self._fixed_time

    def set_time(self, new_time: datetime) -> None:
        """Explicitly change the fixed time for testing scenarios."""
        self._validate_aware(new_time)
        self._fixed_time = new_time

    def _validate_aware(self, dt: datetime) -> None:
        if dt.tzinfo is None or dt.utcoffset() is None:
            raise ValueError(f"datetime must be timezone-aware, got {dt.isoformat()}")
