"""TTL normalization."""

import calendar
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from .exceptions import CacheError, InvalidTtlError

_ISO_DURATION = re.compile(
    r"P(?:(?P<years>\d+)Y)?(?:(?P<months>\d+)M)?(?:(?P<weeks>\d+)W)?(?:(?P<days>\d+)D)?"
    r"(?:T(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?(?:(?P<seconds>\d+)S)?)?"
)
_PHRASE_PART = re.compile(r"(\d+)\s*([a-z]+)")
_PHRASE_FILLER = re.compile(r"[\s,]+|\band\b")

_UNITS = {
    "y": "years",
    "yr": "years",
    "yrs": "years",
    "year": "years",
    "years": "years",
    "mo": "months",
    "mos": "months",
    "month": "months",
    "months": "months",
    "w": "weeks",
    "wk": "weeks",
    "wks": "weeks",
    "week": "weeks",
    "weeks": "weeks",
    "d": "days",
    "day": "days",
    "days": "days",
    "h": "hours",
    "hr": "hours",
    "hrs": "hours",
    "hour": "hours",
    "hours": "hours",
    "m": "minutes",
    "min": "minutes",
    "mins": "minutes",
    "minute": "minutes",
    "minutes": "minutes",
    "s": "seconds",
    "sec": "seconds",
    "secs": "seconds",
    "second": "seconds",
    "seconds": "seconds",
}


@dataclass(frozen=True)
class Interval:
    """A calendar interval whose length depends on when it starts."""

    years: int = 0
    months: int = 0
    weeks: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @classmethod
    def parse(cls, text: str) -> "Interval":
        """
        Parse an ISO 8601 duration ("P1D", "PT90M") or a phrase ("2 months",
        "1 hour, 30 minutes").

        Raises:
            ValueError: If the text is not a recognizable interval.
        """
        text = text.strip()
        match = _ISO_DURATION.fullmatch(text.upper())
        if match and text.upper() not in ("P", "PT") and not text.upper().endswith("T"):
            return cls(**{k: int(v) for k, v in match.groupdict().items() if v})

        return cls._parse_phrase(text.lower())

    @classmethod
    def _parse_phrase(cls, text: str) -> "Interval":
        parts = _PHRASE_PART.findall(text)
        if not parts or _PHRASE_FILLER.sub("", _PHRASE_PART.sub("", text)):
            raise ValueError(f'Cannot parse interval "{text}"')

        fields: dict[str, int] = {}
        for amount, unit in parts:
            name = _UNITS.get(unit)
            if name is None:
                raise ValueError(f'Unknown interval unit "{unit}"')
            fields[name] = fields.get(name, 0) + int(amount)
        return cls(**fields)

    def add_to(self, moment: datetime) -> datetime:
        """Add this interval to a moment, clamping to the end of short months."""
        month_index = moment.month - 1 + self.months + 12 * self.years
        year = moment.year + month_index // 12
        month = month_index % 12 + 1
        day = min(moment.day, calendar.monthrange(year, month)[1])

        shifted = moment.replace(year=year, month=month, day=day)
        return shifted + timedelta(
            weeks=self.weeks,
            days=self.days,
            hours=self.hours,
            minutes=self.minutes,
            seconds=self.seconds,
        )


TTL = int | timedelta | Interval | str


def normalize_ttl(ttl: TTL, now: datetime | None = None) -> int:
    """
    Convert a TTL into a whole number of seconds.

    Integers pass through unchanged. Calendar intervals are resolved against
    ``now`` (the current UTC time by default), so "1 month" started on
    January 31st is shorter than one started on March 1st.

    Raises:
        InvalidTtlError: If the TTL has an unsupported type, is an unparseable
            string, or is not a whole number of seconds.
        CacheError: If the interval cannot be resolved against ``now``.
    """
    if isinstance(ttl, bool):
        raise InvalidTtlError("The specified cache TTL is invalid")

    if isinstance(ttl, int):
        return ttl

    if isinstance(ttl, str):
        try:
            ttl = Interval.parse(ttl)
        except ValueError as e:
            raise InvalidTtlError(f"The specified cache TTL is invalid: {e}") from e

    if isinstance(ttl, timedelta):
        if ttl.microseconds:
            raise InvalidTtlError(
                f"Cache TTL must be a whole number of seconds, got {ttl.total_seconds()}"
            )
        return ttl.days * 86400 + ttl.seconds

    if isinstance(ttl, Interval):
        reference = now or datetime.now(timezone.utc)
        try:
            end = ttl.add_to(reference)
        except (OverflowError, ValueError) as e:
            raise CacheError(f"Could not normalize cache TTL: {e}") from e
        delta = end - reference
        return delta.days * 86400 + delta.seconds

    raise InvalidTtlError("The specified cache TTL is invalid")
