"""Module for generating synthetic dates, times and calendar names.

Every generator draws from the `random.Random` owned by a Faker instance and
reads "now" from an injectable clock, so fixtures are reproducible once the
Faker instance is seeded and the clock is pinned.

Functions:
- past_date / future_date: instants up to N calendar years from now.
- recent_date / soon_date: instants up to N days from now.
- birthdate_by_age / birthdate_by_year: birthdates bounded by age or year.
- year, month, hour, minutes, seconds, day_of_month, day_of_week, time:
  independent scalar draws.
- weekday_name, month_name (and abbreviated forms), timezone: table picks.
"""

import logging
from datetime import datetime, timedelta, timezone as tz
from enum import Enum

from faker import Faker

from .date_tables import (
    MONTH_ABBREVIATIONS,
    MONTH_NAMES,
    TIMEZONES,
    WEEKDAY_ABBREVIATIONS,
    WEEKDAY_NAMES,
)
from .generator_common_utils import InvalidRange, check_non_negative, check_range, check_within
from utils.date_utils import (
    MAX_YEAR,
    MIN_YEAR,
    format_iso,
    format_timestamp,
    seconds_between,
    shift_days,
    shift_years,
    to_instant,
    year_end,
    year_start,
)
from utils.shared_utils import pick_from_table

logger = logging.getLogger(__name__)


class DateFormat(Enum):
    ISO = "iso"
    Timestamp = "timestamp"

    @classmethod
    def coerce(cls, value):
        """Accepts a member, or its name/value as a case-insensitive string."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.name.lower()):
                    return member
        raise ValueError(f"Unknown date format: {value!r}")


def _utc_now():
    return datetime.now(tz.utc)


class DateEngine:
    """
    Stateless date fixture generator.

    Args:
        faker (Faker, optional): source of randomness; `faker.random` is used for all draws.
        clock (callable, optional): returns the current datetime; defaults to the UTC wall clock.
        timezones (sequence, optional): replacement timezone table.
        date_format (DateFormat or str): rendering used when a call does not pass one.
    """

    def __init__(self, faker=None, clock=None, timezones=None, date_format=DateFormat.ISO):
        self.faker = faker or Faker()
        self.clock = clock or _utc_now
        self.timezones = tuple(timezones) if timezones else TIMEZONES
        self.default_format = DateFormat.coerce(date_format)

    @classmethod
    def from_config(cls, config, clock=None):
        """Build an engine from a utils.config.Config instance."""
        faker = Faker(config.faker_locale) if config.faker_locale else Faker()
        if config.faker_seed is not None:
            faker.seed_instance(config.faker_seed)
            logger.debug("Seeded Faker with %s", config.faker_seed)
        return cls(
            faker=faker,
            clock=clock,
            timezones=config.timezones,
            date_format=config.date_format,
        )

    @property
    def random(self):
        return self.faker.random

    def now(self):
        return to_instant(self.clock())

    def render(self, instant, date_format=None):
        date_format = self.default_format if date_format is None else DateFormat.coerce(date_format)
        instant = to_instant(instant)
        if date_format is DateFormat.Timestamp:
            return format_timestamp(instant)
        return format_iso(instant)

    # --- Range-bounded instants ---

    def _offset(self, instant, years=0, days=0):
        try:
            return shift_days(shift_years(instant, years), days)
        except (OverflowError, ValueError):
            message = f"Offset of {years} years / {days} days from {format_iso(instant)} leaves the supported calendar."
            logger.error(message)
            raise InvalidRange(message) from None

    def _draw_between(self, start, end):
        return start + timedelta(seconds=self.random.randint(0, seconds_between(start, end)))

    def between_date(self, start, end, date_format=None):
        """Uniform instant in [start, end]; bounds may be datetimes, ISO strings or epoch seconds."""
        start, end = to_instant(start), to_instant(end)
        check_range(start, end, "date range")
        return self.render(self._draw_between(start, end), date_format)

    def past_date(self, years=1, date_format=None):
        check_non_negative(years, "years")
        now = self.now()
        return self.render(self._draw_between(self._offset(now, years=-years), now), date_format)

    def future_date(self, years=1, date_format=None):
        check_non_negative(years, "years")
        now = self.now()
        return self.render(self._draw_between(now, self._offset(now, years=years)), date_format)

    def recent_date(self, days=3, date_format=None):
        check_non_negative(days, "days")
        now = self.now()
        return self.render(self._draw_between(self._offset(now, days=-days), now), date_format)

    def soon_date(self, days=3, date_format=None):
        check_non_negative(days, "days")
        now = self.now()
        return self.render(self._draw_between(now, self._offset(now, days=days)), date_format)

    def birthdate_by_age(self, min_age=18, max_age=80, date_format=None):
        """
        Birthdate whose completed age today lies in [min_age, max_age].

        The draw covers [now - max_age years, now - min_age years], which also
        keeps the plain calendar-year difference inside the same range.
        """
        check_non_negative(min_age, "min_age")
        check_range(min_age, max_age, "age range")
        now = self.now()
        start = self._offset(now, years=-max_age)
        end = self._offset(now, years=-min_age)
        return self.render(self._draw_between(start, end), date_format)

    def birthdate_by_year(self, min_year=1920, max_year=2000, date_format=None):
        check_range(min_year, max_year, "year range")
        check_within(min_year, MIN_YEAR, MAX_YEAR, "minimum year")
        check_within(max_year, MIN_YEAR, MAX_YEAR, "maximum year")
        return self.render(self._draw_between(year_start(min_year), year_end(max_year)), date_format)

    # --- Scalar fields (independent draws) ---

    def year(self, min_year=1800, max_year=2000):
        check_non_negative(min_year, "min_year")
        check_range(min_year, max_year, "year range")
        return self.random.randint(min_year, max_year)

    def month(self):
        return self.random.randint(1, 12)

    def hour(self):
        return self.random.randint(0, 23)

    def minutes(self):
        return self.random.randint(0, 59)

    def seconds(self):
        return self.random.randint(0, 59)

    def day_of_month(self):
        # Not tied to any month; 31 is always possible.
        return self.random.randint(1, 31)

    def day_of_week(self):
        return self.random.randint(1, 7)

    def time(self):
        """Random "H:MM" time; the hour is not zero padded."""
        return f"{self.hour()}:{self.minutes():02d}"

    # --- Table lookups ---

    def weekday_name(self):
        return pick_from_table(self.random, WEEKDAY_NAMES, "weekdays")

    def weekday_abbreviated_name(self):
        return pick_from_table(self.random, WEEKDAY_ABBREVIATIONS, "weekday abbreviations")

    def month_name(self):
        return pick_from_table(self.random, MONTH_NAMES, "months")

    def month_abbreviated_name(self):
        return pick_from_table(self.random, MONTH_ABBREVIATIONS, "month abbreviations")

    def timezone(self):
        return pick_from_table(self.random, self.timezones, "timezones")


# === Module-level surface bound to a default engine ===

_default_engine = None


def get_default_engine():
    global _default_engine
    if _default_engine is None:
        _default_engine = DateEngine()
    return _default_engine


def set_default_engine(engine):
    """Swap the engine behind the module functions; returns the previous one."""
    global _default_engine
    previous = _default_engine
    _default_engine = engine
    return previous


def between_date(start, end, date_format=None):
    return get_default_engine().between_date(start, end, date_format)


def past_date(years=1, date_format=None):
    return get_default_engine().past_date(years, date_format)


def future_date(years=1, date_format=None):
    return get_default_engine().future_date(years, date_format)


def recent_date(days=3, date_format=None):
    return get_default_engine().recent_date(days, date_format)


def soon_date(days=3, date_format=None):
    return get_default_engine().soon_date(days, date_format)


def birthdate_by_age(min_age=18, max_age=80, date_format=None):
    return get_default_engine().birthdate_by_age(min_age, max_age, date_format)


def birthdate_by_year(min_year=1920, max_year=2000, date_format=None):
    return get_default_engine().birthdate_by_year(min_year, max_year, date_format)


def year(min_year=1800, max_year=2000):
    return get_default_engine().year(min_year, max_year)


def month():
    return get_default_engine().month()


def hour():
    return get_default_engine().hour()


def minutes():
    return get_default_engine().minutes()


def seconds():
    return get_default_engine().seconds()


def day_of_month():
    return get_default_engine().day_of_month()


def day_of_week():
    return get_default_engine().day_of_week()


def time():
    return get_default_engine().time()


def weekday_name():
    return get_default_engine().weekday_name()


def weekday_abbreviated_name():
    return get_default_engine().weekday_abbreviated_name()


def month_name():
    return get_default_engine().month_name()


def month_abbreviated_name():
    return get_default_engine().month_abbreviated_name()


def timezone():
    return get_default_engine().timezone()
