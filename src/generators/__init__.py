#in it!

# === 📅 Date Fixture Generators ===

from .generator_common_utils import InvalidRange
from .generator_dates import (
    DateEngine,
    DateFormat,
    between_date,
    birthdate_by_age,
    birthdate_by_year,
    day_of_month,
    day_of_week,
    future_date,
    get_default_engine,
    hour,
    minutes,
    month,
    month_abbreviated_name,
    month_name,
    past_date,
    recent_date,
    seconds,
    set_default_engine,
    soon_date,
    time,
    timezone,
    weekday_abbreviated_name,
    weekday_name,
    year,
)
