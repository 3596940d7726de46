"""date_tables.py

Fixed calendar-name and timezone tables. Tuples only; nothing here is
mutated after import.
"""

from faker.providers.date_time import Provider as DateTimeProvider

WEEKDAYS = (
    ("Monday", "Mon"),
    ("Tuesday", "Tue"),
    ("Wednesday", "Wed"),
    ("Thursday", "Thu"),
    ("Friday", "Fri"),
    ("Saturday", "Sat"),
    ("Sunday", "Sun"),
)

MONTHS = (
    ("January", "Jan"),
    ("February", "Feb"),
    ("March", "Mar"),
    ("April", "Apr"),
    ("May", "May"),
    ("June", "Jun"),
    ("July", "Jul"),
    ("August", "Aug"),
    ("September", "Sep"),
    ("October", "Oct"),
    ("November", "Nov"),
    ("December", "Dec"),
)

WEEKDAY_NAMES = tuple(name for name, _ in WEEKDAYS)
WEEKDAY_ABBREVIATIONS = tuple(abbr for _, abbr in WEEKDAYS)
MONTH_NAMES = tuple(name for name, _ in MONTHS)
MONTH_ABBREVIATIONS = tuple(abbr for _, abbr in MONTHS)

# IANA identifiers from Faker's bundled country data, deduplicated and sorted
TIMEZONES = tuple(sorted({tz for country in DateTimeProvider.countries for tz in country.timezones}))
