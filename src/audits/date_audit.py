import argparse
import logging
import sys
import numpy as np
import pandas as pd

from generators.date_tables import MONTH_ABBREVIATIONS, MONTH_NAMES, WEEKDAY_ABBREVIATIONS, WEEKDAY_NAMES
from generators.generator_dates import DateEngine, DateFormat
from utils.config import Config
from utils.date_utils import age_on, format_timestamp, parse_instant, shift_days, shift_years, year_end, year_start

# Setup logging
logger = logging.getLogger("date_audit")
logger.setLevel(logging.DEBUG)
ch = logging.StreamHandler(sys.stdout)
ch.setLevel(logging.DEBUG)
formatter = logging.Formatter("%(levelname)s: %(message)s")
ch.setFormatter(formatter)
logger.addHandler(ch)

# Ranges exercised by the audit: (generator, kwargs)
BOUNDED_CASES = [
    ("past_date", {"years": 1}),
    ("past_date", {"years": 5}),
    ("future_date", {"years": 1}),
    ("future_date", {"years": 5}),
    ("recent_date", {"days": 3}),
    ("recent_date", {"days": 10}),
    ("soon_date", {"days": 3}),
    ("soon_date", {"days": 10}),
]

AGE_CASES = [(18, 80), (20, 30), (40, 40)]
YEAR_CASES = [(1920, 2000), (1996, 1996), (2000, 2004)]

# Below this many draws, a missing month/weekday is not worth flagging
COVERAGE_MIN_SAMPLES = 500


def handle_issue(message, level="error"):
    """
    Handle audit issues by severity.
    level: 'error' raises, 'warn' only logs.
    """
    if level == "warn":
        logger.warning(message)
    else:
        logger.error(message)
        raise ValueError(message)


def expected_bounds(name, kwargs, now):
    """The inclusive [start, end] window a bounded generator must stay in."""
    if name == "past_date":
        return shift_years(now, -kwargs["years"]), now
    if name == "future_date":
        return now, shift_years(now, kwargs["years"])
    if name == "recent_date":
        return shift_days(now, -kwargs["days"]), now
    if name == "soon_date":
        return now, shift_days(now, kwargs["days"])
    raise ValueError(f"No bounds known for generator '{name}'.")


def draw_instants(engine, name, samples, date_format=DateFormat.ISO, **kwargs):
    """Draw samples from one generator into a DataFrame of raw strings and parsed instants."""
    generator = getattr(engine, name)
    df = pd.DataFrame({"raw": [generator(date_format=date_format, **kwargs) for _ in range(samples)]})
    df["instant"] = df["raw"].map(parse_instant)
    return df


### --- Audit checks ---

def audit_bounded_dates(engine, now, samples):
    checked = 0
    for name, kwargs in BOUNDED_CASES:
        start, end = expected_bounds(name, kwargs, now)
        df = draw_instants(engine, name, samples, **kwargs)
        outside = df[(df["instant"] < start) | (df["instant"] > end)]
        if not outside.empty:
            handle_issue(f"{len(outside)} {name}({kwargs}) values outside [{start}, {end}]. Sample:\n{outside.head()}")
        checked += len(df)
    logger.info("✅ past/future/recent/soon dates stay inside their windows.")
    return checked


def audit_birthdates(engine, now, samples):
    checked = 0
    for min_age, max_age in AGE_CASES:
        df = draw_instants(engine, "birthdate_by_age", samples, min_age=min_age, max_age=max_age)
        df["age"] = df["instant"].map(lambda born: age_on(born, now))
        df["year_gap"] = df["instant"].map(lambda born: now.year - born.year)
        if not df["age"].between(min_age, max_age).all():
            handle_issue(f"birthdate_by_age({min_age}, {max_age}) produced ages {sorted(df['age'].unique())}.")
        if not df["year_gap"].between(min_age, max_age).all():
            handle_issue(f"birthdate_by_age({min_age}, {max_age}) produced year gaps {sorted(df['year_gap'].unique())}.")
        checked += len(df)

    for min_year, max_year in YEAR_CASES:
        df = draw_instants(engine, "birthdate_by_year", samples, min_year=min_year, max_year=max_year)
        start, end = year_start(min_year), year_end(max_year)
        outside = df[(df["instant"] < start) | (df["instant"] > end)]
        if not outside.empty:
            handle_issue(f"{len(outside)} birthdate_by_year({min_year}, {max_year}) values outside range. Sample:\n{outside.head()}")
        checked += len(df)
    logger.info("✅ Birthdates respect their age and year ranges.")
    return checked


def audit_timestamp_rendering(engine, samples):
    """Timestamp strings must parse and re-render to the identical string."""
    df = draw_instants(engine, "birthdate_by_year", samples, date_format=DateFormat.Timestamp)
    mismatched = df[df["instant"].map(format_timestamp) != df["raw"]]
    if not mismatched.empty:
        handle_issue(f"{len(mismatched)} timestamps did not survive a parse/render round trip. Sample:\n{mismatched.head()}")
    logger.info("✅ Timestamp renderings round-trip exactly.")
    return len(df)


def audit_scalar_fields(engine, samples):
    ranges = {
        "year": (1800, 2000),
        "month": (1, 12),
        "hour": (0, 23),
        "minutes": (0, 59),
        "seconds": (0, 59),
        "day_of_month": (1, 31),
        "day_of_week": (1, 7),
    }
    df = pd.DataFrame({name: [getattr(engine, name)() for _ in range(samples)] for name in ranges})
    for name, (low, high) in ranges.items():
        if not df[name].between(low, high).all():
            handle_issue(f"{name}() returned values outside [{low}, {high}]: min={df[name].min()}, max={df[name].max()}")

    if samples >= COVERAGE_MIN_SAMPLES:
        for name, high in (("month", 12), ("day_of_week", 7)):
            counts = np.bincount(df[name].to_numpy(), minlength=high + 1)[1:]
            missing = np.flatnonzero(counts == 0) + 1
            if missing.size:
                handle_issue(f"{name}() never produced {missing.tolist()} in {samples} draws.", level="warn")

    times = pd.Series([engine.time() for _ in range(samples)])
    if not times.str.fullmatch(r"(1?[0-9]|2[0-3]):[0-5][0-9]").all():
        handle_issue(f"time() produced malformed values: {times[~times.str.fullmatch(r'(1?[0-9]|2[0-3]):[0-5][0-9]')].head().tolist()}")
    logger.info("✅ Scalar field draws are within their documented ranges.")
    return len(df) * len(ranges) + len(times)


def audit_name_lookups(engine, samples):
    tables = {
        "weekday_name": set(WEEKDAY_NAMES),
        "weekday_abbreviated_name": set(WEEKDAY_ABBREVIATIONS),
        "month_name": set(MONTH_NAMES),
        "month_abbreviated_name": set(MONTH_ABBREVIATIONS),
        "timezone": set(engine.timezones),
    }
    checked = 0
    for name, allowed in tables.items():
        values = pd.Series([getattr(engine, name)() for _ in range(samples)])
        unknown = values[~values.isin(allowed)]
        if not unknown.empty:
            handle_issue(f"{name}() returned values outside its table: {unknown.unique().tolist()}")
        checked += len(values)
    logger.info("✅ Calendar names and timezones come from their fixed tables.")
    return checked


def run_date_audit(engine=None, samples=1000):
    """
    Runs every audit against a frozen-clock view of the engine.
    Returns a dict of check name -> number of values checked.
    """
    engine = engine or DateEngine()
    now = engine.now()
    frozen = type(engine)(faker=engine.faker, clock=lambda: now, timezones=engine.timezones)
    logger.info(f"Auditing date generators with {samples} samples per case (now={now.isoformat()})")
    summary = {
        "bounded_dates": audit_bounded_dates(frozen, now, samples),
        "birthdates": audit_birthdates(frozen, now, samples),
        "timestamp_rendering": audit_timestamp_rendering(frozen, samples),
        "scalar_fields": audit_scalar_fields(frozen, samples),
        "name_lookups": audit_name_lookups(frozen, samples),
    }
    logger.info(f"Audit complete: {sum(summary.values())} values checked.")
    return summary


def main():
    parser = argparse.ArgumentParser(description="Audit the date fixture generators.")
    parser.add_argument('--config', type=str, default=None, help='Path to YAML config file')
    parser.add_argument('--samples', type=int, default=None, help='Draws per generator case')
    parser.add_argument('--seed', type=int, default=None, help='Override the configured faker_seed')
    args = parser.parse_args()

    config = Config(yaml_path=args.config)
    engine = DateEngine.from_config(config)
    if args.seed is not None:
        engine.faker.seed_instance(args.seed)
    run_date_audit(engine, samples=args.samples or config.audit_samples)


if __name__ == "__main__":
    main()
