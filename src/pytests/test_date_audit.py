from datetime import datetime, timezone

import pytest
from faker import Faker

from audits.date_audit import expected_bounds, run_date_audit
from generators import DateEngine

NOW = datetime(2024, 2, 29, 12, 30, 45, tzinfo=timezone.utc)


def seeded_engine(engine_cls=DateEngine, seed=99):
    faker = Faker()
    faker.seed_instance(seed)
    return engine_cls(faker=faker, clock=lambda: NOW)


def test_audit_passes_for_a_healthy_engine():
    summary = run_date_audit(seeded_engine(), samples=600)
    assert set(summary) == {"bounded_dates", "birthdates", "timestamp_rendering", "scalar_fields", "name_lookups"}
    assert all(count > 0 for count in summary.values())


def test_expected_bounds_clamp_leap_day():
    assert expected_bounds("past_date", {"years": 1}, NOW)[0] == datetime(2023, 2, 28, 12, 30, 45, tzinfo=timezone.utc)
    with pytest.raises(ValueError):
        expected_bounds("birthdate_by_age", {}, NOW)


class MonthOverflowEngine(DateEngine):
    def month(self):
        return 13


class LateSoonDateEngine(DateEngine):
    def soon_date(self, days=3, date_format=None):
        return self.future_date(1, date_format)


def test_audit_flags_out_of_range_scalars():
    with pytest.raises(ValueError, match="month"):
        run_date_audit(seeded_engine(MonthOverflowEngine), samples=50)


def test_audit_flags_dates_outside_their_window():
    with pytest.raises(ValueError, match="soon_date"):
        run_date_audit(seeded_engine(LateSoonDateEngine), samples=50)
