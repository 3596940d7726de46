import pytest
import yaml
from pathlib import Path
from utils.config import Config
from generators import DateEngine, DateFormat
from generators.date_tables import TIMEZONES

TEMPLATE = Path(__file__).resolve().parents[2] / "config" / "date_gen_template.yaml"
FIXED_NOW = lambda: "2024-02-29T12:30:45Z"


def test_yaml_loads_without_error():
    with open(TEMPLATE) as f:
        config = yaml.safe_load(f)
    assert isinstance(config, dict)


def test_template_date_format_is_known():
    cfg = Config(TEMPLATE)
    assert DateFormat.coerce(cfg.date_format) in DateFormat


def test_template_audit_samples_is_positive():
    cfg = Config(TEMPLATE)
    assert isinstance(cfg.audit_samples, int) and cfg.audit_samples > 0


def test_config_env_var_is_used(tmp_path, monkeypatch):
    path = tmp_path / "dates.yaml"
    path.write_text("faker_seed: 3\nparameters:\n  date_format: timestamp\n")
    monkeypatch.setenv("CONFIG", str(path))
    cfg = Config()
    assert cfg.yaml_path == path
    assert cfg.faker_seed == 3
    assert cfg.date_format == "timestamp"


def test_empty_config_falls_back_to_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    cfg = Config(path)
    assert cfg.faker_seed is None
    assert cfg.timezones == []
    assert cfg.date_format == "ISO"


def test_engine_from_config_applies_seed_format_and_timezones(tmp_path):
    path = tmp_path / "dates.yaml"
    path.write_text(
        "faker_seed: 11\n"
        "vocab:\n  timezones: [Europe/Oslo, Asia/Tokyo]\n"
        "parameters:\n  date_format: Timestamp\n"
    )
    first = DateEngine.from_config(Config(path), clock=FIXED_NOW)
    second = DateEngine.from_config(Config(path), clock=FIXED_NOW)
    assert first.default_format is DateFormat.Timestamp
    assert first.timezones == ("Europe/Oslo", "Asia/Tokyo")
    assert [first.past_date(2) for _ in range(5)] == [second.past_date(2) for _ in range(5)]
    assert first.past_date(0) == second.past_date(0) == "1709209845"
    assert [first.timezone() for _ in range(5)] == [second.timezone() for _ in range(5)]


def test_seeded_engines_from_config_start_with_identical_streams(tmp_path):
    path = tmp_path / "dates.yaml"
    path.write_text("faker_seed: 5\n")
    fresh = lambda: DateEngine.from_config(Config(path), clock=FIXED_NOW)
    assert fresh().birthdate_by_age() == fresh().birthdate_by_age()
    assert fresh().time() == fresh().time()


def test_engine_from_config_reads_config_properties(tmp_path):
    path = tmp_path / "dates.yaml"
    path.write_text("vocab:\n  timezones:\nparameters:\n  date_format:\n")
    cfg = Config(path)
    assert cfg.timezones == []
    assert cfg.date_format == "ISO"
    engine = DateEngine.from_config(cfg, clock=FIXED_NOW)
    assert engine.default_format is DateFormat.ISO
    assert engine.timezones == TIMEZONES


def test_config_exposes_only_parsed_sections(tmp_path):
    path = tmp_path / "dates.yaml"
    path.write_text("faker_seed: 1\n")
    cfg = Config(path)
    assert cfg.raw_config == {"faker_seed": 1}
    assert not hasattr(cfg, "config")


def test_engine_from_template_uses_builtin_timezones():
    engine = DateEngine.from_config(Config(TEMPLATE))
    assert engine.timezones == TIMEZONES


def test_missing_config_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config(tmp_path / "missing.yaml")
