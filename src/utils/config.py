"""
Module for loading and accessing configuration from a YAML file for date fixture generation.
"""

import yaml
from pathlib import Path
import os

class Config:
    def __init__(self, yaml_path=None):
        # Default path to YAML config
        default_path = Path(__file__).parent.parent.parent / 'config' / 'date_gen_template.yaml'
        self.yaml_path = Path(
            yaml_path
            or os.getenv("CONFIG", str(default_path))
        )
        self._load_yaml()

    def _load_yaml(self):
        with open(self.yaml_path, 'r') as f:
            self.raw_config = yaml.safe_load(f) or {}
        self.faker_seed = self.raw_config.get('faker_seed', None)
        self.faker_locale = self.raw_config.get('faker_locale', None)

    @property
    def vocab(self):
        return self.raw_config.get('vocab') or {}

    @property
    def parameters(self):
        return self.raw_config.get('parameters') or {}

    def get_vocab_list(self, key, default=None):
        return self.vocab.get(key, default or [])

    def get_parameter(self, key, default=None):
        return self.parameters.get(key, default)

    @property
    def timezones(self):
        return self.get_vocab_list('timezones') or []

    @property
    def date_format(self):
        return self.get_parameter('date_format') or 'ISO'

    @property
    def audit_samples(self):
        return self.get_parameter('audit_samples', 1000)


if __name__ == '__main__':
    # Quick test print
    config = Config()
    print('Faker Seed:', config.faker_seed)
    print('Date Format:', config.date_format)
    print('Timezones:', len(config.timezones))
