# utils/config.py
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Union

import yaml

from jpegresize.core.errors import ConfigError

DEFAULT_CONFIG_FILE = "jpegresize.yaml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
INT_FIELDS = ("out_width", "out_height", "quality", "quota")
STR_FIELDS = ("input_dir", "output_dir", "log_level", "log_dir")


@dataclass
class Config:
    out_width: int = 1920
    out_height: int = 1920
    quality: int = 89
    quota: Optional[int] = None  # None => one task per CPU
    input_dir: str = "2. Для печати и дизайна"
    output_dir: str = "1. Для просмотра и интернета"
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    @classmethod
    def load(cls, path: Union[str, Path, None] = None):
        config_file = Path(path) if path else Path(DEFAULT_CONFIG_FILE)
        if config_file.exists():
            with open(config_file, encoding='utf-8') as f:
                try:
                    data = yaml.safe_load(f) or {}
                except yaml.YAMLError as e:
                    raise ConfigError(f"Malformed YAML ({e})", config_file) from e
            if not isinstance(data, dict):
                raise ConfigError("Config file must contain a mapping", config_file)

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(data) - known)
            if unknown:
                raise ConfigError(f"Unknown config keys {unknown}", config_file)

            config = cls(**data)
            config.validate(config_file)
            return config

        # no file => defaults
        return cls()

    def validate(self, source: Union[str, Path, None] = None):
        for name in INT_FIELDS:
            value = getattr(self, name)
            if value is None and name == "quota":
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"'{name}' must be an integer, got {value!r}", source)
        for name in STR_FIELDS:
            value = getattr(self, name)
            if value is None and name == "log_dir":
                continue
            if not isinstance(value, str):
                raise ConfigError(f"'{name}' must be a string, got {value!r}", source)
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(f"'log_level' must be one of {list(LOG_LEVELS)}, got {self.log_level!r}", source)
