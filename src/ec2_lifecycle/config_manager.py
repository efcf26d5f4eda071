import copy
import os
import re
import yaml
from pathlib import Path

from ec2_lifecycle.exceptions import ConfigError
from ec2_lifecycle.params import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_PATH,
    DEFAULT_SETTINGS,
    LOG_LEVELS,
)


def is_valid_region(region) -> bool:
    if not isinstance(region, str):
        return False
    return re.match(r"^[a-z]{2}(-gov)?-[a-z]+-\d$", region) is not None


def is_valid_log_level(level) -> bool:
    return isinstance(level, str) and level.upper() in LOG_LEVELS


def is_valid_aws_profile(name) -> bool:
    if not isinstance(name, str):
        return False
    return re.match(r"^[\w+=,.@-]{1,64}$", name) is not None


VALIDATORS = {
    "region": (is_valid_region, "expected a region name such as 'eu-west-1'."),
    "aws_profile": (is_valid_aws_profile, "expected a credentials profile name."),
    "log_level": (is_valid_log_level, f"expected one of {', '.join(LOG_LEVELS)}."),
}


class ConfigManager:
    def __init__(self, config_path: Path = None):
        self.config_path = Path(
            config_path or os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH
        )
        self.config = self._load_config()

    def _load_config(self):
        if self.config_path.exists():
            with self.config_path.open("r", encoding="utf-8") as f:
                try:
                    loaded = yaml.safe_load(f) or {}
                except yaml.YAMLError as e:
                    raise ConfigError(f"{self.config_path} is not valid YAML ({e})") from e
            if not isinstance(loaded, dict):
                raise ConfigError(f"{self.config_path} must contain a mapping")
            self._validate(loaded)
            return loaded
        return {}

    @staticmethod
    def _validate(loaded):
        # Empty values (`log_level:`) count as unset
        for key, (validator, error_msg) in VALIDATORS.items():
            value = loaded.get(key)
            if value is not None and not validator(value):
                raise ConfigError(error_msg, key=key)

    def save_config(self):
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with self.config_path.open("w", encoding="utf-8") as f:
            yaml.dump(self.config, f)

    @property
    def settings(self):
        merged = copy.deepcopy(DEFAULT_SETTINGS)
        merged.update(
            {
                k: v
                for k, v in self.config.items()
                if k in DEFAULT_SETTINGS and v is not None
            }
        )
        return merged

    def get(self, key):
        if key not in DEFAULT_SETTINGS:
            raise ConfigError("unknown setting.", key=key)
        return self.settings[key]

    def set(self, key, value):
        if key not in DEFAULT_SETTINGS:
            raise ConfigError("unknown setting.", key=key)
        validator, error_msg = VALIDATORS[key]
        if not validator(value):
            raise ConfigError(error_msg, key=key)
        if key == "log_level":
            value = value.upper()
        self.config[key] = value
        self.save_config()

    def unset(self, key):
        if key not in DEFAULT_SETTINGS:
            raise ConfigError("unknown setting.", key=key)
        if key in self.config:
            del self.config[key]
            self.save_config()
            return True
        return False


if __name__ == "__main__":
    pass
