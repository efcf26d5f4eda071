from pathlib import Path
from platformdirs import user_config_dir

##### Version
VERSION = "1.1.4"

##### Paths
APP_NAME = "ec2"
CONFIG_ENV_VAR = "EC2_CONFIG"
CONFIG_DIR = Path(user_config_dir(APP_NAME))
DEFAULT_CONFIG_PATH = CONFIG_DIR / "config.yaml"

##### Settings
DEFAULT_SETTINGS = {
    "region": None,
    "aws_profile": None,
    "log_level": "WARNING",
}
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

##### Output
SEPARATOR = "~" * 50
LABEL_WIDTH = 27

if __name__ == "__main__":
    print(DEFAULT_CONFIG_PATH)
