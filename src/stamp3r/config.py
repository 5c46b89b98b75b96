import codecs
import logging
import os
from typing import Optional

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "default_config.yaml")

DEFAULT_CONFIG = {
    "length_prefixed": False,
    "encoding": "utf-8",
    "log_level": "WARNING",
}


def _read_yaml(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f)
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")
    return loaded


def _validate(config: dict) -> dict:
    if not isinstance(config["length_prefixed"], bool):
        raise ConfigError(f"length_prefixed must be true or false, got {config['length_prefixed']!r}")
    encoding = config["encoding"]
    if not isinstance(encoding, str):
        raise ConfigError(f"encoding must be a codec name, got {encoding!r}")
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise ConfigError(f"unknown encoding {encoding!r}") from e
    return config


def load_config(config_path: Optional[str] = None) -> dict:
    """
    Load settings: built-in defaults, then the packaged default_config.yaml,
    then ``config_path`` if given. Unknown keys are ignored.

    Raises ConfigError when the user file can't be read or parsed, or when
    ``encoding`` does not name a codec.
    """
    config = dict(DEFAULT_CONFIG)
    if os.path.exists(DEFAULT_CONFIG_PATH):
        config.update({k: v for k, v in _read_yaml(DEFAULT_CONFIG_PATH).items() if k in DEFAULT_CONFIG})

    if config_path is not None:
        try:
            user = _read_yaml(config_path)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot load config {config_path}: {e}") from e
        for k, v in user.items():
            if k in DEFAULT_CONFIG:
                config[k] = v
            else:
                logger.warning("ignoring unknown config key %r", k)
    return _validate(config)
