# ingest/config.py

import configparser
from pathlib import Path

from ingest.settings import API_KEY_SECTION, API_KEY_NAME
from pipeline.errors import ConfigError


def load_api_key(path) -> str:
    """
    Read the Etherscan API key from an INI file.

    Expected layout:

        [api_keys]
        ETHERSCAN_API_KEY = <key>

    :param path: Path to the config file.
    :return: The key, stripped of surrounding whitespace.
    :raises ConfigError: file missing or malformed, section/key absent, or blank value.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    parser = configparser.ConfigParser(interpolation=None)
    try:
        parser.read(path, encoding="utf-8")
    except (configparser.Error, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to parse config file {path}: {e}") from e

    if not parser.has_section(API_KEY_SECTION):
        raise ConfigError(f"Could not find [{API_KEY_SECTION}] section in {path}")

    key = parser.get(API_KEY_SECTION, API_KEY_NAME, fallback="").strip()
    if not key:
        raise ConfigError(f"Could not find {API_KEY_NAME} in {path}")
    return key
