import os
from pathlib import Path

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "gedcom_reader.yml"
CONFIG_ENV_VAR = "GEDCOM_READER_CONFIG"


class GRConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.decoder = data.get("decoder", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.debug = bool(data.get("debug", False))


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config(path=None) -> 'GRConfig':
    path = Path(path) if path is not None else config_path()
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GRConfig(data)


_config_cache = None


def get_config() -> 'GRConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    global _config_cache
    _config_cache = None
