"""Dashboard configuration management."""

from functools import lru_cache
from pathlib import Path

from .schemas import DashboardConfig
from .utils import load_json

CONFIG_PATH = Path(__file__).parent.parent / 'data' / 'dashboard_config.json'


@lru_cache(maxsize=1)
def get_config() -> DashboardConfig:
    """
    Load dashboard configuration from data/dashboard_config.json.

    Configuration is cached after first load. A missing file yields the
    defaults declared on DashboardConfig.

    Raises:
        ValueError: If config file has invalid structure
    """
    if not CONFIG_PATH.exists():
        return DashboardConfig()
    return load_json(CONFIG_PATH, schema=DashboardConfig)


def get_season_file() -> Path:
    """Season file path, resolved against the project root when relative."""
    path = Path(get_config().season_file)
    return path if path.is_absolute() else CONFIG_PATH.parent.parent / path


def get_default_metric() -> str:
    return get_config().default_metric


def get_container_width() -> int:
    return get_config().container_width


def get_device_pixel_ratio() -> float:
    return get_config().device_pixel_ratio


def get_output_dir() -> Path:
    return Path(get_config().output_dir)


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file is modified during runtime
    and you need to reload it.
    """
    get_config.cache_clear()
