"""Extendible config loading. Add new providers (env, vault, etc.) by implementing ConfigProvider."""

from commons.config.loader import (
    ConfigProvider,
    DictConfigProvider,
    YamlConfigProvider,
    get_config,
    get_section,
)

_config_instance = None


def load_config(path=None):
    """Load config once; optional path for tests or overrides."""
    global _config_instance
    if _config_instance is None:
        _config_instance = YamlConfigProvider(path=path).load()
    return _config_instance


config = load_config()

__all__ = [
    "ConfigProvider",
    "DictConfigProvider",
    "YamlConfigProvider",
    "get_config",
    "get_section",
    "load_config",
    "config",
]
