"""Config provider protocol and implementations. Extend by adding new providers."""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

# Load .env so API keys come from env (config keeps only env var names)
_project_root = Path(__file__).resolve().parent.parent.parent.parent
load_dotenv(_project_root / ".env")

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent.parent / "config" / "config.yaml"


class ConfigProvider:
    """Protocol for config sources. Implement to add env, vault, remote, etc."""

    def load(self) -> Dict[str, Any]:
        """Return the full config dict."""
        raise NotImplementedError


class YamlConfigProvider(ConfigProvider):
    """Load config from a YAML file. A missing or empty file yields an empty dict."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else DEFAULT_CONFIG_PATH

    def load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}


class DictConfigProvider(ConfigProvider):
    """In-memory config (tests, embedding callers that build config themselves)."""

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self.data = dict(data or {})

    def load(self) -> Dict[str, Any]:
        return dict(self.data)


def get_config(provider: Optional[ConfigProvider] = None) -> Dict[str, Any]:
    """Get config from the given provider, or default YAML."""
    if provider is None:
        provider = YamlConfigProvider()
    return provider.load()


def get_section(cfg: Optional[Dict[str, Any]], *keys: str) -> Dict[str, Any]:
    """Walk nested config keys; any missing or non-dict level yields {}."""
    node: Any = cfg or {}
    for key in keys:
        if not isinstance(node, dict):
            return {}
        node = node.get(key) or {}
    return node if isinstance(node, dict) else {}
