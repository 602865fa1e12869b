"""Tests for commons.config.loader, commons.llm.factory and commons.logging_utils."""

import logging
import tempfile
from pathlib import Path

import pytest
import yaml

from commons.config.loader import (
    DictConfigProvider,
    YamlConfigProvider,
    get_config,
    get_section,
)
from commons.llm.factory import get_llm, get_llm_model_name, get_llm_provider
from commons.logging_utils import configure_logging, get_logger


def test_yaml_config_provider_loads_file():
    with tempfile.NamedTemporaryFile(
        suffix=".yaml", delete=False, mode="w", encoding="utf-8"
    ) as f:
        yaml.dump({"router": {"confidence_thresholds": {"source": 0.7}}}, f)
        path = Path(f.name)
    try:
        cfg = YamlConfigProvider(path=path).load()
        assert cfg["router"]["confidence_thresholds"]["source"] == 0.7
    finally:
        path.unlink(missing_ok=True)


def test_yaml_config_provider_missing_or_empty_file(tmp_path):
    assert YamlConfigProvider(path=tmp_path / "absent.yaml").load() == {}
    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")
    assert YamlConfigProvider(path=empty).load() == {}


def test_default_config_has_router_thresholds():
    cfg = get_config()
    thresholds = cfg["router"]["confidence_thresholds"]
    assert set(thresholds) == {"source", "animation", "face", "brand"}
    assert all(v == 0.5 for v in thresholds.values())


def test_get_config_uses_provider():
    assert get_config(DictConfigProvider({"custom": True})) == {"custom": True}


def test_get_section_walks_nested_keys():
    cfg = {"a": {"b": {"c": 1}}, "x": 5}
    assert get_section(cfg, "a", "b") == {"c": 1}
    assert get_section(cfg, "a", "missing") == {}
    assert get_section(cfg, "x", "y") == {}
    assert get_section(None, "a") == {}


class TestLlmFactory:
    def test_model_name_and_provider_defaults(self):
        assert get_llm_provider({}) == "openai"
        assert get_llm_model_name({}) == "gpt-4o-mini"

    def test_model_name_from_provider_section(self):
        cfg = {"llm": {"provider": "Groq", "providers": {"groq": {"model": "llava-groq"}}}}
        assert get_llm_provider(cfg) == "groq"
        assert get_llm_model_name(cfg) == "llava-groq"

    def test_unknown_provider_raises(self):
        with pytest.raises(ValueError, match="Unknown LLM provider"):
            get_llm(cfg={"llm": {"provider": "nope"}})

    def test_missing_api_key_raises(self, monkeypatch):
        monkeypatch.delenv("IPGUARD_TEST_KEY", raising=False)
        cfg = {"llm": {"provider": "openai", "providers": {"openai": {"api_key_env": "IPGUARD_TEST_KEY"}}}}
        with pytest.raises(ValueError, match="requires an API key"):
            get_llm(cfg=cfg)


def test_get_logger_is_namespaced():
    assert get_logger("decision.router").name == "ipguard.decision.router"
    assert get_logger("ipguard.cache").name == "ipguard.cache"


def test_configure_logging_sets_namespace_level():
    configure_logging({"logging": {"level": "warning"}})
    assert logging.getLogger("ipguard").level == logging.WARNING
    configure_logging({}, log_level="DEBUG")
    assert logging.getLogger("ipguard").level == logging.DEBUG
