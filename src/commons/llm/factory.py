"""
Build a vision-capable LangChain chat model from config. Switch provider in config (llm.provider).
Add new providers by adding a _build_<name> function and registering in _BUILDERS.
"""

import os
from typing import Any, Dict, Optional

from commons.config import config
from commons.constants import Constants as Co

DEFAULT_PROVIDER = "openai"
DEFAULT_MODEL = "gpt-4o-mini"


def _llm_settings(cfg: Optional[Dict[str, Any]] = None) -> tuple[str, Dict[str, Any], Dict[str, Any]]:
    llm_cfg = (cfg if cfg is not None else config).get(Co.LLM) or {}
    provider = (llm_cfg.get(Co.PROVIDER) or DEFAULT_PROVIDER).strip().lower()
    providers_cfg = llm_cfg.get(Co.PROVIDERS) or {}
    return provider, llm_cfg, providers_cfg.get(provider) or {}


def get_llm_provider(cfg: Optional[Dict[str, Any]] = None) -> str:
    """Return the configured provider name (openai, azure, anthropic, groq, ollama)."""
    return _llm_settings(cfg)[0]


def get_llm_model_name(cfg: Optional[Dict[str, Any]] = None) -> str:
    """Return the configured model name."""
    _, llm_cfg, provider_cfg = _llm_settings(cfg)
    return provider_cfg.get(Co.MODEL) or llm_cfg.get(Co.MODEL) or DEFAULT_MODEL


def _looks_like_env_var(s: str) -> bool:
    return bool(s) and len(s) < 50 and s.replace("_", "").isalnum() and s.isupper()


def get_llm(
    model: str | None = None,
    temperature: float | None = None,
    cfg: Optional[Dict[str, Any]] = None,
    **kwargs: Any,
) -> Any:
    """
    Return a LangChain chat model from config.
    Uses llm.provider and llm.providers.<provider>. Override model/temperature via args.
    Cloud providers need their key in the env var named by api_key_env (e.g. OPENAI_API_KEY).
    """
    provider, llm_cfg, provider_cfg = _llm_settings(cfg)
    model = model or get_llm_model_name(cfg)
    temperature = temperature if temperature is not None else llm_cfg.get(Co.TEMPERATURE, 0)
    api_key_env_name = provider_cfg.get(Co.API_KEY_ENV) or "OPENAI_API_KEY"
    api_key = (
        os.getenv(api_key_env_name) if _looks_like_env_var(api_key_env_name) else None
    ) or provider_cfg.get("api_key") or ""

    builder = _BUILDERS.get(provider)
    if not builder:
        raise ValueError(
            f"Unknown LLM provider: {provider!r}. Supported: {list(_BUILDERS)}. "
            "Set llm.provider in config.yaml and add the provider under llm.providers."
        )
    if provider != "ollama" and not api_key.strip():
        raise ValueError(
            f"LLM provider {provider!r} requires an API key. Set {api_key_env_name!r} env var or "
            f"llm.providers.{provider}.api_key in config.yaml."
        )
    return builder(
        model=model,
        temperature=temperature,
        api_key=api_key,
        provider_cfg=provider_cfg,
        **kwargs,
    )


def _build_openai(model: str, temperature: float, api_key: str, provider_cfg: dict | None = None, **kwargs) -> Any:
    from langchain_openai import ChatOpenAI
    return ChatOpenAI(model=model, temperature=temperature, api_key=api_key, **kwargs)


def _build_azure(model: str, temperature: float, api_key: str, provider_cfg: dict | None = None, **kwargs) -> Any:
    """Azure OpenAI: set api_base_env (e.g. AZURE_OPENAI_ENDPOINT) and optionally api_version in config."""
    from langchain_openai import AzureChatOpenAI
    provider_cfg = provider_cfg or {}
    base_env = provider_cfg.get(Co.API_BASE_ENV) or "AZURE_OPENAI_ENDPOINT"
    api_version = provider_cfg.get(Co.API_VERSION) or "2024-02-15-preview"
    return AzureChatOpenAI(
        azure_deployment=model,
        temperature=temperature,
        api_key=api_key,
        azure_endpoint=os.getenv(base_env) or "",
        api_version=api_version,
        **kwargs,
    )


def _build_anthropic(model: str, temperature: float, api_key: str, provider_cfg: dict | None = None, **kwargs) -> Any:
    from langchain_anthropic import ChatAnthropic
    return ChatAnthropic(model=model, temperature=temperature, api_key=api_key, **kwargs)


def _build_groq(model: str, temperature: float, api_key: str, provider_cfg: dict | None = None, **kwargs) -> Any:
    from langchain_groq import ChatGroq
    return ChatGroq(model=model, temperature=temperature, api_key=api_key, **kwargs)


def _build_ollama(model: str, temperature: float, api_key: str, provider_cfg: dict | None = None, **kwargs) -> Any:
    """Local vision model via Ollama (e.g. llava). No API key needed."""
    from langchain_ollama import ChatOllama
    provider_cfg = provider_cfg or {}
    base_url = provider_cfg.get("base_url") or os.getenv("OLLAMA_BASE_URL") or "http://localhost:11434"
    if "max_tokens" in kwargs:
        kwargs["num_predict"] = kwargs.pop("max_tokens")
    return ChatOllama(model=model, temperature=temperature, base_url=base_url.rstrip("/"), **kwargs)


_BUILDERS: dict[str, Any] = {
    "openai": _build_openai,
    "azure": _build_azure,
    "anthropic": _build_anthropic,
    "groq": _build_groq,
    "ollama": _build_ollama,
}
