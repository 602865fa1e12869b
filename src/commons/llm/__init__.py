"""LLM provider factory. Switch provider in config (llm.provider: openai | azure | anthropic | groq | ollama)."""

from commons.llm.factory import get_llm, get_llm_model_name, get_llm_provider

__all__ = ["get_llm", "get_llm_model_name", "get_llm_provider"]
