"""Pytest fixtures and configuration. Run from project root with: PYTHONPATH=src pytest tests/ -v"""

import os
import sys
from pathlib import Path

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel

# Ensure src is on path so imports like commons.*, entity.*, ipguard.* work
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC = PROJECT_ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

os.chdir(PROJECT_ROOT)

from entity.observation import BOOLEAN_FIELDS  # noqa: E402


@pytest.fixture(autouse=True)
def _mock_vision_llm(monkeypatch):
    """Replace get_llm with a canned fake chat model so no test needs API keys."""
    monkeypatch.setattr(
        "ipguard.extractors.vision.get_llm",
        lambda **kwargs: FakeListChatModel(responses=["{}"]),
    )


@pytest.fixture
def flags():
    """Factory for a full raw attribute mapping; everything False unless overridden."""
    def make(**overrides):
        raw = {name: False for name in BOOLEAN_FIELDS}
        raw.update(overrides)
        return raw
    return make
