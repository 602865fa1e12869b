"""Recover a JSON object from free-form LLM output (code fences, stray prose, Python-style quotes)."""

from __future__ import annotations

import ast
import json
import re
from typing import Any, Dict, Optional

_UNQUOTED_KEY = re.compile(r'(\{|,)\s*([a-zA-Z_][a-zA-Z0-9_]*)"\s*:')
_SINGLE_QUOTED_KEY = re.compile(r"'([^']*)'\s*:")


def _try_load(s: str) -> Optional[Any]:
    try:
        return json.loads(s)
    except (json.JSONDecodeError, TypeError):
        pass
    for pattern, repl in ((_UNQUOTED_KEY, r'\1"\2":'), (_SINGLE_QUOTED_KEY, r'"\1":')):
        fixed = pattern.sub(repl, s)
        if fixed != s:
            try:
                return json.loads(fixed)
            except (json.JSONDecodeError, TypeError):
                pass
    # Python literal: single quotes, True/False/None
    if s.startswith(("{", "[")):
        try:
            return ast.literal_eval(s)
        except (ValueError, SyntaxError, TypeError):
            pass
    return None


def extract_json_from_llm_output(text: str) -> Optional[Dict[str, Any]]:
    """Return the first JSON object found in text, or None."""
    if not text or not isinstance(text, str):
        return None
    s = text.strip()
    if "```" in s:
        match = re.search(r"```(?:json)?\s*([\s\S]*?)```", s)
        if match:
            s = match.group(1).strip()
    data = _try_load(s)
    if isinstance(data, str) and data.strip().startswith("{"):
        # Model wrapped the object in a JSON string
        data = _try_load(data.strip())
    if isinstance(data, dict):
        return data
    match = re.search(r"\{[\s\S]*\}", s)
    if match:
        data = _try_load(match.group(0))
        if isinstance(data, dict):
            return data
    return None
