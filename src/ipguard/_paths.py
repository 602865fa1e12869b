"""Project path resolution (repo root, cache directories)."""

from pathlib import Path

# Project root = repo root (parent of src)
_SRC_DIR = Path(__file__).resolve().parent.parent
PROJECT_ROOT = _SRC_DIR.parent


def project_path(*parts: str) -> str:
    return str(PROJECT_ROOT.joinpath(*parts))
