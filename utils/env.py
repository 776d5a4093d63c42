from __future__ import annotations

from pathlib import Path
import os

from dotenv import load_dotenv

"""Environment helper utilities.

Loads a `.env` file so that settings such as ``OPENAI_API_KEY`` or
``MARGINIQ_MODEL`` become available via ``os.getenv`` before
``AppConfig.from_env`` reads them. ``MARGINIQ_ENV_FILE`` points at an
explicit file; otherwise the `.env` next to `pyproject.toml` is used.
Variables already present in the process environment always win.
"""

__all__ = ["load_project_dotenv", "resolve_dotenv_path"]

ENV_FILE_VARIABLE = "MARGINIQ_ENV_FILE"


def _find_project_root(start: Path | None = None) -> Path:
    """Traverse upwards until we find a directory that contains `pyproject.toml`."""
    current = start or Path(__file__).resolve().parent
    for _ in range(10):
        if (current / "pyproject.toml").exists():
            return current
        if current.parent == current:
            break
        current = current.parent
    return Path(__file__).resolve().parent


def resolve_dotenv_path() -> Path:
    """Return the `.env` path to load, honouring ``MARGINIQ_ENV_FILE``."""
    explicit = os.getenv(ENV_FILE_VARIABLE)
    if explicit:
        return Path(explicit).expanduser()
    return _find_project_root() / ".env"


def load_project_dotenv() -> bool:
    """Load environment variables from the resolved `.env` if present.

    Returns True when a file was loaded.
    """
    dotenv_path = resolve_dotenv_path()
    if not dotenv_path.exists():
        return False
    load_dotenv(dotenv_path=dotenv_path, override=False)
    return True
