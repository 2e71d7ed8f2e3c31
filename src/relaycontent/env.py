"""Environment bootstrap for relay normalization settings."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

_ENV_FILE_OVERRIDE_VAR = "RELAYCONTENT_ENV_FILE"
_loaded_dotenv: Path | None = None


def project_dotenv_path() -> Path:
    """Return the .env that settings are read from.

    ``RELAYCONTENT_ENV_FILE`` wins; otherwise the nearest ``.env`` at or above the
    working directory, falling back to ``./.env``.
    """
    override = os.environ.get(_ENV_FILE_OVERRIDE_VAR, "").strip()
    if override:
        return (Path.cwd() / Path(override).expanduser()).resolve()

    cwd = Path.cwd().resolve()
    for directory in (cwd, *cwd.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return cwd / ".env"


def bootstrap_env(dotenv_path: Path | None = None, *, override: bool = False) -> Path:
    """Load relay settings from a .env file; repeated calls for the same file are no-ops."""
    global _loaded_dotenv
    path = dotenv_path or project_dotenv_path()
    if override or path != _loaded_dotenv:
        load_dotenv(dotenv_path=path, override=override)
        _loaded_dotenv = path
    return path
