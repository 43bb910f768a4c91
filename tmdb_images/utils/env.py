from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

ENV_FILE_VARIABLE = "TMDB_IMAGES_ENV_FILE"


def _candidate_env_files() -> list[Path]:
    explicit = (os.getenv(ENV_FILE_VARIABLE) or "").strip()
    if explicit:
        return [Path(explicit).expanduser()]
    repo_root = Path(__file__).resolve().parents[2]
    return [repo_root / ".env", Path.cwd() / ".env"]


def load_env(*, override: bool = False) -> Path | None:
    """
    Load the first `.env` found ($TMDB_IMAGES_ENV_FILE, else repo root, else CWD).

    Variables already set in the process environment win unless `override=True`.
    """
    for path in _candidate_env_files():
        if path.is_file():
            load_dotenv(dotenv_path=path, override=override)
            return path
    return None
