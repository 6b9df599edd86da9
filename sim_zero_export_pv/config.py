from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict


def _load_dotenv(path: str = ".env") -> Dict[str, str]:
    """
    Basic .env loader to populate os.environ when python-dotenv is unavailable.
    Returns a mapping of parsed key/value pairs.
    """
    env_path = Path(path)
    if not env_path.exists():
        return {}

    parsed: Dict[str, str] = {}
    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        os.environ.setdefault(key, value)
        parsed[key] = value
    return parsed


_load_dotenv()


def get_results_dir() -> Path:
    """
    Determine the directory where dashboard outputs are written.

    Returns:
        Absolute path from SIM_PV_RESULTS_DIR (default "results"), created
        if missing.
    """
    results_dir = Path(os.getenv("SIM_PV_RESULTS_DIR", "results")).expanduser()
    if not results_dir.is_absolute():
        results_dir = Path.cwd() / results_dir
    results_dir.mkdir(parents=True, exist_ok=True)
    return results_dir


def get_log_level() -> str:
    """
    Logging level name from SIM_PV_LOG_LEVEL.

    Unknown or empty values fall back to WARNING.
    """
    level = os.getenv("SIM_PV_LOG_LEVEL", "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return "WARNING"
    return level


def get_installation_file() -> Path | None:
    """Installation JSON configured through SIM_PV_INSTALLATION_FILE, if any."""
    value = os.getenv("SIM_PV_INSTALLATION_FILE")
    if not value:
        return None
    return Path(value).expanduser()
