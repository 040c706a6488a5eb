"""
Configuration for the shared-device Undercover game
"""
from typing import Dict, Any, Optional
import os
from pathlib import Path


JUDGE_KEY_NAMES = ("UNDERCOVER_JUDGE_API_KEY", "OPENAI_API_KEY", "OPENAI-API-KEY")


def _read_env_file(env_path: Path) -> Dict[str, str]:
    """Parse KEY=value (or KEY: value) lines from a .env file."""
    values: Dict[str, str] = {}
    with env_path.open("r", encoding="utf-8") as env_file:
        for raw_line in env_file:
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue

            if "=" in line and (":" not in line or line.index("=") < line.index(":")):
                key, val = line.split("=", 1)
            elif ":" in line:
                key, val = line.split(":", 1)
            else:
                continue

            values[key.strip()] = val.strip().strip('"').strip("'")
    return values


def _load_judge_api_key() -> str:
    """
    Load the guess-judge API key from the environment or the root .env file.
    An empty string means the game runs with the exact-match judge only.
    """
    for key in JUDGE_KEY_NAMES:
        value = os.getenv(key)
        if value:
            return value.strip()

    env_path = Path(__file__).resolve().parent.parent / ".env"
    if env_path.exists():
        try:
            values = _read_env_file(env_path)
        except OSError:
            return ""
        for key in JUDGE_KEY_NAMES:
            if values.get(key):
                return values[key]

    return ""


def _load_seed() -> Optional[int]:
    raw = os.getenv("UNDERCOVER_SEED", "").strip()
    return int(raw) if raw.lstrip("-").isdigit() else None


# Game Configuration
GAME_CONFIG: Dict[str, Any] = {
    # Game Rules
    "min_players": 3,
    "max_players": 20,
    "max_mr_white": 1,

    # Role counts offered by the setup screen
    "default_role_config": {"mr_white": 1, "undercover": 2},

    # Mr. White guess countdown (seconds)
    "mr_white_guess_seconds": 30,

    # Grace periods shown by the UI before moving on (seconds)
    "feedback_delay_seconds": 3,
    "replay_delay_seconds": 0.8,

    # Fixed seed for reproducible shuffles, None for a fresh one
    "seed": _load_seed(),
}


# Guess Judge Configuration
JUDGE_CONFIG: Dict[str, Any] = {
    "api_key": _load_judge_api_key(),
    "base_url": os.getenv("UNDERCOVER_JUDGE_BASE_URL", "https://api.openai.com/v1"),
    "model": os.getenv("UNDERCOVER_JUDGE_MODEL", "gpt-4o-mini"),
    "request_timeout": 10,
}


# Logging Configuration
LOG_CONFIG: Dict[str, Any] = {
    "log_dir": "logs",
    "log_file": "game.log",
    "enabled": True,
}
