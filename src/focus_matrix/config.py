# src/focus_matrix/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- No secrets in the environment: the API key lives in a property-list file
  and is resolved by llm/credentials.py.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_PREFIX = "FOCUS"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv() -> None:
    """Load .env locally (never overrides real environment variables)."""
    load_dotenv(override=False)


_load_dotenv()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_optional_float(name: str, default: Optional[float]) -> Optional[float]:
    # Set but empty means "omit the value".
    raw = os.getenv(name)
    if raw is None:
        return default
    s = raw.strip()
    if not s:
        return None
    try:
        return float(s)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Credential artifact ----
    credentials_path: Path
    credential_key: str

    # ---- LLM ----
    llm_endpoint: str
    llm_model: str
    llm_temperature: Optional[float]

    # ---- Matrix ----
    scheme: str
    seed_demo_tasks: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "focus").strip() or "focus"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/focus"))

        credentials_path = _env_path(_k("CREDENTIALS_PATH"), Path("Secrets.plist"))
        credential_key = _env(_k("CREDENTIAL_KEY"), "OPENAI_API_KEY").strip() or "OPENAI_API_KEY"

        llm_endpoint = _env(_k("LLM_ENDPOINT"), "https://api.openai.com/v1").strip()
        llm_model = _env(_k("LLM_MODEL"), "gpt-4o-mini").strip() or "gpt-4o-mini"
        llm_temperature = _env_optional_float(_k("LLM_TEMPERATURE"), 0.7)

        scheme = _env(_k("SCHEME"), "eisenhower").strip().lower() or "eisenhower"
        seed_demo_tasks = _env_bool(_k("SEED_DEMO_TASKS"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            credentials_path=credentials_path,
            credential_key=credential_key,
            llm_endpoint=llm_endpoint,
            llm_model=llm_model,
            llm_temperature=llm_temperature,
            scheme=scheme,
            seed_demo_tasks=seed_demo_tasks,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
