# src/focus_matrix/llm/credentials.py

from __future__ import annotations

import logging
import plistlib
from pathlib import Path
from xml.parsers.expat import ExpatError

logger = logging.getLogger(__name__)


def load_api_key(path: str | Path, key: str = "OPENAI_API_KEY") -> str | None:
    """
    Read the API key from a property-list file (read-only).

    Returns None when the file or key is missing, unreadable, or empty.
    A missing key is a recoverable configuration error, surfaced later as
    MissingCredential when a summary is requested.
    """
    path = Path(path)
    if not path.exists():
        logger.info("Credentials file not found: %s", path)
        return None

    try:
        with path.open("rb") as fh:
            data = plistlib.load(fh)
    except (OSError, ValueError, ExpatError):
        logger.warning("Failed to read credentials file %s", path, exc_info=True)
        return None

    if not isinstance(data, dict):
        logger.warning("Credentials file %s is not a dictionary plist", path)
        return None

    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        logger.info("Credentials file %s has no value for %s", path, key)
        return None

    return value.strip()
