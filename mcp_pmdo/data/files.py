"""Read-only file helpers for generator sources and snapshot dumps."""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def read_text(path: Path) -> str | None:
    """Read a UTF-8 file with any byte-order mark stripped.

    Returns:
        File content, or None if the file is missing or unreadable
    """
    try:
        return path.read_text(encoding="utf-8-sig")
    except FileNotFoundError:
        logger.warning(f"File not found: {path}")
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read {path}: {e}")
        return None


def read_json(path: Path, *, quiet: bool = False) -> Any | None:
    """Read and decode a JSON file.

    Args:
        path: File to read
        quiet: Log problems at debug level instead of warning

    Returns:
        Decoded JSON, or None if the file is missing or malformed
    """
    log = logger.debug if quiet else logger.warning
    try:
        content = path.read_text(encoding="utf-8-sig")
    except FileNotFoundError:
        log(f"File not found: {path}")
        return None
    except (OSError, UnicodeDecodeError) as e:
        log(f"Could not read {path}: {e}")
        return None

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        log(f"Malformed JSON in {path}: {e}")
        return None
