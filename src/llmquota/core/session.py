"""Stable session identity for the agent-driven variant."""

from __future__ import annotations

import logging
import uuid
from pathlib import Path

from llmquota.config.paths import session_id_path
from llmquota.errors.types import SessionIOError

logger = logging.getLogger(__name__)


def load_or_create_session_id(path: Path | None = None) -> str:
    """Return the persisted session id, creating it on first use.

    An existing non-empty file always wins. Concurrent creators may race;
    the last writer wins and the file always holds one whole identifier.

    Args:
        path: Identity file; defaults to the configured session id path

    Raises:
        SessionIOError: If the directory or file cannot be created or read
    """
    path = path or session_id_path()

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise SessionIOError(f"failed to create directory {path.parent}: {e}") from e

    try:
        existing = path.read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        existing = ""
    except OSError as e:
        raise SessionIOError(f"failed to read session id file {path}: {e}") from e

    if existing:
        return existing

    session_id = str(uuid.uuid4())
    # Write to temp file first, then rename so readers never see a partial id
    temp_path = path.with_name(f"{path.name}.{uuid.uuid4().hex}.tmp")
    try:
        temp_path.write_text(f"{session_id}\n", encoding="utf-8")
        temp_path.replace(path)
    except OSError as e:
        temp_path.unlink(missing_ok=True)
        raise SessionIOError(f"failed to write session id file {path}: {e}") from e

    logger.info("Created session id %s at %s", session_id, path)
    return session_id
