"""Credential file and environment access for llm-quota."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from llmquota.errors.types import CredentialError


def env_value(name: str) -> str | None:
    """Return a trimmed environment value, or None if unset or blank."""
    value = os.environ.get(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def first_env_value(*names: str) -> tuple[str, str | None] | None:
    """Return ``(name, trimmed value)`` for the first variable that is set.

    The first *present* variable wins even when its value is blank, so the
    caller can report it as empty rather than silently trying the next one.
    """
    for name in names:
        if name in os.environ:
            return name, env_value(name)
    return None


def resolve_path(override_var: str | None, default: str) -> Path:
    """Return the path named by ``override_var`` or the expanded default."""
    if override_var and (override := env_value(override_var)):
        return Path(override).expanduser()
    return Path(default).expanduser()


def read_credential_file(path: Path) -> dict[str, Any]:
    """Read a JSON credential file.

    Raises:
        CredentialError: If the file is missing, unreadable, not JSON, or
            not a JSON object
    """
    try:
        content = path.read_bytes()
    except FileNotFoundError:
        raise CredentialError(f"credentials file not found: {path}") from None
    except OSError as e:
        raise CredentialError(f"failed to read credentials file {path}: {e}") from e

    try:
        data = json.loads(content)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise CredentialError(f"invalid JSON in credentials file {path}: {e}") from e

    if not isinstance(data, dict):
        raise CredentialError(f"credentials file {path} does not contain a JSON object")

    return data


def nested_string(data: dict[str, Any], *keys: str) -> str | None:
    """Walk nested objects and return a trimmed non-empty string, or None."""
    value: Any = data
    for key in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    if not isinstance(value, str):
        return None
    return value.strip() or None
