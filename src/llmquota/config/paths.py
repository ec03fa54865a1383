"""Platform-specific paths for llm-quota configuration and state."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir
from platformdirs import user_state_dir

PACKAGE_NAME = "llmquota"

SESSION_ID_FILENAME = "codex-agent-session-id"


def _get_env_path(env_var: str, fallback: Path) -> Path:
    """Get path from environment variable or fallback."""
    if env_value := os.environ.get(env_var):
        return Path(env_value).expanduser()
    return fallback


def config_dir() -> Path:
    """Get user config directory.

    Respects LLMQUOTA_CONFIG_DIR environment variable.
    """
    base_dir = Path(user_config_dir(PACKAGE_NAME))
    return _get_env_path("LLMQUOTA_CONFIG_DIR", base_dir)


def state_dir() -> Path:
    """Get user state directory for runtime data.

    Respects LLMQUOTA_STATE_DIR environment variable.
    """
    base_dir = Path(user_state_dir(PACKAGE_NAME))
    return _get_env_path("LLMQUOTA_STATE_DIR", base_dir)


def workspace_dir() -> Path:
    """Get the agent workspace directory.

    Respects LLMQUOTA_WORKSPACE_DIR environment variable.
    """
    return _get_env_path("LLMQUOTA_WORKSPACE_DIR", state_dir() / "workspace")


def session_id_path() -> Path:
    """Get the session identity file path.

    Respects LLMQUOTA_SESSION_ID_PATH environment variable.
    """
    return _get_env_path("LLMQUOTA_SESSION_ID_PATH", workspace_dir() / SESSION_ID_FILENAME)


def config_file() -> Path:
    """Get main config.toml path."""
    return config_dir() / "config.toml"
