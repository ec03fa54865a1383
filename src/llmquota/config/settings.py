"""Configuration structures and loading for llm-quota."""

import os
import tomllib
from pathlib import Path

import msgspec


# Default values
DEFAULT_TIMEOUT = 30.0
DEFAULT_AGENT_TIMEOUT = 120.0
DEFAULT_AGENT_COMMAND = "openclaw"
DEFAULT_AGENT_ID = "main"
DEFAULT_STATUS_MESSAGE = "/status"


# Fetch configuration
class FetchConfig(msgspec.Struct, omit_defaults=True):
    """HTTP fetch settings."""

    timeout: float = DEFAULT_TIMEOUT


# Agent configuration
class AgentConfig(msgspec.Struct, omit_defaults=True):
    """External agent invocation settings."""

    command: str = DEFAULT_AGENT_COMMAND
    agent_id: str = DEFAULT_AGENT_ID
    message: str = DEFAULT_STATUS_MESSAGE
    timeout: float = DEFAULT_AGENT_TIMEOUT
    # Reported statuses that count as success
    success_statuses: list[str] = msgspec.field(default_factory=lambda: ["ok"])

    def is_success(self, status: str | None) -> bool:
        return status is not None and status in self.success_statuses


# Main configuration
class Config(msgspec.Struct, omit_defaults=True):
    """Main configuration structure."""

    fetch: FetchConfig = msgspec.field(default_factory=FetchConfig)
    agent: AgentConfig = msgspec.field(default_factory=AgentConfig)


def _load_from_toml(path: Path) -> dict:
    """Load configuration from TOML file."""
    if not path.exists():
        return {}

    with path.open("rb") as f:
        return tomllib.load(f)


def convert_config(data: dict) -> Config:
    """Convert raw dict to Config struct."""
    return msgspec.convert(data, type=Config)


def _apply_env_overrides(config: Config) -> Config:
    """Apply environment variable overrides to config.

    OPENCLAW_AGENT_ID: Agent identifier passed to the agent process
    LLMQUOTA_AGENT_COMMAND: Executable used to run the agent
    """
    if agent_id := os.environ.get("OPENCLAW_AGENT_ID", "").strip():
        agent = msgspec.structs.replace(config.agent, agent_id=agent_id)
        config = msgspec.structs.replace(config, agent=agent)

    if command := os.environ.get("LLMQUOTA_AGENT_COMMAND", "").strip():
        agent = msgspec.structs.replace(config.agent, command=command)
        config = msgspec.structs.replace(config, agent=agent)

    return config


# Config state storage
_config: Config | None = None


def get_config() -> Config:
    """Get the current configuration (singleton)."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> Config:
    """Reload configuration from disk."""
    global _config
    _config = load_config()
    return _config


def load_config(path: Path | None = None) -> Config:
    """Load configuration from file with defaults."""
    from .paths import config_file

    config_path = path or config_file()

    raw_data = _load_from_toml(config_path)
    if not raw_data:
        config = Config()
    else:
        config = convert_config(raw_data)

    return _apply_env_overrides(config)
