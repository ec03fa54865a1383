"""Configuration management for llm-quota."""

from llmquota.config.credentials import (
    env_value,
    first_env_value,
    nested_string,
    read_credential_file,
    resolve_path,
)
from llmquota.config.paths import (
    config_dir,
    config_file,
    session_id_path,
    state_dir,
    workspace_dir,
)
from llmquota.config.settings import (
    AgentConfig,
    Config,
    FetchConfig,
    get_config,
    load_config,
    reload_config,
)

__all__ = [
    # paths
    "config_dir",
    "config_file",
    "state_dir",
    "workspace_dir",
    "session_id_path",
    # settings
    "Config",
    "FetchConfig",
    "AgentConfig",
    "get_config",
    "load_config",
    "reload_config",
    # credentials
    "env_value",
    "first_env_value",
    "resolve_path",
    "read_credential_file",
    "nested_string",
]
