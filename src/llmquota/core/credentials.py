"""Credential resolution for JSON-API providers.

Environment credentials, when present, shadow the credential file entirely;
the two sources are never merged.
"""

from __future__ import annotations

import logging

from llmquota.config.credentials import env_value
from llmquota.config.credentials import first_env_value
from llmquota.config.credentials import nested_string
from llmquota.config.credentials import read_credential_file
from llmquota.config.credentials import resolve_path
from llmquota.errors.types import CredentialError
from llmquota.models import Credential
from llmquota.providers.base import ProviderConfig

logger = logging.getLogger(__name__)


def resolve_credential(config: ProviderConfig) -> Credential:
    """Resolve a credential for the given provider.

    Raises:
        CredentialError: With a message naming the env var or file consulted
    """
    if token := env_value(config.env_token_var):
        logger.debug("Using %s for %s", config.env_token_var, config.id)
        return _credential_from_env(config, token)

    path = resolve_path(config.file_path_override_var, config.file_path_default)
    logger.debug("Reading %s credentials from %s", config.id, path)
    if not path.exists():
        raise CredentialError(
            f"{config.env_token_var} is not set and credentials file not found: {path}"
        )

    data = read_credential_file(path)
    token_field = ".".join(config.token_keys)
    token = nested_string(data, *config.token_keys)
    if token is None:
        raise CredentialError(
            f"{config.env_token_var} is not set and missing or empty {token_field} in {path}"
        )

    if not config.requires_account_id:
        return Credential(token=token)

    account_field = ".".join(config.account_id_keys)
    account_id = nested_string(data, *config.account_id_keys)
    if account_id is None:
        raise CredentialError(
            f"{config.env_token_var} is not set and missing or empty {account_field} in {path}"
        )

    return Credential(token=token, account_id=account_id)


def _credential_from_env(config: ProviderConfig, token: str) -> Credential:
    if not config.requires_account_id:
        return Credential(token=token)

    names = " or ".join(config.account_id_env_vars)
    found = first_env_value(*config.account_id_env_vars)
    if found is None:
        raise CredentialError(
            f"{config.env_token_var} is set but no account id was provided; set {names}"
        )

    name, account_id = found
    if account_id is None:
        raise CredentialError(f"{config.env_token_var} is set but {name} is empty")

    return Credential(token=token, account_id=account_id)
