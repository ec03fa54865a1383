"""Base provider configuration record and protocol for llm-quota."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from msgspec import Struct

from llmquota.config.credentials import env_value
from llmquota.models import Credential


class ProviderConfig(Struct, frozen=True):
    """Everything that differs between JSON-API providers.

    One pipeline serves every provider; a provider is just one of these
    records plus a summary builder.
    """

    id: str
    name: str
    env_token_var: str
    file_path_default: str
    file_path_override_var: str
    base_url_default: str
    base_url_override_var: str
    usage_path: str
    user_agent: str
    # Key path of the access token inside the credential file
    token_keys: tuple[str, ...]
    # Key path of the account id inside the credential file, if required
    account_id_keys: tuple[str, ...] | None = None
    # Env vars that supply the account id alongside an env token, in order
    account_id_env_vars: tuple[str, ...] = ()
    account_id_header: str | None = None
    extra_headers: dict[str, str] = {}

    @property
    def requires_account_id(self) -> bool:
        return self.account_id_keys is not None


class Provider(ABC):
    """Abstract base class for JSON-API providers.

    Each provider must:
    1. Define config as a ClassVar
    2. Implement summarize() to reshape the raw usage payload
    """

    config: ClassVar[ProviderConfig]

    @property
    def id(self) -> str:
        """Get provider ID."""
        return self.config.id

    @property
    def name(self) -> str:
        """Get provider name."""
        return self.config.name

    def base_url(self) -> str:
        """Return the base URL, honoring the env override, without trailing slash."""
        base = env_value(self.config.base_url_override_var) or self.config.base_url_default
        return base.rstrip("/")

    def usage_url(self) -> str:
        return f"{self.base_url()}{self.config.usage_path}"

    def headers(self, credential: Credential) -> dict[str, str]:
        """Build request headers for a resolved credential."""
        headers = {
            "Authorization": f"Bearer {credential.token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
            **self.config.extra_headers,
        }
        if self.config.account_id_header and credential.account_id:
            headers[self.config.account_id_header] = credential.account_id
        return headers

    @abstractmethod
    def summarize(self, usage: Any) -> dict[str, Any]:
        """Build the usage summary from the raw provider payload.

        Must never raise for an unexpected payload shape.
        """
