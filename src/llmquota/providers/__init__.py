"""Provider registry for llm-quota."""

from llmquota.providers.base import Provider, ProviderConfig

# Provider registry
_PROVIDERS: dict[str, type[Provider]] = {}


def register_provider(cls: type[Provider]) -> type[Provider]:
    """Decorator to register a provider class.

    Usage:
        @register_provider
        class ClaudeProvider(Provider):
            ...
    """
    if not hasattr(cls, "config"):
        raise ValueError(f"Provider {cls.__name__} must define config ClassVar")

    _PROVIDERS[cls.config.id] = cls
    return cls


def get_provider(provider_id: str) -> type[Provider] | None:
    """Get a provider class by ID.

    Returns:
        Provider class or None if not found
    """
    return _PROVIDERS.get(provider_id)


def list_provider_ids() -> list[str]:
    """List all registered provider IDs."""
    return list(_PROVIDERS.keys())


def create_provider(provider_id: str) -> Provider:
    """Create an instance of a provider.

    Raises:
        ValueError: If provider not found
    """
    provider_cls = get_provider(provider_id)
    if provider_cls is None:
        raise ValueError(f"Unknown provider: {provider_id}")
    return provider_cls()


# Import and register providers
from llmquota.providers.claude import ClaudeProvider  # noqa: E402
from llmquota.providers.codex import CodexProvider  # noqa: E402

register_provider(ClaudeProvider)
register_provider(CodexProvider)

__all__ = [
    "Provider",
    "ProviderConfig",
    "register_provider",
    "get_provider",
    "list_provider_ids",
    "create_provider",
]
