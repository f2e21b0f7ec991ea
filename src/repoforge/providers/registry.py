"""Registry for discovering git hosting providers."""

import importlib
import logging
from importlib.metadata import entry_points

from .base import GitProvider

logger = logging.getLogger(__name__)

BUILTIN_PROVIDERS = [
    "repoforge.providers.github",
    "repoforge.providers.gogs",
]
ENTRY_POINT_GROUP = "repoforge_providers"


class ProviderRegistry:
    """Registry of the hosting providers the wizard can offer."""

    def __init__(self, **provider_kwargs):
        self._providers = {}
        self._provider_kwargs = provider_kwargs

    def discover_providers(self, builtin_only=False):
        """Discover and register all available providers.

        Returns:
            int: Number of providers registered
        """
        builtin_count = self._load_builtin_providers()

        external_count = 0
        if not builtin_only:
            external_count = self._load_external_providers()

        logger.info(
            f"Discovered {builtin_count + external_count} providers "
            f"({builtin_count} builtin, {external_count} external)"
        )
        return builtin_count + external_count

    def _load_builtin_providers(self):
        loaded_count = 0
        for provider_module in BUILTIN_PROVIDERS:
            try:
                module = importlib.import_module(provider_module)
            except ImportError as e:
                logger.warning(f"Could not load builtin provider {provider_module}: {e}")
                continue

            for attr_name in dir(module):
                attr = getattr(module, attr_name)
                if (
                    isinstance(attr, type)
                    and issubclass(attr, GitProvider)
                    and attr is not GitProvider
                    and attr.__module__ == module.__name__
                ):
                    if self.register(attr(**self._provider_kwargs)):
                        loaded_count += 1
                    break
        return loaded_count

    def _load_external_providers(self):
        """Load providers published through entry points."""
        loaded_count = 0
        for entry_point in entry_points(group=ENTRY_POINT_GROUP):
            try:
                provider_class = entry_point.load()
                if not issubclass(provider_class, GitProvider):
                    logger.error(f"Provider {entry_point.name} does not inherit from GitProvider")
                    continue
                if self.register(provider_class(**self._provider_kwargs)):
                    loaded_count += 1
                    logger.info(f"Loaded external provider: {entry_point.name}")
            except Exception as e:
                logger.error(f"Failed to load external provider {entry_point.name}: {e}")
        return loaded_count

    def register(self, provider):
        """Register a provider instance.

        Returns:
            bool: True if registration successful, False otherwise
        """
        if not isinstance(provider, GitProvider):
            logger.error(f"Provider must inherit from GitProvider: {type(provider)}")
            return False

        if provider.name in self._providers:
            logger.warning(f"Provider {provider.name} already registered")
            return False

        self._providers[provider.name] = provider
        logger.debug(f"Registered provider: {provider.name}")
        return True

    def get(self, name):
        """Get a provider by name."""
        return self._providers.get(name)

    def names(self):
        return list(self._providers.keys())

    def configured_providers(self):
        """Get the providers whose credentials check out."""
        return [p for p in self._providers.values() if p.is_configured_correctly()]

    def get_providers_metadata(self):
        return [provider.get_metadata() for provider in self._providers.values()]
