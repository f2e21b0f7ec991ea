"""Git hosting providers for repoforge."""

from .base import GitProvider
from .registry import ProviderRegistry

__all__ = ["GitProvider", "ProviderRegistry"]
