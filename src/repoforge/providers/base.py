"""Base provider architecture for repoforge."""

from abc import ABC, abstractmethod
import logging

from repoforge.config import get_secret_name
from repoforge.handlers import GitRepoStep
from repoforge.services import cache as caches
from repoforge.services import cluster
from repoforge.services.account_resolver import AccountResolver
from repoforge.services.hosting import get_hosting_client
from repoforge.services.organisation_cache import OrganisationCache
from repoforge.services.provisioner import RepositoryProvisioner
from repoforge.services.repository_validator import RepositoryValidator
from repoforge.services.secrets import load_from_secret

logger = logging.getLogger(__name__)


class GitProvider(ABC):
    """Base class for git hosting providers."""

    def __init__(self, cache_facade=None, client_factory=get_hosting_client,
                 api_factory=None, namespace_resolver=None):
        self.cache_facade = cache_facade or caches.get_cache_facade()
        self.client_factory = client_factory
        self.api_factory = api_factory or cluster.create_client_for_user
        self.namespace_resolver = namespace_resolver or cluster.get_user_secret_namespace
        self._configured_correctly = None
        self.details = None

    @property
    @abstractmethod
    def name(self):
        """Unique name for this provider."""
        pass

    @property
    @abstractmethod
    def description(self):
        """Human-readable description of the provider."""
        pass

    @property
    def secret_name(self):
        return get_secret_name(self.name)

    def is_configured_correctly(self):
        """Check the provider's secret holds usable credentials.

        Computed once per provider instance.
        """
        if self._configured_correctly is None:
            self._configured_correctly = self._check_configuration()
        return self._configured_correctly

    def _check_configuration(self):
        try:
            api = self.api_factory()
            if api is None:
                logger.info(f"No cluster access; provider {self.name} not configured")
                return False
            namespace = self.namespace_resolver(api)
            self.details = load_from_secret(
                api, namespace, self.secret_name, self.name, self.client_factory
            )
        except Exception as e:
            logger.error(f"Failed to check configuration of provider {self.name}: {e}")
            return False

        configured = self.details is not None and self.details.has_valid_data()
        logger.info(f"Provider {self.name} configured correctly: {configured}")
        return configured

    def create_repo_step(self, secret_store=None, broker=None, on_premise=None):
        """Build the repository step wired to this provider's collaborators."""
        resolver = AccountResolver(
            provider=self.name,
            cache_facade=self.cache_facade,
            secret_store=secret_store,
            broker=broker,
            client_factory=self.client_factory,
            on_premise=on_premise,
        )
        return GitRepoStep(
            provider=self.name,
            resolver=resolver,
            organisation_cache=OrganisationCache(self.cache_facade, self.client_factory),
            validator=RepositoryValidator(self.client_factory),
            provisioner=RepositoryProvisioner(self.client_factory),
        )

    def get_metadata(self):
        """Get provider metadata."""
        return {
            "name": self.name,
            "description": self.description,
            "secret": self.secret_name,
        }
