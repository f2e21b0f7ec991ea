""" Resolve the git account a wizard session should act as.
"""

import logging

from repoforge.config import get_secret_name, is_on_premise
from repoforge.models import Account
from repoforge.services import cache as caches
from repoforge.services.identity_broker import KeycloakBroker
from repoforge.services.secrets import SecretStore, resolve_username
from repoforge.services.hosting import get_hosting_client

logger = logging.getLogger(__name__)


class AccountResolver:
    """ Tries each account source in order and returns the first hit.

    The sources are:
        1. an account already set on the wizard context
        2. the provider's secret, when running on-premise
        3. a token brokered by Keycloak, otherwise
    """

    def __init__(self, provider="github", cache_facade=None, secret_store=None,
                 broker=None, client_factory=get_hosting_client, on_premise=None):
        self.provider = provider
        self.cache_facade = cache_facade or caches.get_cache_facade()
        self.secret_store = secret_store or SecretStore(provider, client_factory=client_factory)
        self.broker = broker or KeycloakBroker()
        self.client_factory = client_factory
        self._on_premise = on_premise
        self.tiers = [self.from_context, self.from_secret, self.from_broker]

    @property
    def on_premise(self):
        if self._on_premise is None:
            return is_on_premise()
        return self._on_premise

    def from_context(self, context):
        return context.account if context is not None else None

    def from_secret(self, context):
        if not self.on_premise:
            return None
        account_cache = self.cache_facade.get_cache(caches.ACCOUNT_FROM_SECRET)
        return self.secret_store.load_account(account_cache, get_secret_name(self.provider))

    def from_broker(self, context):
        if self.on_premise or context is None:
            return None
        token = self.broker.exchange(context.user_token, self.provider)
        if not token:
            return None
        return resolve_username(Account(provider=self.provider, token=token), self.client_factory)

    def resolve(self, context):
        """ Get the account for this session, or None when none can be found.

        Never raises; a failing source is logged and skipped.
        """
        for tier in self.tiers:
            try:
                account = tier(context)
            except Exception as e:
                logger.error(f"Account lookup via {tier.__name__} failed: {e}")
                continue
            if account is not None:
                logger.debug(f"Resolved {self.provider} account via {tier.__name__}")
                return account
        logger.info(f"No {self.provider} account available")
        return None
