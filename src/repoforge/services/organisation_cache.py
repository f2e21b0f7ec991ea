""" Cached organisation listings per account.
"""

import logging

from repoforge.exceptions import HostingError
from repoforge.services import cache as caches
from repoforge.services.hosting import get_hosting_client

logger = logging.getLogger(__name__)


class OrganisationCache:
    """ Lists the organisations an account can create repositories in.
    """

    def __init__(self, cache_facade=None, client_factory=get_hosting_client):
        self.cache_facade = cache_facade or caches.get_cache_facade()
        self.client_factory = client_factory

    def list_organisations(self, account):
        if account is None or not account.has_valid_data():
            return []

        organisations_cache = self.cache_facade.get_cache(caches.ORGANISATIONS)
        try:
            organisations = organisations_cache.compute_if_absent(
                account.cache_key,
                lambda key: tuple(self.client_factory(account).list_organisations()),
            )
        except HostingError as e:
            logger.error(f"Failed to load organisations for {account.username}: {e}")
            return []
        return list(organisations)


def default_organisation(account, organisations):
    """ Pick the organisation named after the account's user, if any.
    """
    if account is None or not account.username:
        return None
    return next((org for org in organisations if org.name == account.username), None)
