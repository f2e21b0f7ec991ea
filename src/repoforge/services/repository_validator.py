""" Validate repository names before creating them.
"""

import logging

from repoforge.exceptions import HostingError
from repoforge.models import REPOSITORY_FIELD, ValidationOutcome
from repoforge.services.hosting import get_hosting_client

logger = logging.getLogger(__name__)


def _is_blank(value):
    return value is None or not value.strip()


class RepositoryValidator:
    """ Checks an organisation/repository pair with the hosting provider.
    """

    def __init__(self, client_factory=get_hosting_client):
        self.client_factory = client_factory

    def validate(self, account, organisation_name, repository_name):
        # Called before an account is set up: stay silent.
        if account is None or not account.has_valid_data():
            return ValidationOutcome.ok()
        if _is_blank(organisation_name) or _is_blank(repository_name):
            return ValidationOutcome.ok()

        try:
            problem = self.client_factory(account).validate_repository_name(
                organisation_name, repository_name
            )
        except HostingError as e:
            logger.error(
                f"Failed to check repository {organisation_name}/{repository_name}: {e}"
            )
            problem = f"Could not check repository {organisation_name}/{repository_name}: {e}"

        if problem:
            return ValidationOutcome.error(REPOSITORY_FIELD, problem)
        return ValidationOutcome.ok()
