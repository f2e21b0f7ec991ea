""" Wizard step that lets the user pick an organisation and repository name
for a new project, then creates it.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from repoforge.models import Account, Organisation, ProvisionResult, RepositoryRequest
from repoforge.services.organisation_cache import default_organisation

logger = logging.getLogger(__name__)


@dataclass
class RepoStepChoices:
    """What the step offers the user after initialisation."""

    organisations: List[Organisation] = field(default_factory=list)
    default_organisation: Optional[Organisation] = None
    default_repository: Optional[str] = None


class GitRepoStep:
    """ Organisation and repository selection for one hosting provider.
    """

    def __init__(self, provider, resolver, organisation_cache, validator, provisioner):
        self.provider = provider
        self.resolver = resolver
        self.organisation_cache = organisation_cache
        self.validator = validator
        self.provisioner = provisioner
        self.account: Optional[Account] = None

    @property
    def ready(self):
        return self.account is not None and self.account.has_valid_data()

    def initialise(self, context):
        """ Resolve the account and work out the choices and defaults.
        """
        self.account = self.resolver.resolve(context)
        organisations = self.organisation_cache.list_organisations(self.account)
        choices = RepoStepChoices(
            organisations=organisations,
            default_organisation=default_organisation(self.account, organisations),
            default_repository=context.project_name,
        )
        if not self.ready:
            logger.info(f"No valid {self.provider} account yet; offering no organisations")
        return choices

    def validate(self, organisation_name, repository_name):
        return self.validator.validate(self.account, organisation_name, repository_name)

    def execute(self, context, organisation_name, repository_name, description=""):
        """ Create the repository and import the project directory into it.
        """
        if self.account is None:
            return ProvisionResult.failure(f"No {self.provider} account setup")
        request = RepositoryRequest(
            organisation=organisation_name or "",
            repository=repository_name or "",
            description=description or "",
        )
        return self.provisioner.provision(
            self.account, request, context.project_directory, context=context
        )
