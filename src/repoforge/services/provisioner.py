""" Create a remote repository and import the generated project into it.
"""

import logging
from pathlib import Path

from repoforge.config import get_git_host
from repoforge.models import ProvisionResult
from repoforge.services.hosting import get_hosting_client
from repoforge.services.importer import GitProjectImporter
from repoforge.services.jenkinsfile import JenkinsfileUpdater

logger = logging.getLogger(__name__)

INITIAL_COMMIT_MESSAGE = "Initial import"


def fallback_clone_url(host, org_name, repo_name):
    return f"https://{host}/{org_name}/{repo_name}.git"


class RepositoryProvisioner:
    """ Runs the create, rewrite and import sequence for one repository request.

    Every step either carries on or ends provisioning with a failure result;
    errors from the hosting provider or the importer are never raised to the
    caller. Re-running after a failed import creates the repository again.
    """

    def __init__(self, client_factory=get_hosting_client, jenkinsfile_updater=None,
                 importer=None, host=None):
        self.client_factory = client_factory
        self.jenkinsfile_updater = jenkinsfile_updater or JenkinsfileUpdater()
        self.importer = importer or GitProjectImporter()
        self.host = host

    def provision(self, account, request, target_directory, context=None):
        if account is None:
            return ProvisionResult.failure("No git account setup")

        org, repo = request.organisation, request.repository
        basedir = Path(target_directory) if target_directory is not None else None
        if basedir is None or not basedir.is_dir():
            return ProvisionResult.failure(f"No project directory exists! {target_directory}")

        logger.info(f"Creating {account.provider} repository {org}/{repo}")
        client = self.client_factory(account)
        clone_url = fallback_clone_url(self.host or get_git_host(account.provider), org, repo)
        try:
            created = client.create_repository(org, repo, request.description)
        except Exception as e:
            logger.error(f"Failed to create repository {org}/{repo} {e}")
            return ProvisionResult.failure(f"Failed to create repository {org}/{repo} {e}", cause=e)

        if created.html_url:
            clone_url = f"{created.html_url}.git"
        logger.info(f"Created repository: {clone_url}")

        result = self.jenkinsfile_updater.update(basedir, clone_url)
        if result is not None:
            return result

        try:
            user_details = client.build_user_details(clone_url)
            self.importer.import_project(user_details, basedir, INITIAL_COMMIT_MESSAGE, clone_url)
        except Exception as e:
            logger.error(f"Failed to import project to {clone_url} {e}")
            return ProvisionResult.failure(
                f"Failed to import project to {clone_url}. {e}", cause=e, clone_url=clone_url
            )

        if context is not None:
            context.clone_url = clone_url
        return ProvisionResult.success(clone_url, f"Created repository {clone_url}")
