""" Point a generated Jenkinsfile at the new repository.
"""

import logging
from pathlib import Path

from repoforge.models import ProvisionResult

logger = logging.getLogger(__name__)

JENKINSFILE = "Jenkinsfile"
GIT_URL_PLACEHOLDER = "GIT_URL"


class JenkinsfileUpdater:
    """ Replaces the git URL placeholder in a project's Jenkinsfile.
    """

    def update(self, basedir, clone_url):
        """ Rewrite the Jenkinsfile in basedir.

        Returns:
            None to carry on, or a ProvisionResult that ends provisioning
        """
        path = Path(basedir) / JENKINSFILE
        if not path.is_file():
            return None

        try:
            text = path.read_text()
            updated = text.replace(GIT_URL_PLACEHOLDER, f"'{clone_url}'")
            if updated != text:
                path.write_text(updated)
                logger.info(f"Updated git URL in {path}")
        except OSError as e:
            logger.error(f"Failed to update {path}: {e}")
            return ProvisionResult.failure(f"Failed to update {path}: {e}", cause=e)
        return None
