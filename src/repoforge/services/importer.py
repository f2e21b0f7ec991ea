""" Push a generated project into its new remote repository.
"""

import logging
import subprocess
from urllib.parse import quote, urlsplit, urlunsplit

from repoforge.exceptions import ProjectImportError

logger = logging.getLogger(__name__)

DEFAULT_BRANCH = "main"
REMOTE_NAME = "origin"


def authenticated_url(clone_url, user_details):
    """ Embed the user's credentials in an https clone URL.
    """
    parts = urlsplit(clone_url)
    if parts.scheme not in ("http", "https") or not user_details.password:
        return clone_url
    user = quote(user_details.user or "git", safe="")
    password = quote(user_details.password, safe="")
    netloc = f"{user}:{password}@{parts.hostname}"
    if parts.port:
        netloc = f"{netloc}:{parts.port}"
    return urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))


class GitProjectImporter:
    """ Imports a local directory as the first commit of a remote repository.
    """

    def __init__(self, git="git", branch=DEFAULT_BRANCH, runner=subprocess.run):
        self.git = git
        self.branch = branch
        self._run = runner

    def _git(self, basedir, *args, secret=None):
        command = [self.git, *args]
        shown = " ".join(command)
        if secret:
            shown = shown.replace(secret, "****")
        logger.debug(f"Running {shown} in {basedir}")
        try:
            self._run(command, cwd=str(basedir), check=True, capture_output=True, text=True)
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            if secret:
                stderr = stderr.replace(secret, "****")
            raise ProjectImportError(f"{shown} failed: {stderr}") from None
        except OSError as e:
            raise ProjectImportError(f"Could not run {self.git}: {e}") from e

    def _replace_remote(self, basedir, clone_url):
        # The project may already be a git repository, or an earlier import may have failed.
        try:
            self._git(basedir, "remote", "remove", REMOTE_NAME)
        except ProjectImportError:
            logger.debug(f"No {REMOTE_NAME} remote to remove in {basedir}")
        self._git(basedir, "remote", "add", REMOTE_NAME, clone_url)

    def import_project(self, user_details, basedir, message, clone_url):
        """ Commit everything in basedir and push it to clone_url.
        """
        name = user_details.user or "repoforge"
        email = user_details.email or f"{name}@users.noreply.github.com"
        push_url = authenticated_url(clone_url, user_details)
        secret = quote(user_details.password, safe="") if user_details.password else None

        self._git(basedir, "init", "-b", self.branch)
        self._git(basedir, "config", "user.name", name)
        self._git(basedir, "config", "user.email", email)
        self._git(basedir, "add", "--all")
        self._git(basedir, "commit", "--allow-empty", "-m", message)
        self._replace_remote(basedir, clone_url)
        self._git(basedir, "push", push_url, f"HEAD:refs/heads/{self.branch}", secret=secret)
        logger.info(f"Imported {basedir} into {clone_url}")
