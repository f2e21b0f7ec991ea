"""Exceptions raised by repoforge collaborators."""


class RepoForgeError(Exception):
    """Base class for repoforge errors."""


class HostingError(RepoForgeError):
    """A call to the git hosting API failed."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class ProjectImportError(RepoForgeError):
    """Pushing the local project to the new repository failed."""
