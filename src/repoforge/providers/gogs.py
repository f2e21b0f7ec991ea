"""Gogs provider."""

from .base import GitProvider


class GogsProvider(GitProvider):
    """Repositories hosted on a Gogs or Gitea server through its GitHub compatible API."""

    @property
    def name(self):
        return "gogs"

    @property
    def description(self):
        return "Gogs organisations and repositories"
