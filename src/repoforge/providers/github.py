"""GitHub provider."""

from .base import GitProvider


class GithubProvider(GitProvider):
    """Repositories hosted on GitHub or GitHub Enterprise."""

    @property
    def name(self):
        return "github"

    @property
    def description(self):
        return "GitHub organisations and repositories"
