"""Shared fixtures for repoforge tests."""

import pytest

from repoforge.exceptions import HostingError
from repoforge.models import Account, CreatedRepository, Organisation, UserDetails
from repoforge.services.cache import CacheFacade

ENV_VARS = [
    "REPOFORGE_ON_PREMISE",
    "GITHUB_API_URL",
    "GITHUB_HOST",
    "GITHUB_SECRET_NAME",
    "GOGS_API_URL",
    "GOGS_HOST",
    "GOGS_SECRET_NAME",
    "KUBERNETES_NAMESPACE",
    "REPOFORGE_ORGANISATION_CACHE_TTL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class FakeHostingClient:
    """In-memory stand-in for HostingClient."""

    def __init__(self, account, organisations=("alice", "bravo-team"), html_url=None,
                 create_error=None, existing=(), username="alice"):
        self.account = account
        self.organisations = [Organisation(name=n) for n in organisations]
        self.html_url = html_url
        self.create_error = create_error
        self.existing = set(existing)
        self.username = username
        self.created = []
        self.list_calls = 0

    def get_username(self):
        if self.username is None:
            raise HostingError("GET /user returned HTTP 401", status_code=401)
        return self.username

    def list_organisations(self):
        self.list_calls += 1
        return list(self.organisations)

    def validate_repository_name(self, org_name, repo_name):
        if f"{org_name}/{repo_name}" in self.existing:
            return f"The repository {org_name}/{repo_name} already exists!"
        return None

    def create_repository(self, org_name, repo_name, description=""):
        if self.create_error is not None:
            raise self.create_error
        self.created.append((org_name, repo_name, description))
        return CreatedRepository(full_name=f"{org_name}/{repo_name}", html_url=self.html_url)

    def build_user_details(self, clone_url):
        return UserDetails(address="https://git.example.com", user=self.account.username,
                           password=self.account.token)


@pytest.fixture()
def account():
    return Account(provider="github", username="alice", token="s3cret")


@pytest.fixture()
def cache_facade():
    return CacheFacade(ttls={})


@pytest.fixture()
def fake_client(account):
    return FakeHostingClient(account)


@pytest.fixture()
def client_factory(fake_client):
    def factory(account):
        fake_client.account = account
        return fake_client
    return factory
