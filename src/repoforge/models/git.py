"""Git hosting models."""

import hashlib
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Account(BaseModel):
    """Resolved credentials and identity for a git hosting provider."""

    provider: str = Field(default="github", description="Hosting provider name")
    username: str = Field(default="", description="Login of the authenticated user")
    token: str = Field(default="", repr=False, description="API token")
    email: Optional[str] = Field(default=None, description="Email used for commits")

    def has_valid_data(self):
        return bool(self.token) and bool(self.username)

    @property
    def cache_key(self):
        """Key identifying this account's provider and credential."""
        digest = hashlib.sha256(self.token.encode("utf-8")).hexdigest()
        return f"{self.provider}:{digest}"


class Organisation(BaseModel):
    """An organisation repositories can be created in."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Organisation login")
    display_name: Optional[str] = Field(default=None, description="Human-readable name")
    avatar_url: Optional[str] = Field(default=None, description="Avatar image URL")

    @property
    def label(self):
        return self.display_name or self.name


class RepositoryRequest(BaseModel):
    """The repository the user asked to create."""

    organisation: str = Field(..., description="Organisation to create the repository in")
    repository: str = Field(..., description="Repository name")
    description: str = Field(default="", description="Repository description")


class CreatedRepository(BaseModel):
    """What the hosting provider reported after creating a repository."""

    full_name: str = Field(..., description="owner/name of the repository")
    html_url: Optional[str] = Field(default=None, description="Canonical web URL")
    clone_url: Optional[str] = Field(default=None, description="Clone URL reported by the API")


class UserDetails(BaseModel):
    """Credentials used to push a project to its new repository."""

    address: str = Field(..., description="Scheme and host of the git server")
    user: str = Field(..., description="Git user name")
    password: str = Field(default="", repr=False, description="Token used as password")
    email: Optional[str] = Field(default=None, description="Commit author email")
