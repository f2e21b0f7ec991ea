"""Pydantic models for accounts, repositories and wizard state."""

from .git import Account, CreatedRepository, Organisation, RepositoryRequest, UserDetails
from .results import REPOSITORY_FIELD, ProvisionResult, ValidationOutcome
from .context import WizardContext

__all__ = [
    "Account",
    "CreatedRepository",
    "Organisation",
    "RepositoryRequest",
    "UserDetails",
    "REPOSITORY_FIELD",
    "ProvisionResult",
    "ValidationOutcome",
    "WizardContext",
]
