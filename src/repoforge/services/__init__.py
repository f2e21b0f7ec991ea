"""Business logic services for repoforge."""

# Collaborators
from . import cache
from . import cluster
from . import hosting
from . import secrets
from . import identity_broker
from . import jenkinsfile
from . import importer

# Onboarding flow
from . import account_resolver
from . import organisation_cache
from . import repository_validator
from . import provisioner

__all__ = [
    "cache",
    "cluster",
    "hosting",
    "secrets",
    "identity_broker",
    "jenkinsfile",
    "importer",
    "account_resolver",
    "organisation_cache",
    "repository_validator",
    "provisioner",
]
