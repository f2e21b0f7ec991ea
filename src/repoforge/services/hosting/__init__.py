""" Git hosting integration for repoforge.
"""

from .client import REPOSITORY_NAME_PATTERN, HostingClient, get_hosting_client

__all__ = [
    "REPOSITORY_NAME_PATTERN",
    "HostingClient",
    "get_hosting_client",
]
