""" Load git accounts from Kubernetes secrets.
"""

import base64
import logging

from kubernetes.client.exceptions import ApiException

from repoforge.exceptions import HostingError
from repoforge.models import Account
from repoforge.services import cluster
from repoforge.services.hosting import get_hosting_client

logger = logging.getLogger(__name__)

USERNAME_KEY = "username"
TOKEN_KEYS = ("token", "password")
EMAIL_KEY = "email"


def _decode(data, key):
    value = data.get(key)
    if not value:
        return None
    return base64.b64decode(value).decode("utf-8").strip()


def resolve_username(account, client_factory=get_hosting_client):
    """ Fill in a missing username by asking the hosting provider who owns the token.
    """
    if account.username or not account.token:
        return account
    try:
        username = client_factory(account).get_username()
    except HostingError as e:
        logger.warning(f"Could not resolve {account.provider} username from token: {e}")
        return account
    return account.model_copy(update={"username": username})


def load_from_secret(api, namespace, secret_name, provider="github",
                     client_factory=get_hosting_client):
    """ Read a git account from a secret.

    Args:
        api: CoreV1Api handle
        namespace: Namespace containing the secret
        secret_name: Name of the secret
        provider: Hosting provider the credentials belong to

    Returns:
        Account or None when the secret cannot be read
    """
    if api is None:
        return None
    try:
        secret = api.read_namespaced_secret(name=secret_name, namespace=namespace)
    except ApiException as e:
        if e.status == 404:
            logger.info(f"Secret {namespace}/{secret_name} not found")
        else:
            logger.error(f"Failed to read secret {namespace}/{secret_name}: {e}")
        return None

    data = secret.data or {}
    token = next((t for t in (_decode(data, k) for k in TOKEN_KEYS) if t), "")
    account = Account(
        provider=provider,
        username=_decode(data, USERNAME_KEY) or "",
        token=token,
        email=_decode(data, EMAIL_KEY),
    )
    return resolve_username(account, client_factory)


class SecretStore:
    """ Loads accounts from named secrets in the current user's namespace.
    """

    def __init__(self, provider="github", api_factory=None, namespace_resolver=None,
                 client_factory=get_hosting_client):
        self.provider = provider
        self.api_factory = api_factory or cluster.create_client_for_user
        self.namespace_resolver = namespace_resolver or cluster.get_user_secret_namespace
        self.client_factory = client_factory

    def load(self, secret_name):
        api = self.api_factory()
        if api is None:
            return None
        namespace = self.namespace_resolver(api)
        return load_from_secret(api, namespace, secret_name, self.provider, self.client_factory)

    def load_account(self, cache, secret_name):
        """ Load an account from a secret, memoized in cache by secret name.

        Accounts missing a username or token are returned but not cached, so a
        corrected secret is picked up on the next call.
        """
        rejected = {}

        def load_valid(name):
            account = self.load(name)
            if account is not None and not account.has_valid_data():
                logger.info(f"Secret {name} does not hold a complete {self.provider} account")
                rejected[name] = account
                return None
            return account

        account = cache.compute_if_absent(secret_name, load_valid)
        return account if account is not None else rejected.get(secret_name)
