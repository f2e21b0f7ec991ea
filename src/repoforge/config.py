""" Environment driven configuration for repoforge.
"""

import os

SERVICE_ACCOUNT_NAMESPACE_FILE = "/var/run/secrets/kubernetes.io/serviceaccount/namespace"

DEFAULT_API_URLS = {
    "github": "https://api.github.com",
    "gogs": "http://gogs/api/v1",
}

DEFAULT_HOSTS = {
    "github": "github.com",
    "gogs": "gogs",
}

DEFAULT_SECRET_NAMES = {
    "github": "cd-github",
    "gogs": "cd-gogs",
}


def _env_flag(name, default="false"):
    return os.environ.get(name, default).lower() in ("true", "1", "yes")


def is_on_premise():
    """ Whether credentials come from the local secret store.
    """
    return _env_flag("REPOFORGE_ON_PREMISE")


def get_verify_tls():
    """ Get TLS verification from environment.
    """
    return _env_flag("REPOFORGE_VERIFY_TLS", "true")


def get_http_timeout():
    return float(os.environ.get("REPOFORGE_HTTP_TIMEOUT", "30"))


def get_organisation_cache_ttl():
    """ Seconds before a cached organisation list is fetched again.
    """
    return float(os.environ.get("REPOFORGE_ORGANISATION_CACHE_TTL", "30"))


def get_api_url(provider):
    """ Get the hosting API base URL for a provider.
    """
    default = DEFAULT_API_URLS.get(provider, DEFAULT_API_URLS["github"])
    return os.environ.get(f"{provider.upper()}_API_URL", default).rstrip("/")


def get_git_host(provider):
    """ Get the host used to build fallback clone URLs.
    """
    default = DEFAULT_HOSTS.get(provider, DEFAULT_HOSTS["github"])
    return os.environ.get(f"{provider.upper()}_HOST", default)


def get_secret_name(provider):
    """ Get the name of the secret holding a provider's credentials.
    """
    default = DEFAULT_SECRET_NAMES.get(provider, f"cd-{provider}")
    return os.environ.get(f"{provider.upper()}_SECRET_NAME", default)


def get_namespace():
    """ Get the namespace the current user's secrets live in.

    Falls back to the service account namespace when running in cluster.
    """
    namespace = os.environ.get("KUBERNETES_NAMESPACE")
    if namespace:
        return namespace
    try:
        with open(SERVICE_ACCOUNT_NAMESPACE_FILE) as f:
            return f.read().strip() or "default"
    except OSError:
        return "default"


def get_keycloak_settings():
    """ Get Keycloak connection settings for the identity broker.
    """
    return {
        "server_url": os.environ.get("KEYCLOAK_URL", "http://keycloak.keycloak/"),
        "realm_name": os.environ.get("KEYCLOAK_REALM", "karectl-app"),
        "client_id": os.environ.get("KEYCLOAK_CLIENT_ID", "repoforge"),
        "client_secret_key": os.environ.get("KEYCLOAK_CLIENT_SECRET"),
        "verify": get_verify_tls(),
    }
