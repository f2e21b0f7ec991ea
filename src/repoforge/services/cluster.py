""" Kubernetes client construction for the current user.
"""

import logging

from kubernetes import client, config

from repoforge.config import get_namespace

logger = logging.getLogger(__name__)


def load_kubernetes_config():
    """ Load in-cluster config, falling back to the local kube config.

    Returns:
        bool: True when a configuration was loaded
    """
    try:
        config.load_incluster_config()
        logger.debug("Loaded in-cluster Kubernetes config")
        return True
    except config.ConfigException:
        pass

    try:
        config.load_kube_config()
        logger.debug("Loaded local Kubernetes config")
        return True
    except (config.ConfigException, OSError) as e:
        logger.warning(f"Could not load Kubernetes config: {e}")
        return False


def create_client_for_user():
    """ Get a CoreV1Api handle for the current user, or None without config.
    """
    if not load_kubernetes_config():
        return None
    return client.CoreV1Api()


def get_user_secret_namespace(api):
    """ Resolve the namespace holding the current user's secrets.
    """
    namespace = get_namespace()
    logger.debug(f"Using secret namespace {namespace}")
    return namespace
