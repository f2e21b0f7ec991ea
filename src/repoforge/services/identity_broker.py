""" Fetch hosting provider tokens brokered by Keycloak.
"""

import logging

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

from repoforge.config import get_keycloak_settings

logger = logging.getLogger(__name__)

ACCESS_TOKEN_TYPE = "urn:ietf:params:oauth:token-type:access_token"


def get_openid_client():
    """ Get a Keycloak OpenID client.
    """
    return KeycloakOpenID(**get_keycloak_settings())


class KeycloakBroker:
    """ Exchanges a user's Keycloak session token for the token of a linked
    identity provider account.
    """

    def __init__(self, openid_factory=get_openid_client):
        self.openid_factory = openid_factory

    def exchange(self, user_token, provider):
        """ Get the provider's access token for the user, or None.

        Args:
            user_token: The user's Keycloak access token
            provider: Alias of the identity provider in the realm
        """
        if not user_token:
            logger.debug("No session token available for identity broker")
            return None
        try:
            response = self.openid_factory().exchange_token(
                token=user_token,
                requested_issuer=provider,
                requested_token_type=ACCESS_TOKEN_TYPE,
            )
        except KeycloakError as e:
            logger.warning(f"Keycloak could not broker a {provider} token: {e}")
            return None
        return (response or {}).get("access_token") or None
