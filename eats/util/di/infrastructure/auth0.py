"""Auth0 infrastructure providers."""

from dishka import Scope, provide

from eats.adapter.auth0 import RealAuth0TokenVerifier
from eats.config import AuthSettings
from eats.domain.service import TokenVerifier
from eats.util.di.base import ProviderBase


class Auth0Provider(ProviderBase):
    """Auth0 component base."""

    __mock_component__ = "auth0"


class ProdAuth0Provider(Auth0Provider):
    """Production Auth0 provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_token_verifier(self, auth_settings: AuthSettings) -> TokenVerifier:
        """Provide the Auth0 token verifier.

        APP-scoped so the signing key cache is shared by all requests.
        """
        return RealAuth0TokenVerifier(auth_settings)
