"""Infrastructure providers."""

# Import bases
from .auth0 import Auth0Provider
from .media import MediaProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .auth0 import ProdAuth0Provider  # noqa: F401
from .media import ProdMediaProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "Auth0Provider",
    "MediaProvider",
    "PersistenceProvider",
    "ProdAuth0Provider",
    "ProdMediaProvider",
    "ProdPersistenceProvider",
]
