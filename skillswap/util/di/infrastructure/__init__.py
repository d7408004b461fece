"""Infrastructure providers."""

# Import bases
from .email import EmailProvider
from .media import MediaProvider
from .persistence import PersistenceProvider
from .security import SecurityProvider

# Import implementations (needed for __subclasses__())
from .email import ProdEmailProvider  # noqa: F401
from .media import ProdMediaProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401
from .security import ProdSecurityProvider  # noqa: F401

__all__ = [
    "EmailProvider",
    "MediaProvider",
    "PersistenceProvider",
    "ProdEmailProvider",
    "ProdMediaProvider",
    "ProdPersistenceProvider",
    "ProdSecurityProvider",
    "SecurityProvider",
]
