"""Mock providers for testing."""

from .mail import MockEmailProvider
from .media import MockMediaProvider
from .persistence import MockPersistenceProvider
from .security import MockSecurityProvider
from .container import build_test_container

__all__ = [
    "MockEmailProvider",
    "MockMediaProvider",
    "MockPersistenceProvider",
    "MockSecurityProvider",
    "build_test_container",
]
