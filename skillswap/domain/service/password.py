"""Password hashing port."""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """Hashes and verifies passwords for accounts and admins."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted hash of ``password``."""
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Whether ``password`` matches ``password_hash``."""
        pass
