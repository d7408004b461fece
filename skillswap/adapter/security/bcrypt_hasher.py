"""Password hashing with bcrypt."""

import bcrypt

from skillswap.domain.service.password import PasswordHasher


class BcryptPasswordHasher(PasswordHasher):
    """Salted bcrypt hashes.

    bcrypt only looks at the first 72 bytes of a password; longer inputs
    are truncated before hashing and verification alike.
    """

    def __init__(self, rounds: int = 12) -> None:
        self.rounds = rounds

    @staticmethod
    def _encode(password: str) -> bytes:
        return password.encode("utf-8")[:72]

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(self._encode(password), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(self._encode(password), password_hash.encode("utf-8"))
        except ValueError:
            # Malformed stored hash
            return False
