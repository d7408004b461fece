"""Unit tests for the bcrypt password hasher."""

from skillswap.adapter.security.bcrypt_hasher import BcryptPasswordHasher

hasher = BcryptPasswordHasher(rounds=4)


class TestBcryptPasswordHasher:
    def test_hash_verifies(self):
        password_hash = hasher.hash("secret1")

        assert password_hash != "secret1"
        assert hasher.verify("secret1", password_hash)
        assert not hasher.verify("secret2", password_hash)

    def test_hashes_are_salted(self):
        assert hasher.hash("secret1") != hasher.hash("secret1")

    def test_malformed_hash_does_not_verify(self):
        """A corrupt stored hash is a failed login, not a crash."""
        assert not hasher.verify("secret1", "not-a-bcrypt-hash")

    def test_only_first_72_bytes_count(self):
        password_hash = hasher.hash("a" * 72)

        assert hasher.verify("a" * 72 + "ignored", password_hash)
