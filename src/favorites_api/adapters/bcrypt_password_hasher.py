"""bcrypt-backed password hashing."""

from dataclasses import dataclass

import bcrypt

from favorites_api.services.auth import PasswordHasher

# bcrypt only considers the first 72 bytes of a password.
_MAX_PASSWORD_BYTES = 72


@dataclass
class BcryptPasswordHasher(PasswordHasher):
    """Password hasher using bcrypt with a configurable cost."""

    rounds: int = 10

    def hash(self, plaintext: str) -> str:
        """Return a salted bcrypt digest."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_encode(plaintext), salt).decode()

    def verify(self, plaintext: str, digest: str) -> bool:
        """Return True when the password matches; malformed digests never match."""
        try:
            return bcrypt.checkpw(_encode(plaintext), digest.encode())
        except ValueError:
            return False


def _encode(plaintext: str) -> bytes:
    return plaintext.encode()[:_MAX_PASSWORD_BYTES]
