"""JWT signing and verification with authlib."""

import time
from dataclasses import dataclass

from authlib.jose import JoseError, jwt

from favorites_api.domain.errors import InvalidTokenError
from favorites_api.services.auth import TokenSigner

_RESERVED_CLAIMS = {"iat", "exp"}


@dataclass
class AuthlibTokenSigner(TokenSigner):
    """HMAC-signed JWTs with mandatory expiry."""

    secret: str
    algorithm: str = "HS256"

    def sign(self, claims: dict[str, object], ttl_seconds: int) -> str:
        """Return a signed token expiring ttl_seconds from now."""
        now = int(time.time())
        payload = {k: v for k, v in claims.items() if k not in _RESERVED_CLAIMS}
        payload["iat"] = now
        payload["exp"] = now + ttl_seconds
        token = jwt.encode({"alg": self.algorithm, "typ": "JWT"}, payload, self.secret)
        return token.decode() if isinstance(token, bytes) else token

    def verify(self, token: str) -> dict[str, object]:
        """Return the token claims; expired and tampered tokens fail alike."""
        try:
            claims = jwt.decode(
                token,
                self.secret,
                claims_options={"exp": {"essential": True}},
            )
            claims.validate(now=int(time.time()), leeway=0)
        except (JoseError, ValueError) as exc:
            raise InvalidTokenError from exc
        if claims.header.get("alg") != self.algorithm:
            raise InvalidTokenError
        return dict(claims)
