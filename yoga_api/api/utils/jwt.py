import logging
from datetime import UTC, datetime
from typing import Callable, Optional

from jose import JWTError, jwt

from config import ApplicationConfig
from yoga_api.domain.entities import AuthenticatedPrincipal

logger = logging.getLogger(__name__)


def current_time_ms() -> int:
    return int(datetime.now(UTC).timestamp() * 1000)


class JwtTokenService:
    """
    Issues and validates signed bearer tokens.

    Tokens carry the principal's username as ``sub``. ``iat`` and ``exp`` are
    NumericDate values with millisecond precision, so a token is valid while
    ``now < exp`` and expired from ``exp`` onwards.
    """

    def __init__(
        self,
        secret: str,
        expiration_ms: int,
        algorithm: str = "HS256",
        clock: Optional[Callable[[], int]] = None,
    ):
        self.secret = secret
        self.expiration_ms = expiration_ms
        self.algorithm = algorithm
        self.clock = clock or current_time_ms

    def issue(self, principal: AuthenticatedPrincipal) -> str:
        """
        Generate JWT access token for an authenticated principal

        Args:
            principal: Principal whose username becomes the subject

        Returns:
            JWT token string valid for expiration_ms
        """
        issued_at = self.clock()
        payload = {
            "sub": principal.username,
            "iat": issued_at / 1000,
            "exp": (issued_at + self.expiration_ms) / 1000,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> bool:
        """
        Validate signature, structure and expiry of a token

        Every failure collapses to False; the reason is only logged.
        """
        try:
            claims = self._decode(token)
        except (JWTError, ValueError, TypeError) as exc:
            logger.debug(f"Invalid JWT token: {exc}")
            return False

        subject = claims.get("sub")
        expires_at = claims.get("exp")
        if not subject or isinstance(expires_at, bool) or not isinstance(expires_at, (int, float)):
            logger.debug("JWT token is missing sub or exp")
            return False

        if self.clock() >= round(expires_at * 1000):
            logger.debug("JWT token is expired")
            return False

        return True

    def extract_subject(self, token: str) -> str:
        """
        Read the subject claim. The signature is checked, the expiry is not.

        Raises:
            JWTError: token is malformed or not signed with our secret
        """
        return self._decode(token)["sub"]

    def _decode(self, token: str) -> dict:
        # Expiry is checked by verify() with millisecond precision
        return jwt.decode(
            token,
            self.secret,
            algorithms=[self.algorithm],
            options={"verify_exp": False},
        )


token_service = JwtTokenService(
    secret=ApplicationConfig.JWT_SECRET,
    expiration_ms=ApplicationConfig.JWT_EXPIRATION_MS,
    algorithm=ApplicationConfig.JWT_ALGORITHM,
)
