# order_cart/services/token_verifier.py
import jwt

from order_cart.domain.errors import Unauthenticated
from order_cart.utils.logging import get_logger
from order_cart.utils.settings import JWT_ALGORITHM, JWT_OWNER_CLAIM, JWT_SECRET

logger = get_logger(__name__)


class TokenVerifier:
    """
    Turns an ``Authorization: Bearer <jwt>`` header into the owner id.
    Tokens are issued elsewhere; this only checks the signature and expiry.
    """

    def __init__(
        self,
        secret: str | None = None,
        algorithm: str | None = None,
        owner_claim: str | None = None,
    ):
        self.secret = secret or JWT_SECRET
        self.algorithm = algorithm or JWT_ALGORITHM
        self.owner_claim = owner_claim or JWT_OWNER_CLAIM

    def verify(self, authorization: str | None) -> str:
        if not authorization:
            raise Unauthenticated("Token not provided")

        scheme, _, token = authorization.partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            raise Unauthenticated("Malformed authorization header")

        try:
            payload = jwt.decode(token.strip(), self.secret, algorithms=[self.algorithm])
        except jwt.InvalidTokenError as e:
            logger.info(f"Rejected token: {e.__class__.__name__}")
            raise Unauthenticated("Invalid token") from e

        owner = payload.get(self.owner_claim)
        if owner is None or str(owner) == "":
            raise Unauthenticated("Invalid token payload")

        return str(owner)
