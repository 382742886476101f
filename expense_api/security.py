import logging
from datetime import datetime, timedelta
from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError

from expense_api.config import Config
from expense_api.errors import InvalidToken, Unauthorized
from expense_api.schemas import TokenClaims

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
# auto_error off so a missing credential maps to our own Unauthorized
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/signin", auto_error=False)


def hash_password(p: str) -> str:
    return pwd_context.hash(p)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def create_access_token(user_id: int, minutes: int = Config.ACCESS_TOKEN_EXPIRE_MINUTES) -> str:
    to_encode = {"userId": user_id, "exp": datetime.utcnow() + timedelta(minutes=minutes)}
    return jwt.encode(to_encode, Config.JWT_SECRET, algorithm=Config.JWT_ALGORITHM)


def decode_access_token(token: str) -> TokenClaims:
    """Verify signature and expiry, then type-check the payload. Any failure raises InvalidToken."""
    try:
        payload = jwt.decode(
            token,
            Config.JWT_SECRET,
            algorithms=[Config.JWT_ALGORITHM],
            options={"require_exp": True},
        )
        return TokenClaims.model_validate(payload)
    except (JWTError, ValidationError) as e:
        logger.warning("Token rejected: %s", type(e).__name__)
        raise InvalidToken() from e


def current_claims(token: Optional[str] = Depends(oauth2_scheme)) -> TokenClaims:
    if not token:
        logger.warning("Request without bearer credential")
        raise Unauthorized()
    return decode_access_token(token)
