import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional
from uuid import UUID, uuid4

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext

from portfolio_tracker.core.config import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES

logger = logging.getLogger(__name__)

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# OAuth2 scheme for login. auto_error=False lets redirecting routes treat a
# missing token as "not authenticated" instead of a 401.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)

# jti -> exp of signed-out tokens that have not expired yet
REVOKED_TOKENS: Dict[str, int] = {}


def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password):
    return pwd_context.hash(password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire, "jti": str(uuid4())})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_token(token: str) -> Optional[dict]:
    """Returns the token claims, or None when the token is invalid, expired or signed out."""
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        return None
    if payload.get("sub") is None or payload.get("jti") in REVOKED_TOKENS:
        return None
    return payload


def prune_revoked_tokens(now: Optional[float] = None) -> None:
    """Forgets revocations of tokens past their exp; jwt.decode rejects those already."""
    now = datetime.now(timezone.utc).timestamp() if now is None else now
    for jti in [jti for jti, exp in REVOKED_TOKENS.items() if exp <= now]:
        del REVOKED_TOKENS[jti]


def revoke_token(token: str) -> None:
    prune_revoked_tokens()
    payload = decode_token(token)
    if payload is not None:
        REVOKED_TOKENS[payload["jti"]] = payload["exp"]
        logger.info("Signed out user %s", payload["sub"])


def get_optional_user(token: Optional[str] = Depends(oauth2_scheme)) -> Optional[UUID]:
    if not token:
        return None
    payload = decode_token(token)
    if payload is None:
        return None
    try:
        return UUID(payload["sub"])
    except (TypeError, ValueError):
        return None


def get_current_user(user_id: Optional[UUID] = Depends(get_optional_user)) -> UUID:
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id


def require_token(token: Optional[str] = Depends(oauth2_scheme)) -> str:
    if not token or decode_token(token) is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return token
