# app/auth.py
"""
Password hashing and access token handling.

Tokens are HS256 JWTs carrying the user id and email with a one-hour expiry.
Protected routes depend on get_current_user, which returns the decoded
claims or rejects the request with 403.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Annotated, Optional

import bcrypt
import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError

from app.config import Settings, get_settings
from app.schemas.user import TokenClaims
from app.utils.errors import create_error_response

logger = logging.getLogger(__name__)

# auto_error is off so every gate failure maps to the same 403 below
bearer_scheme = HTTPBearer(auto_error=False)

ACCESS_TOKEN_LIFETIME = timedelta(hours=1)

# bcrypt only reads the first 72 bytes; older releases truncate silently
MAX_PASSWORD_BYTES = 72

def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a plaintext password with a fresh salt.

    Raises:
        ValueError: if the password is longer than 72 bytes
    """
    encoded = password.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        raise ValueError(f"password exceeds {MAX_PASSWORD_BYTES} bytes")
    return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=rounds)).decode("utf-8")

def verify_password(password: str, hashed: str) -> bool:
    encoded = password.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        return False
    # bcrypt.checkpw compares in constant time
    try:
        return bcrypt.checkpw(encoded, hashed.encode("utf-8"))
    except ValueError:
        return False

def create_access_token(
    user_id: str,
    email: str,
    secret: str,
    algorithm: str = "HS256",
    expires_delta: timedelta = ACCESS_TOKEN_LIFETIME,
    now: Optional[datetime] = None,
) -> str:
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "user_id": user_id,
        "email": email,
        "iat": issued_at,
        "exp": issued_at + expires_delta,
    }
    return jwt.encode(payload, secret, algorithm=algorithm)

def decode_access_token(token: str, secret: str, algorithm: str = "HS256") -> TokenClaims:
    """Verify signature and expiry and return the claims.

    Raises:
        jwt.PyJWTError: for a bad signature, an expired token or a malformed token
    """
    payload = jwt.decode(
        token,
        secret,
        algorithms=[algorithm],
        options={"require": ["exp", "iat"]},
    )
    return TokenClaims(**payload)

def _forbidden(details: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail=create_error_response(
            message="Not authorized",
            details=details,
            example="Send 'Authorization: Bearer <accessToken>' obtained from /login"
        )
    )

def get_current_user(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenClaims:
    """
    FastAPI dependency guarding protected routes.

    HTTPBearer yields None when the Authorization header is absent, uses a
    scheme other than Bearer, or carries no token; all of these are rejected.

    Returns:
        TokenClaims: claims of a validly signed, unexpired token

    Raises:
        HTTPException: 403 Forbidden when the token is missing or fails verification
    """
    if credentials is None or not credentials.credentials:
        raise _forbidden("Bearer token missing")

    try:
        return decode_access_token(
            credentials.credentials,
            settings.TOKEN_SECRET,
            settings.TOKEN_ALGORITHM,
        )
    except jwt.ExpiredSignatureError:
        logger.warning("Rejected access token: token has expired")
        raise _forbidden("Access token has expired")
    except jwt.PyJWTError as e:
        logger.warning("Rejected access token: %s", e)
        raise _forbidden("Invalid access token")
    except ValidationError:
        logger.warning("Rejected access token: missing user claims")
        raise _forbidden("Invalid access token")
