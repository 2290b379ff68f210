# minimal_apis/catalog/auth.py

"""
Token issuance and verification for the catalog service.

Credentials are checked by a CredentialChecker, provided to the endpoints
through the `get_credential_checker` dependency so the fixed login pair can
be swapped for a real identity provider with `app.dependency_overrides`.
"""
import hmac
import logging
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from . import config

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


class InvalidTokenError(Exception):
    """Raised when a token fails signature, expiry, issuer or audience checks."""


class CredentialChecker(ABC):
    @abstractmethod
    def check(self, username: str, password: str) -> bool:
        """Return True when the pair identifies a known user."""


class StaticCredentialChecker(CredentialChecker):
    """Accepts exactly one username/password pair."""

    def __init__(self, username: str, password: str):
        self._username = username
        self._password = password

    def check(self, username: str, password: str) -> bool:
        username_ok = hmac.compare_digest(username.encode(), self._username.encode())
        password_ok = hmac.compare_digest(password.encode(), self._password.encode())
        return username_ok and password_ok


class TokenService:
    def __init__(self, key: str, issuer: str, audience: str, expire_minutes: int = 10):
        self.key = key
        self.issuer = issuer
        self.audience = audience
        self.expire_minutes = expire_minutes

    def issue_token(self, username: str) -> str:
        """Sign a token asserting `username`, valid for `expire_minutes`."""
        now = datetime.now(timezone.utc)
        claims = {
            "sub": username,
            "unique_name": username,
            "jti": uuid.uuid4().hex,
            "iat": now,
            "exp": now + timedelta(minutes=self.expire_minutes),
            "iss": self.issuer,
            "aud": self.audience,
        }
        return jwt.encode(claims, self.key, algorithm=ALGORITHM)

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Decode `token`, checking signature, expiry, issuer and audience.
        Returns the claims; raises InvalidTokenError on any failure.
        """
        try:
            return jwt.decode(
                token,
                self.key,
                algorithms=[ALGORITHM],
                audience=self.audience,
                issuer=self.issuer,
                options={"require": ["exp", "iss", "aud", "sub"]},
            )
        except jwt.PyJWTError as e:
            raise InvalidTokenError(str(e)) from e


def get_token_service() -> TokenService:
    return TokenService(
        config.JWT_KEY,
        config.JWT_ISSUER,
        config.JWT_AUDIENCE,
        config.JWT_EXPIRE_MINUTES,
    )


def get_credential_checker() -> CredentialChecker:
    return StaticCredentialChecker(config.AUTH_USERNAME, config.AUTH_PASSWORD)


bearer_scheme = HTTPBearer(auto_error=False)


def require_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    token_service: TokenService = Depends(get_token_service),
) -> Dict[str, Any]:
    """
    Dependency guarding a route with a bearer token.
    Returns the token claims; raises a 401 when the token is missing or invalid.
    """
    if credentials is None:
        logger.warning("Request to a protected route without a bearer token.")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        claims = token_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning(f"Rejected bearer token: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return claims
