"""FastAPI dependencies: bearer-token identity and the shared LLM client."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from pydantic import BaseModel

from .llm.client import LLMClient
from .utils import first_present

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


class AuthenticatedUser(BaseModel):
    """Identity carried by a verified bearer token."""
    id: str
    email: Optional[str] = None


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthenticatedUser:
    """Verify the bearer JWT issued by the account service."""
    if not credentials:
        raise _unauthorized("Not authenticated")

    secret = request.app.state.jwt_secret
    if not secret:
        logger.error("JWT_SECRET is not set; rejecting authenticated request")
        raise _unauthorized("Could not validate credentials")

    try:
        payload = jwt.decode(
            credentials.credentials,
            secret,
            algorithms=[request.app.state.jwt_algorithm],
        )
    except JWTError as exc:
        logger.warning("JWT rejected: %s", exc)
        raise _unauthorized("Could not validate credentials")

    user_id = first_present(payload, "sub", "userId", "id")
    if not user_id:
        raise _unauthorized("Invalid token")
    return AuthenticatedUser(id=user_id, email=payload.get("email"))


def get_llm_client(request: Request) -> Optional[LLMClient]:
    return request.app.state.llm_client
