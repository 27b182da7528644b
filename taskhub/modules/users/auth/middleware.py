"""
Authentication Middleware

FastAPI dependencies gating protected routes behind a bearer token.
"""
import logging
from typing import Optional
from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from taskhub.modules.errors import UnauthorizedError
from taskhub.modules.users.auth.tokens import Principal, TokenService

logger = logging.getLogger("taskhub.users.auth")

_bearer_scheme = HTTPBearer(auto_error=False)


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


async def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    token_service: TokenService = Depends(get_token_service)
) -> Principal:
    """
    FastAPI dependency to get the authenticated caller.

    Raises HTTPException 401 if the bearer token is missing or invalid.
    """
    if credentials is None:
        logger.debug("Rejected request without bearer token")
        raise HTTPException(
            status_code=401,
            detail="Authentication required. Missing bearer token.",
            headers={"WWW-Authenticate": "Bearer"}
        )

    try:
        return token_service.verify(credentials.credentials)
    except UnauthorizedError as e:
        raise HTTPException(
            status_code=401,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"}
        )
