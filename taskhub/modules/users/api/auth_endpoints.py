"""
Authentication API Endpoints

Registration and login.
"""
import logging
from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Depends
from taskhub.modules.api_models import CamelModel
from taskhub.modules.users.api.user_endpoints import UserResponse, get_user_service
from taskhub.modules.users.auth.middleware import get_token_service
from taskhub.modules.users.auth.tokens import TokenService
from taskhub.modules.users.services.auth_service import AuthService
from taskhub.modules.users.services.user_service import UserService

logger = logging.getLogger("taskhub.users.auth_api")

router = APIRouter(prefix="/auth", tags=["auth"])


class RegisterRequest(CamelModel):
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(CamelModel):
    username: Optional[str] = None
    password: Optional[str] = None


class TokenResponse(CamelModel):
    token: str
    expires: datetime


def get_auth_service(
    user_service: UserService = Depends(get_user_service),
    token_service: TokenService = Depends(get_token_service)
) -> AuthService:
    return AuthService(user_service, token_service)


@router.post("/register", status_code=201, response_model=UserResponse)
async def register(request: RegisterRequest, auth_service: AuthService = Depends(get_auth_service)):
    """Register a new account. Returns identity fields only."""
    logger.debug(f"[auth_endpoints.register] username={request.username}")

    user = await auth_service.register(
        username=request.username,
        email=request.email,
        password=request.password
    )
    return user.to_dict()


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest, auth_service: AuthService = Depends(get_auth_service)):
    """Exchange credentials for a bearer token."""
    issued = await auth_service.login(username=request.username, password=request.password)
    return {"token": issued.token, "expires": issued.expires}
