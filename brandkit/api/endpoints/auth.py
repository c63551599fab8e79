"""Account and session endpoints.

- POST /api/register - Create an account and sign in
- POST /api/login - Sign in
- POST /api/logout - Sign out
- GET /api/user - Current user
"""

from datetime import datetime

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from brandkit.api.deps import error_response, get_request_id
from brandkit.core.auth import UserInfo, get_current_user, session_token_from_request
from brandkit.core.config import get_settings
from brandkit.core.database import get_session
from brandkit.core.logging import get_logger
from brandkit.repositories.user import UserRepository
from brandkit.schemas.user import LoginRequest, RegisterRequest, UserResponse
from brandkit.services.auth import (
    AuthService,
    EmailTakenError,
    InvalidCredentialsError,
    UsernameTakenError,
)

logger = get_logger(__name__)

router = APIRouter()


def _set_session_cookie(response: Response, token: str, expires_at: datetime) -> None:
    settings = get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        expires=expires_at,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        path="/",
    )


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register",
    description="Create an account and start a session for it.",
)
async def register(
    request: Request,
    response: Response,
    data: RegisterRequest,
    session: AsyncSession = Depends(get_session),
) -> UserResponse | JSONResponse:
    """Create an account."""
    request_id = get_request_id(request)
    logger.debug(
        "Register request",
        extra={"request_id": request_id, "username": data.username},
    )

    service = AuthService(session)
    try:
        user = await service.register(data)
    except (UsernameTakenError, EmailTakenError) as e:
        logger.warning(
            "Registration conflict",
            extra={"request_id": request_id, "error_message": str(e)},
        )
        return error_response(request, status.HTTP_409_CONFLICT, str(e))

    token, expires_at = await service.start_session(user)
    _set_session_cookie(response, token, expires_at)
    return UserResponse.model_validate(user)


@router.post(
    "/login",
    response_model=UserResponse,
    summary="Log in",
    description="Verify credentials and start a session.",
)
async def login(
    request: Request,
    response: Response,
    data: LoginRequest,
    session: AsyncSession = Depends(get_session),
) -> UserResponse | JSONResponse:
    """Sign in with username and password."""
    service = AuthService(session)
    try:
        user = await service.authenticate(data.username, data.password)
    except InvalidCredentialsError as e:
        return error_response(request, status.HTTP_401_UNAUTHORIZED, str(e))

    token, expires_at = await service.start_session(user)
    _set_session_cookie(response, token, expires_at)
    return UserResponse.model_validate(user)


@router.post(
    "/logout",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Log out",
    description="End the current session and clear the cookie.",
)
async def logout(
    request: Request,
    session: AsyncSession = Depends(get_session),
) -> Response:
    """Sign out. Succeeds even without a live session."""
    token = session_token_from_request(request)
    if token is not None:
        await AuthService(session).end_session(token)

    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    response.delete_cookie(get_settings().session_cookie_name, path="/")
    return response


@router.get(
    "/user",
    response_model=UserResponse,
    summary="Current user",
    description="Return the signed-in user.",
)
async def current_user(
    request: Request,
    user: UserInfo = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> UserResponse | JSONResponse:
    """Return the signed-in user's account."""
    account = await UserRepository(session).get_by_id(user.id)
    if account is None:
        return error_response(
            request, status.HTTP_401_UNAUTHORIZED, "Authentication required"
        )
    return UserResponse.model_validate(account)
