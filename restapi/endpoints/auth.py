"""Authentication endpoints for registration, login and logout."""

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.config import Settings
from components.core.errors import AuthenticationError, ValidationError
from components.core.init_db import get_app_settings, get_db
from components.core.logging_config import get_logger
from components.core.schemas import MessageResponse
from components.core.security import InvalidToken, create_access_token, verify_token
from components.token.repository import TokenRepository
from components.user.repository import USER_EXISTS_MESSAGE, UserRepository
from components.user.schemas import LoginResponse, TokenClaims, UserCreate, UserLogin

router = APIRouter(tags=["authentication"])
logger = get_logger("auth")

TOKEN_COOKIE = "token"
INVALID_CREDENTIALS = "Invalid credentials"
LOGIN_REDIRECT = "/dashboard.html"


async def get_current_claims(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> TokenClaims:
    """Validate the session cookie and attach its claims to the request."""
    token = request.cookies.get(TOKEN_COOKIE)
    if not token:
        raise AuthenticationError("Access Denied: No Token Provided")

    result = verify_token(token, settings)
    if isinstance(result, InvalidToken):
        logger.info("Rejected session token (%s)", result.reason, extra={"path": request.url.path})
        raise AuthenticationError("Invalid Token", status_code=status.HTTP_403_FORBIDDEN)

    claims = TokenClaims(
        sub=result.claims["sub"],
        role=result.claims.get("role", ""),
        uid=result.claims["uid"],
    )
    request.state.user = claims
    return claims


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_in: UserCreate,
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    """Register a new customer account."""
    repo = UserRepository(db)

    if await repo.exists(user_in.uname, user_in.email):
        logger.info("Registration rejected, user exists", extra={"username": user_in.uname})
        raise ValidationError(USER_EXISTS_MESSAGE)

    user = await repo.create(user_in)
    logger.info("User registered", extra={"username": user.username, "user_id": user.id})
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: UserLogin,
    response: Response,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> LoginResponse:
    """Check credentials, issue a session token and set it as a cookie."""
    user = await UserRepository(db).authenticate(credentials.username, credentials.password)
    if user is None:
        logger.info("Login failed", extra={"username": credentials.username})
        raise ValidationError(INVALID_CREDENTIALS)

    token, expiry = create_access_token(
        subject=user.username,
        role=user.role.value,
        user_id=user.id,
        settings=settings,
    )
    await TokenRepository(db).record(token, user.id, expiry)

    response.set_cookie(
        key=TOKEN_COOKIE,
        value=token,
        max_age=settings.access_token_lifetime_seconds,
        httponly=True,
        secure=True,
        samesite="none",
    )
    logger.info("Login successful", extra={"username": user.username, "user_id": user.id})
    return LoginResponse(message="Login successful", redirect=LOGIN_REDIRECT)


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response) -> MessageResponse:
    """Clear the session cookie. The issued token stays valid until it expires."""
    response.delete_cookie(TOKEN_COOKIE, httponly=True, secure=True, samesite="none")
    return MessageResponse(message="Logged out")
