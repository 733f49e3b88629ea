"""
# Account Routes

Registration, account lookup and login.

## API Endpoints

- `POST /register-user` - Create an account
- `GET /users` - List accounts as ``{userName, email}``
- `GET /users/{email}` - Check whether an exact email is registered
- `POST /api/login` - Verify email and password

Login issues no token or cookie; the client keeps the signed-in email itself.

## Module Attributes

Attributes:
    router (APIRouter): FastAPI router for account endpoints
"""

from fastapi import APIRouter, Depends
from pymongo.errors import PyMongoError

from sports_buddy.managers.logging_manager import get_logger
from sports_buddy.models.account_models import (
    AccountListResponse,
    EmailCheckResponse,
    LoginRequest,
    LoginResponse,
    RegisterUserRequest,
    RegisterUserResponse,
)
from sports_buddy.routes.dependencies import get_account_service
from sports_buddy.services import AccountService
from sports_buddy.utils.errors import StoreError

logger = get_logger(prefix="[Account Routes]")

router = APIRouter(tags=["accounts"])


@router.post("/register-user", response_model=RegisterUserResponse)
async def register_user(
    payload: RegisterUserRequest,
    service: AccountService = Depends(get_account_service),
):
    """
    Register a new account.

    Fails with 400 when a field is missing, the password is too short, the email is
    malformed, or the email is already registered in any letter case.
    """
    try:
        user = await service.register(payload.user_name, payload.email, payload.password, payload.mobile)
        return {"success": True, "message": "Registration successful", "user": user}
    except PyMongoError as e:
        logger.error("Error registering user: %s", e, exc_info=True)
        raise StoreError("Failed to register user") from e


@router.get("/users", response_model=AccountListResponse)
async def list_users(service: AccountService = Depends(get_account_service)):
    """List every account without credentials."""
    try:
        users = await service.list_accounts()
        return {"success": True, "users": users}
    except PyMongoError as e:
        logger.error("Error fetching users: %s", e, exc_info=True)
        raise StoreError("Failed to fetch users") from e


@router.get("/users/{email}", response_model=EmailCheckResponse)
async def check_email(email: str, service: AccountService = Depends(get_account_service)):
    """Report accounts whose email equals `email` exactly (case-sensitive)."""
    try:
        result = await service.check_email_exists(email)
        return {"success": True, **result}
    except PyMongoError as e:
        logger.error("Error checking Email: %s", e, exc_info=True)
        raise StoreError("Failed to check Email") from e


@router.post("/api/login", response_model=LoginResponse)
async def login(payload: LoginRequest, service: AccountService = Depends(get_account_service)):
    """Verify credentials; 400 when a field is missing, 401 when they do not match."""
    try:
        user = await service.login(payload.email, payload.password)
        return {"success": True, "user": user}
    except PyMongoError as e:
        logger.error("Login error: %s", e, exc_info=True)
        raise StoreError("Server error during login") from e
