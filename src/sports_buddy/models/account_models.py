"""
# Account Models

Request and response shapes for registration, account listing, email checks and
login.

Request fields are deliberately optional: presence, password length and email
format are checked by `AccountService` so that every rule produces its own
message, e.g. ``"Password must be at least 6 characters long"``, instead of a
generic schema error.

Responses never carry the password.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import Field

from sports_buddy.models.base import CamelModel


class RegisterUserRequest(CamelModel):
    """Body of ``POST /register-user``."""

    user_name: Optional[str] = Field(default=None, description="Display name shown on posts.")
    email: Optional[str] = Field(default=None, description="Unique, case-insensitive account identity.")
    password: Optional[str] = Field(default=None, description="Plain-text password, at least 6 characters.")
    mobile: Optional[Union[int, float, str]] = Field(
        default=None, description="Optional mobile number; parsed to an integer."
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "userName": "Asha",
                "email": "asha@example.com",
                "password": "secret1",
                "mobile": "9876543210",
            }
        }
    }


class LoginRequest(CamelModel):
    """Body of ``POST /api/login``."""

    email: Optional[str] = None
    password: Optional[str] = None


class AccountSummary(CamelModel):
    """Public view of an account."""

    user_name: Optional[str] = None
    email: Optional[str] = None


class AccountProfile(AccountSummary):
    """Account view returned after a successful login."""

    # Legacy records may hold non-integer values
    mobile: Optional[Any] = None


class RegisterUserResponse(CamelModel):
    success: bool = True
    message: str
    user: AccountSummary


class AccountListResponse(CamelModel):
    success: bool = True
    users: List[AccountSummary]


class EmailCheckResponse(CamelModel):
    success: bool = True
    users: List[Dict[str, Any]]
    exists: bool


class LoginResponse(CamelModel):
    success: bool = True
    user: AccountProfile
