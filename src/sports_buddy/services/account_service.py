"""
# Account Service

Registration, account listing, email existence checks and login against the
accounts collection.

## Email matching

Two different predicates are used on purpose and must not be unified:

- `email_matches_ignore_case()` backs the registration uniqueness check, so
  ``Asha@Example.com`` conflicts with an existing ``asha@example.com``.
- `email_matches_exactly()` backs `check_email_exists()` and `login()`, which only
  find an account when the stored email is byte-for-byte equal.

## Credentials

Passwords are persisted and compared through `credential_verifier`
(`utils.security_utils`); this service never compares passwords itself.
"""

import re
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from sports_buddy.config import settings
from sports_buddy.managers.logging_manager import get_logger
from sports_buddy.utils.documents import serialize_documents
from sports_buddy.utils.errors import AuthError, ConflictError, ValidationError
from sports_buddy.utils.security_utils import credential_verifier
from sports_buddy.utils.validation import (
    MIN_PASSWORD_LENGTH,
    is_valid_email,
    parse_mobile,
    password_length,
    require_fields,
)

logger = get_logger(prefix="[AccountService]")

# Fields any caller may see; the password is never projected out of the store
PUBLIC_ACCOUNT_PROJECTION = {"_id": 0, "userName": 1, "email": 1}


def email_matches_ignore_case(email: str) -> Dict[str, Any]:
    """Store filter matching accounts whose email equals `email` ignoring case."""
    return {"email": re.compile(f"^{re.escape(email)}$", re.IGNORECASE)}


def email_matches_exactly(email: str) -> Dict[str, Any]:
    """Store filter matching accounts whose email is exactly `email`."""
    return {"email": email}


class AccountService:
    """
    Account operations over one injected database handle.

    Instances are cheap and hold no state besides the collection reference, so a new
    one is built per request.
    """

    def __init__(self, database: AsyncIOMotorDatabase):
        self.accounts = database.get_collection(settings.ACCOUNTS_COLLECTION)

    async def register(
        self,
        user_name: Optional[str],
        email: Optional[str],
        password: Optional[str],
        mobile: Any = None,
    ) -> Dict[str, Any]:
        """
        Create an account and return its public view ``{userName, email}``.

        Raises:
            ValidationError: A required field is missing, the password is shorter than
                six characters, or the email is malformed.
            ConflictError: An account with the same email (ignoring case) exists.
        """
        require_fields("Missing required fields. Name, email and password are required.", user_name, email, password)

        if password_length(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")

        if not is_valid_email(email):
            raise ValidationError("Invalid email format")

        existing = await self.accounts.find_one(email_matches_ignore_case(email))
        if existing:
            logger.info("Registration rejected, email already exists: %s", email)
            raise ConflictError("Email already exists")

        account = {
            "userName": user_name,
            "email": email,
            "password": credential_verifier.prepare(password),
            "mobile": parse_mobile(mobile),
        }
        await self.accounts.insert_one(account)
        logger.info("User registered: %s", email)

        return {"userName": account["userName"], "email": account["email"]}

    async def list_accounts(self) -> List[Dict[str, Any]]:
        """Return every account as ``{userName, email}``."""
        cursor = self.accounts.find({}, PUBLIC_ACCOUNT_PROJECTION)
        accounts = await cursor.to_list(length=None)
        return [{"userName": account.get("userName"), "email": account.get("email")} for account in accounts]

    async def check_email_exists(self, email: str) -> Dict[str, Any]:
        """
        Look up accounts whose email is exactly `email`.

        Returns:
            dict: ``{"users": [...], "exists": bool}``. Matching accounts are returned
            without their password.
        """
        cursor = self.accounts.find(email_matches_exactly(email), {"password": 0})
        users = serialize_documents(await cursor.to_list(length=None))
        return {"users": users, "exists": len(users) > 0}

    async def login(self, email: Optional[str], password: Optional[str]) -> Dict[str, Any]:
        """
        Verify credentials and return ``{userName, email, mobile}``.

        No session or token is issued; keeping the user signed in is up to the client.

        Raises:
            ValidationError: Email or password is missing.
            AuthError: No account has this exact email, or the password does not match.
        """
        require_fields("Email and password are required", email, password)

        account = await self.accounts.find_one(email_matches_exactly(email))
        if not account:
            logger.warning("Login failed, unknown email: %s", email)
            raise AuthError("Invalid credentials")

        if not credential_verifier.verify(password, account.get("password")):
            logger.warning("Login failed, wrong password for: %s", email)
            raise AuthError("Invalid credentials")

        logger.info("User logged in: %s", email)
        return {
            "userName": account.get("userName"),
            "email": account.get("email"),
            "mobile": account.get("mobile"),
        }
