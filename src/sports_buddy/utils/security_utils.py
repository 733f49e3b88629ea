"""
Credential handling for account registration and login.

Passwords are currently stored and compared as plain text to stay compatible with
existing account records. All storage and comparison goes through
`credential_verifier`, so a hashing scheme can replace `PlaintextCredentialVerifier`
without touching the account service.
"""

from typing import Optional

from sports_buddy.managers.logging_manager import get_logger

logger = get_logger(prefix="[Security]")


class PlaintextCredentialVerifier:
    """Stores passwords verbatim and verifies them with plain equality."""

    scheme = "plaintext"

    def prepare(self, password: str) -> str:
        """Return the value to persist for `password`."""
        return password

    def verify(self, password: str, stored: Optional[str]) -> bool:
        """Return True when `password` matches the persisted credential."""
        if stored is None:
            logger.warning("Account has no stored credential")
            return False
        return stored == password


credential_verifier = PlaintextCredentialVerifier()
