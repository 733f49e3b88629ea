"""
Error hierarchy for the Sports Buddy API.

Every failure an operation reports to its caller is a `SportsBuddyError`. Each
subclass carries the HTTP status it maps to, and `to_response()` renders the JSON
body the client expects:

```json
{"success": false, "message": "Email already exists"}
```

The application registers one exception handler for the whole hierarchy, so
routes and services only raise.
"""

from typing import Any, Dict


class SportsBuddyError(Exception):
    """Base class for errors surfaced to API callers."""

    http_status: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> Dict[str, Any]:
        return {"success": False, "message": self.message}


class ValidationError(SportsBuddyError):
    """Missing or malformed input."""

    http_status = 400


class ConflictError(SportsBuddyError):
    """The resource already exists. Reported as 400, not 409, for client compatibility."""

    http_status = 400


class AuthError(SportsBuddyError):
    """Credentials did not match an account."""

    http_status = 401


class NotFoundError(SportsBuddyError):
    """No record exists for the given key."""

    http_status = 404


class StoreError(SportsBuddyError):
    """Communication with the document store failed."""

    http_status = 500
