"""
# Data Models Package

Pydantic models for the Sports Buddy API, organised by domain:

- **`account_models`**: registration, login and account listing.
- **`post_models`**: sport meetup posts and their listings.

Models follow a request/response split (`*Request` for input, `*Response` for
output) and use camelCase JSON names through `CamelModel`.
"""

from .account_models import *
from .post_models import *

__all__ = [
    # Account models
    "RegisterUserRequest",
    "LoginRequest",
    "AccountSummary",
    "AccountProfile",
    "RegisterUserResponse",
    "AccountListResponse",
    "EmailCheckResponse",
    "LoginResponse",
    # Post models
    "SportCategory",
    "PostRequest",
    "PostResponse",
    "PostChangeResponse",
    "PostListResponse",
    "FilteredPostsResponse",
    "SportCategoriesResponse",
]
