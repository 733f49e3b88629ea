"""
# Post Models

Request and response shapes for sport meetup posts.

A post carries ``email`` (the author's account email, used as the post key),
``userName``, ``mobileNumber``, ``sport``, ``location`` and ``date``. The store
accepts any values for these; `SportCategory` lists the categories clients offer
but is not enforced server-side.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from sports_buddy.models.base import CamelModel


class SportCategory(str, Enum):
    MARATHON = "Marathon"
    RUNNING = "Running"
    CRICKET = "Cricket"
    FOOTBALL = "Football"
    KABADDI = "Kabaddi"
    CHESS = "Chess"
    OTHER = "Other"


class PostRequest(CamelModel):
    """
    Body of ``POST /create-post`` and ``PUT /edit-post/{email}``.

    Fields accept any JSON value and are stored unchanged.
    """

    email: Optional[Any] = None
    user_name: Optional[Any] = None
    mobile_number: Optional[Any] = None
    sport: Optional[Any] = None
    location: Optional[Any] = Field(default=None, description="Free-text place name, e.g. a city.")
    date: Optional[Any] = Field(default=None, description="Meetup date as entered by the client.")

    model_config = {
        "json_schema_extra": {
            "example": {
                "email": "asha@example.com",
                "userName": "Asha",
                "mobileNumber": "9876543210",
                "sport": "Cricket",
                "location": "New Delhi",
                "date": "2025-03-14",
            }
        }
    }

    def to_document(self) -> Dict[str, Any]:
        """Return the six post fields keyed by their stored (camelCase) names."""
        return self.model_dump(by_alias=True)


class PostResponse(CamelModel):
    success: bool = True
    post: Dict[str, Any]


class PostChangeResponse(PostResponse):
    message: str


class PostListResponse(CamelModel):
    success: bool = True
    posts: List[Dict[str, Any]]


class FilteredPostsResponse(CamelModel):
    success: bool = True
    sports: List[Dict[str, Any]]


class SportCategoriesResponse(CamelModel):
    success: bool = True
    categories: List[str]
