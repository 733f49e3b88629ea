"""
# Post Routes

Sport meetup posts: publishing, editing and discovery.

## API Endpoints

- `GET /sportsInfo` - All posts, wrapped as ``{success, posts}``
- `POST /create-post` - Publish a post (no field validation)
- `GET /get-post/{email}` - The post keyed by an email
- `PUT /edit-post/{email}` - Replace a post's fields
- `GET /get-posts/{location}` - Posts whose location contains a substring
- `GET /get-filtered-providers?sport=&location=` - Posts matching exactly
- `GET /sport-categories` - Sport categories offered to clients

`/sportsInfo` is registered once, with the same wrapped shape as the other
listings. Clients that expected a bare array must read ``posts``.

## Module Attributes

Attributes:
    router (APIRouter): FastAPI router for post endpoints
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from pymongo.errors import PyMongoError

from sports_buddy.managers.logging_manager import get_logger
from sports_buddy.models.post_models import (
    FilteredPostsResponse,
    PostChangeResponse,
    PostListResponse,
    PostRequest,
    PostResponse,
    SportCategoriesResponse,
    SportCategory,
)
from sports_buddy.routes.dependencies import get_post_service
from sports_buddy.services import PostService
from sports_buddy.utils.errors import StoreError

logger = get_logger(prefix="[Post Routes]")

router = APIRouter(tags=["posts"])


@router.get("/sportsInfo", response_model=PostListResponse)
async def list_posts(service: PostService = Depends(get_post_service)):
    """List every post in store order."""
    try:
        posts = await service.list_posts()
        return {"success": True, "posts": posts}
    except PyMongoError as e:
        logger.error("Error fetching Posts: %s", e, exc_info=True)
        raise StoreError("Failed to fetch Posts") from e


@router.post("/create-post", response_model=PostChangeResponse)
async def create_post(payload: PostRequest, service: PostService = Depends(get_post_service)):
    """Publish a post. Every field is optional and stored as given."""
    try:
        post = await service.create_post(payload.to_document())
        return {"success": True, "message": "Post created successfully", "post": post}
    except PyMongoError as e:
        logger.error("Error creating Post: %s", e, exc_info=True)
        raise StoreError("Failed to create Post") from e


@router.get("/get-post/{email}", response_model=PostResponse)
async def get_post(email: str, service: PostService = Depends(get_post_service)):
    """Fetch the post keyed by `email`; 404 when there is none."""
    try:
        post = await service.get_post_by_email(email)
        return {"success": True, "post": post}
    except PyMongoError as e:
        logger.error("Error fetching Post: %s", e, exc_info=True)
        raise StoreError("Failed to fetch Post") from e


@router.put("/edit-post/{email}", response_model=PostChangeResponse)
async def edit_post(email: str, payload: PostRequest, service: PostService = Depends(get_post_service)):
    """
    Replace the fields of the post keyed by the path `email`.

    400 when ``userName``, ``sport`` or ``location`` is missing; 404 when no post was
    modified, which includes resubmitting identical values.
    """
    try:
        post = await service.edit_post_by_email(email, payload.to_document())
        return {"success": True, "message": "Post updated successfully", "post": post}
    except PyMongoError as e:
        logger.error("Error updating Post: %s", e, exc_info=True)
        raise StoreError("Error updating Post") from e


@router.get("/get-posts/{location}", response_model=PostListResponse)
async def get_posts_by_location(location: str, service: PostService = Depends(get_post_service)):
    """List posts whose location contains `location`, ignoring case."""
    try:
        posts = await service.list_posts_by_location(location)
        return {"success": True, "posts": posts}
    except PyMongoError as e:
        logger.error("Error fetching Posts by location: %s", e, exc_info=True)
        raise StoreError("Failed to fetch Posts by location") from e


@router.get("/get-filtered-providers", response_model=FilteredPostsResponse)
async def get_filtered_posts(
    sport: Optional[str] = Query(default=None),
    location: Optional[str] = Query(default=None),
    service: PostService = Depends(get_post_service),
):
    """List posts whose sport and location equal the given values exactly."""
    try:
        posts = await service.list_posts_filtered(sport=sport, location=location)
        return {"success": True, "sports": posts}
    except PyMongoError as e:
        logger.error("Error fetching filtered Sports: %s", e, exc_info=True)
        raise StoreError("Failed to fetch filtered Sports") from e


@router.get("/sport-categories", response_model=SportCategoriesResponse)
async def list_sport_categories():
    """Sport categories offered by clients. Posts are not restricted to them."""
    return {"success": True, "categories": [category.value for category in SportCategory]}
