"""
# Post Service

Create, read, update and search sport meetup posts.

Posts are keyed by their author's email. Nothing here enforces one post per email
or that the email belongs to a registered account; `get_post_by_email()` and
`edit_post_by_email()` act on the first match.

## Two kinds of search

- `list_posts_by_location()` is a case-insensitive **substring** match on
  ``location``: ``"del"`` finds ``"New Delhi"``.
- `list_posts_filtered()` is an **exact** match on ``sport`` and/or ``location``:
  ``location="del"`` does not find ``"New Delhi"``.

No operation deletes a post.
"""

import re
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from sports_buddy.config import settings
from sports_buddy.managers.logging_manager import get_logger
from sports_buddy.utils.documents import serialize_document, serialize_documents
from sports_buddy.utils.errors import NotFoundError
from sports_buddy.utils.validation import require_fields

logger = get_logger(prefix="[PostService]")

POST_FIELDS = ("email", "userName", "mobileNumber", "sport", "location", "date")


def location_contains(substring: str) -> Dict[str, Any]:
    """Store filter for posts whose location contains `substring`, ignoring case."""
    return {"location": re.compile(re.escape(substring), re.IGNORECASE)}


def exact_post_filter(sport: Optional[str] = None, location: Optional[str] = None) -> Dict[str, Any]:
    """Store filter requiring exact equality on each given field; empty values are ignored."""
    query: Dict[str, Any] = {}
    if sport:
        query["sport"] = sport
    if location:
        query["location"] = location
    return query


def _post_document(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {field: fields.get(field) for field in POST_FIELDS}


class PostService:
    """Post operations over one injected database handle."""

    def __init__(self, database: AsyncIOMotorDatabase):
        self.posts = database.get_collection(settings.POSTS_COLLECTION)

    async def create_post(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a post exactly as given and return it with its new ``_id``.

        No field is validated; absent fields are stored as null.
        """
        post = _post_document(fields)
        result = await self.posts.insert_one(post)
        post["_id"] = result.inserted_id
        logger.info("Post created: %s", post["email"])
        return serialize_document(post)

    async def get_post_by_email(self, email: str) -> Dict[str, Any]:
        """
        Return the post whose ``email`` is exactly `email`.

        Raises:
            NotFoundError: No such post.
        """
        post = await self.posts.find_one({"email": email})
        if not post:
            raise NotFoundError("Post not found")
        return serialize_document(post)

    async def edit_post_by_email(self, email_param: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        Replace the descriptive fields of the post keyed by `email_param`.

        The match always uses `email_param`; the ``email`` in `fields` is written into
        the record as-is. The returned post is `fields` with ``email`` set to
        `email_param`.

        An update that matches a post but changes nothing reports zero modified
        documents and is treated as not found.

        Raises:
            ValidationError: ``userName``, ``sport`` or ``location`` is missing.
            NotFoundError: No document was modified.
        """
        require_fields("Missing required fields", fields.get("userName"), fields.get("sport"), fields.get("location"))

        post = _post_document(fields)
        result = await self.posts.update_one({"email": email_param}, {"$set": post})

        if result.modified_count > 0:
            logger.info("Post updated: %s", email_param)
            return {**post, "email": email_param}

        logger.info("No post modified for: %s (matched %d)", email_param, result.matched_count)
        raise NotFoundError("Post not found to update")

    async def list_posts(self) -> List[Dict[str, Any]]:
        """Return every post in store order."""
        return await self._find({})

    async def list_posts_by_location(self, location: str) -> List[Dict[str, Any]]:
        """Return posts whose location contains `location`, ignoring case."""
        return await self._find(location_contains(location))

    async def list_posts_filtered(
        self, sport: Optional[str] = None, location: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """Return posts matching `sport` and `location` exactly; omitted filters match all."""
        return await self._find(exact_post_filter(sport, location))

    async def _find(self, query: Dict[str, Any]) -> List[Dict[str, Any]]:
        cursor = self.posts.find(query)
        return serialize_documents(await cursor.to_list(length=None))
