"""
Tests for PostService: creation, lookup, edit semantics and the two search modes.
"""
import re

import pytest
from bson import ObjectId

from sports_buddy.services.post_service import PostService, exact_post_filter, location_contains
from sports_buddy.utils.errors import NotFoundError, ValidationError


def _matches(query, document):
    """Evaluate a flat equality/regex filter the way the store would."""
    for field, expected in query.items():
        value = document.get(field)
        if isinstance(expected, re.Pattern):
            if not isinstance(value, str) or not expected.search(value):
                return False
        elif value != expected:
            return False
    return True


@pytest.fixture
def service(mock_database):
    return PostService(mock_database)


@pytest.fixture
def post_fields():
    return {
        "email": "x@y.com",
        "userName": "N",
        "mobileNumber": "9876543210",
        "sport": "Cricket",
        "location": "New Delhi",
        "date": "2024-05-01",
    }


def test_location_search_is_substring_but_filter_is_exact():
    post = {"location": "New Delhi", "sport": "Cricket"}

    assert _matches(location_contains("del"), post)
    assert _matches(location_contains("NEW"), post)
    assert not _matches(exact_post_filter(location="del"), post)
    assert _matches(exact_post_filter(location="New Delhi"), post)


def test_location_search_escapes_pattern_characters():
    assert not _matches(location_contains("N.w"), {"location": "New Delhi"})
    assert _matches(location_contains("(east)"), {"location": "Delhi (East)"})


def test_exact_filter_ands_given_fields_and_ignores_empty():
    assert exact_post_filter() == {}
    assert exact_post_filter(sport="", location=None) == {}
    assert exact_post_filter(sport="Chess") == {"sport": "Chess"}
    assert exact_post_filter(sport="Chess", location="Pune") == {"sport": "Chess", "location": "Pune"}


@pytest.mark.asyncio
async def test_create_post_with_empty_fields(service, posts_collection):
    created = await service.create_post({})

    assert created["_id"] == str(posts_collection.insert_one.return_value.inserted_id)
    assert all(created[field] is None for field in ("email", "userName", "mobileNumber", "sport", "location", "date"))


@pytest.mark.asyncio
async def test_create_post_then_get(service, posts_collection, post_fields):
    created = await service.create_post({**post_fields, "unexpected": "dropped"})

    stored = posts_collection.insert_one.call_args[0][0]
    assert "unexpected" not in stored
    assert created["sport"] == "Cricket"

    posts_collection.find_one.return_value = stored
    fetched = await service.get_post_by_email("x@y.com")

    assert fetched == created
    assert posts_collection.find_one.call_args[0][0] == {"email": "x@y.com"}


@pytest.mark.asyncio
async def test_get_post_not_found(service):
    with pytest.raises(NotFoundError) as exc_info:
        await service.get_post_by_email("ghost@y.com")

    assert exc_info.value.message == "Post not found"


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["userName", "sport", "location"])
async def test_edit_post_missing_fields(service, posts_collection, post_fields, missing):
    post_fields[missing] = ""

    with pytest.raises(ValidationError) as exc_info:
        await service.edit_post_by_email("x@y.com", post_fields)

    assert exc_info.value.message == "Missing required fields"
    posts_collection.update_one.assert_not_called()


@pytest.mark.asyncio
async def test_edit_post_keyed_by_path_email(service, posts_collection, post_fields):
    post_fields["email"] = "other@y.com"

    updated = await service.edit_post_by_email("x@y.com", post_fields)

    query, update = posts_collection.update_one.call_args[0]
    assert query == {"email": "x@y.com"}
    assert update["$set"]["email"] == "other@y.com"
    assert updated["email"] == "x@y.com"
    assert updated["sport"] == "Cricket"


@pytest.mark.asyncio
async def test_edit_post_no_match(service, posts_collection, post_fields):
    posts_collection.update_one.return_value.modified_count = 0
    posts_collection.update_one.return_value.matched_count = 0

    with pytest.raises(NotFoundError) as exc_info:
        await service.edit_post_by_email("ghost@y.com", post_fields)

    assert exc_info.value.message == "Post not found to update"


@pytest.mark.asyncio
async def test_edit_post_identical_values_reported_as_not_found(service, posts_collection, post_fields):
    posts_collection.update_one.return_value.modified_count = 0
    posts_collection.update_one.return_value.matched_count = 1

    with pytest.raises(NotFoundError):
        await service.edit_post_by_email("x@y.com", post_fields)


@pytest.mark.asyncio
async def test_list_posts_in_store_order(service, posts_collection):
    first, second = ObjectId(), ObjectId()
    posts_collection.find.return_value.to_list.return_value = [
        {"_id": first, "sport": "Chess"},
        {"_id": second, "sport": "Football"},
    ]

    posts = await service.list_posts()

    assert posts == [{"_id": str(first), "sport": "Chess"}, {"_id": str(second), "sport": "Football"}]
    assert posts_collection.find.call_args[0][0] == {}


@pytest.mark.asyncio
async def test_list_posts_by_location_uses_substring_filter(service, posts_collection):
    await service.list_posts_by_location("del")

    query = posts_collection.find.call_args[0][0]
    assert query["location"].search("New Delhi")


@pytest.mark.asyncio
async def test_list_posts_filtered(service, posts_collection):
    await service.list_posts_filtered(sport="Cricket", location="New Delhi")
    assert posts_collection.find.call_args[0][0] == {"sport": "Cricket", "location": "New Delhi"}

    await service.list_posts_filtered()
    assert posts_collection.find.call_args[0][0] == {}
