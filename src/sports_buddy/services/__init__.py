from sports_buddy.services.account_service import AccountService
from sports_buddy.services.post_service import PostService

__all__ = ["AccountService", "PostService"]
