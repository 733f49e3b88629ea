from sports_buddy.routes.accounts import router as accounts_router
from sports_buddy.routes.health import router as health_router
from sports_buddy.routes.posts import router as posts_router

__all__ = ["accounts_router", "health_router", "posts_router"]
