"""Router aggregator."""

from fastapi import APIRouter

from app.api.endpoints import admin, auth, comments, pages, posts

api_router = APIRouter()

api_router.include_router(pages.router)
api_router.include_router(auth.router)
api_router.include_router(posts.router)
api_router.include_router(comments.router)
api_router.include_router(admin.router)

__all__ = ["api_router"]
