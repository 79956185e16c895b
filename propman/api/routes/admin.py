"""Admin endpoints (JWT with ADMIN role required)."""
from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from propman.api.schemas.favorite import FavoriteCount
from propman.core.auth import MAX_ID, require_admin
from propman.db.session import get_db
from propman.services.favorite_service import FavoriteService

router = APIRouter(
    prefix="/admin",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@router.get("/users/{user_id}/favorites/count", response_model=FavoriteCount)
async def count_user_favorites(
    user_id: int = Path(..., ge=1, le=MAX_ID),
    db: Session = Depends(get_db),
) -> FavoriteCount:
    """Number of favorites held by a user."""
    return FavoriteCount(user_id=user_id, count=FavoriteService(db).count_by_user(user_id))
