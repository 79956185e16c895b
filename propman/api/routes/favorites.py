"""Property favorites endpoints: list/check/add/remove for the calling user."""
from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from propman.api.schemas.favorite import FavoriteRead, FavoriteRemoved
from propman.core.auth import MAX_ID, AuthenticatedCaller, get_caller
from propman.core.errors import ForbiddenError
from propman.db.session import get_db
from propman.services.favorite_service import FavoriteService

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.get("/user/{user_id}", response_model=list[FavoriteRead])
async def list_user_favorites(
    user_id: int = Path(..., ge=1, le=MAX_ID),
    caller: AuthenticatedCaller = Depends(get_caller),
    db: Session = Depends(get_db),
) -> list[FavoriteRead]:
    """List a user's favorites. Callers may only list their own."""
    if user_id != caller.user_id:
        raise ForbiddenError("You can only view your own favorites")
    return FavoriteService(db).list_by_user(user_id)


@router.get("/check", response_model=bool)
async def check_favorited(
    property_id: int = Query(..., alias="propertyId", ge=1, le=MAX_ID),
    caller: AuthenticatedCaller = Depends(get_caller),
    db: Session = Depends(get_db),
) -> bool:
    """Whether the caller has favorited the property."""
    return FavoriteService(db).is_favorited(caller.user_id, property_id)


@router.post("", response_model=FavoriteRead)
async def add_favorite(
    property_id: int = Query(..., alias="propertyId", ge=1, le=MAX_ID),
    caller: AuthenticatedCaller = Depends(get_caller),
    db: Session = Depends(get_db),
) -> FavoriteRead:
    """Favorite a property (renters only). Adding twice returns the same favorite."""
    if not caller.is_renter:
        raise ForbiddenError("Only renters can add favorites")
    return FavoriteService(db).add(caller.user_id, property_id)


@router.delete("", response_model=FavoriteRemoved)
async def remove_favorite(
    property_id: int = Query(..., alias="propertyId", ge=1, le=MAX_ID),
    caller: AuthenticatedCaller = Depends(get_caller),
    db: Session = Depends(get_db),
) -> FavoriteRemoved:
    """Remove a favorite. Removing one that does not exist still succeeds."""
    FavoriteService(db).remove(caller.user_id, property_id)
    return FavoriteRemoved()
