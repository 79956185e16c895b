"""Authentication & authorization dependencies.

- get_current_user: Bearer JWT -> active User (401 otherwise)
- require_admin: get_current_user + ADMIN role (403 otherwise)
- get_caller: caller identity for /favorites from the User-Id header, cross-checked
  against a Bearer token when one is sent
"""
import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, HTTPException, Security
from fastapi.security import APIKeyHeader, HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from propman.core.config import settings
from propman.core.errors import NotFoundError
from propman.core.security import decode_access_token
from propman.db.crud.users import get_user_by_id
from propman.db.session import get_db
from propman.models.user import User

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)
_caller_header = APIKeyHeader(name=settings.caller_header_name, auto_error=False)

# Ids are stored as signed 64-bit integers
MAX_ID = 2**63 - 1


@dataclass(frozen=True)
class AuthenticatedCaller:
    """Identity the request acts as, resolved to an existing user."""

    user_id: int
    role: str

    @property
    def is_renter(self) -> bool:
        return self.role.upper() == "RENTER"


def _token_user_id(credentials: HTTPAuthorizationCredentials) -> int:
    """Decode a Bearer credential and return its user_id claim. Raises 401 if invalid."""
    if credentials.scheme.lower() != "bearer":
        raise HTTPException(status_code=401, detail="Not authenticated")
    payload = decode_access_token(credentials.credentials)
    if not payload:
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    user_id = payload.get("user_id")
    if user_id is None:
        raise HTTPException(status_code=401, detail="Invalid token")
    try:
        return int(user_id)
    except (TypeError, ValueError):
        raise HTTPException(status_code=401, detail="Invalid token")


# ── JWT user ─────────────────────────────────────────────────────────

async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Validate Bearer token and return User ORM object. Raises 401 if invalid."""
    if not credentials:
        raise HTTPException(status_code=401, detail="Not authenticated")
    user = get_user_by_id(db, _token_user_id(credentials))
    if not user:
        raise HTTPException(status_code=401, detail="User not found")
    return user


async def require_admin(current_user: User = Depends(get_current_user)) -> User:
    """Dependency: authenticated user with the ADMIN role."""
    if not current_user.is_admin:
        logger.warning("Non-admin user %s attempted an admin endpoint", current_user.id)
        raise HTTPException(status_code=403, detail="Admin role required")
    return current_user


# ── Favorites caller ─────────────────────────────────────────────────

async def get_caller(
    header_value: Optional[str] = Security(_caller_header),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> AuthenticatedCaller:
    """
    Resolve the caller for favorites endpoints.

    A Bearer token, when present, is authoritative and must agree with the header.
    Without a token the header is trusted only if TRUST_CALLER_HEADER is on.
    The resolved id must name an existing user (NotFoundError otherwise).
    """
    header_id: Optional[int] = None
    if header_value is not None:
        try:
            header_id = int(header_value)
        except ValueError:
            raise HTTPException(
                status_code=422,
                detail=f"{settings.caller_header_name} header must be an integer",
            )
        if not 1 <= header_id <= MAX_ID:
            raise HTTPException(
                status_code=422,
                detail=f"{settings.caller_header_name} header is out of range",
            )

    if credentials:
        caller_id = _token_user_id(credentials)
        if header_id is not None and header_id != caller_id:
            logger.warning("Caller header %s does not match token user %s", header_id, caller_id)
            raise HTTPException(status_code=401, detail="Caller header does not match token")
    else:
        if not settings.trust_caller_header:
            raise HTTPException(status_code=401, detail="Not authenticated")
        if header_id is None:
            raise HTTPException(
                status_code=401,
                detail=f"Missing {settings.caller_header_name} header",
            )
        caller_id = header_id

    user = get_user_by_id(db, caller_id)
    if not user:
        raise NotFoundError("User not found")
    return AuthenticatedCaller(user_id=user.id, role=user.role)
