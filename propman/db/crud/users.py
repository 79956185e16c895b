"""CRUD operations for users."""
from typing import Optional

from sqlalchemy.orm import Session

from propman.models.user import Role, User


def get_user_by_id(db: Session, user_id: int, active_only: bool = True) -> Optional[User]:
    query = db.query(User).filter(User.id == user_id)
    if active_only:
        query = query.filter(User.is_active.is_(True))
    return query.first()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email.lower()).first()


def create_user(
    db: Session,
    name: str,
    email: str,
    password_hash: str,
    role: Role = Role.RENTER,
    phone: str = "",
) -> User:
    """Create a new user (email lower-cased)."""
    user = User(
        name=name,
        email=email.lower(),
        password_hash=password_hash,
        role=Role(role).value,
        phone=phone,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
