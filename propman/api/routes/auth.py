"""Authentication endpoints: register, login, me."""
import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, EmailStr, field_validator
from sqlalchemy.orm import Session

from propman.core.auth import get_current_user
from propman.core.security import create_access_token, hash_password, verify_password
from propman.db.crud.users import create_user, get_user_by_email
from propman.db.session import get_db
from propman.models.user import Role, User

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

SELF_REGISTER_ROLES = {Role.RENTER.value, Role.OWNER.value}


# --- Schemas ---


class RegisterBody(BaseModel):
    email: EmailStr
    password: str
    name: str | None = None
    phone: str = ""
    role: str = Role.RENTER.value

    @field_validator("role")
    @classmethod
    def validate_role(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in SELF_REGISTER_ROLES:
            raise ValueError("role must be RENTER or OWNER")
        return v


class LoginBody(BaseModel):
    email: EmailStr
    password: str


class UserOut(BaseModel):
    id: int
    email: str
    name: str
    phone: str = ""
    role: str


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserOut


def _user_out(user: User) -> UserOut:
    return UserOut(id=user.id, email=user.email, name=user.name, phone=user.phone or "", role=user.role)


def _login_response(user: User) -> LoginResponse:
    token = create_access_token(sub=user.email, user_id=user.id, role=user.role, name=user.name)
    return LoginResponse(access_token=token, user=_user_out(user))


# --- Endpoints ---


@router.post("/register", response_model=LoginResponse, status_code=201)
async def register(body: RegisterBody, db: Session = Depends(get_db)) -> LoginResponse:
    """Create a new RENTER or OWNER account and return a token."""
    if get_user_by_email(db, body.email):
        raise HTTPException(status_code=409, detail="An account already exists with this email")

    if len(body.password) < 8:
        raise HTTPException(status_code=422, detail="Password must be at least 8 characters")

    name = (body.name or body.email.split("@")[0]).strip()
    user = create_user(
        db,
        name=name,
        email=body.email,
        password_hash=hash_password(body.password),
        role=Role(body.role),
        phone=body.phone.strip(),
    )
    logger.info("New user registered: %s (id=%s, role=%s)", user.email, user.id, user.role)
    return _login_response(user)


@router.post("/login", response_model=LoginResponse)
async def login(body: LoginBody, db: Session = Depends(get_db)) -> LoginResponse:
    """Login with email + password, get JWT."""
    user = get_user_by_email(db, body.email)
    if not user or not verify_password(body.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid email or password")
    if not user.is_active:
        raise HTTPException(status_code=403, detail="Account disabled")
    return _login_response(user)


@router.get("/me", response_model=UserOut)
async def me(current_user: User = Depends(get_current_user)) -> UserOut:
    """Return current authenticated user."""
    return _user_out(current_user)
