import logging
from uuid import UUID

from fastapi import APIRouter, HTTPException, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from portfolio_tracker.models.user import User
from portfolio_tracker.schemas.user import Token, UserCreate, UserRead
from portfolio_tracker.core.security import (
    get_password_hash,
    verify_password,
    create_access_token,
    get_current_user,
    require_token,
    revoke_token,
)
from portfolio_tracker.database import get_session
from portfolio_tracker.utils.portfolio_helpers import create_default_portfolio

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

# Auth entry point, where unauthenticated visitors are sent
@router.get("")
def auth_entry():
    return {
        "message": "Sign in to manage your portfolio",
        "login_url": "/auth/login",
        "register_url": "/auth/register",
    }

# Registration creates the user and its portfolio together
@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register(user_create: UserCreate, session: Session = Depends(get_session)):
    user_exists = session.exec(select(User).where(User.email == user_create.email)).first()
    if user_exists:
        raise HTTPException(status_code=400, detail="Email already registered")

    try:
        user = User(email=user_create.email, hashed_password=get_password_hash(user_create.password))
        session.add(user)
        session.flush()
        create_default_portfolio(session, user.id)
        session.commit()
        session.refresh(user)
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Error registering %s", user_create.email)
        raise HTTPException(status_code=500, detail="Failed to register. Please try again.")

    logger.info("Registered user %s", user.id)
    return UserRead(id=user.id, email=user.email)

# Login
@router.post("/login", response_model=Token)
def login(form_data: OAuth2PasswordRequestForm = Depends(), session: Session = Depends(get_session)):
    user = session.exec(select(User).where(User.email == form_data.username)).first()
    if not user or not verify_password(form_data.password, user.hashed_password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    access_token = create_access_token(data={"sub": str(user.id)})
    return Token(access_token=access_token)

# Sign-out: the token stops working immediately
@router.post("/logout")
def logout(token: str = Depends(require_token)):
    revoke_token(token)
    return {"message": "Signed out"}

@router.get("/me", response_model=UserRead)
def read_users_me(user_id: UUID = Depends(get_current_user), session: Session = Depends(get_session)):
    user = session.get(User, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user
