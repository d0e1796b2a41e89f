# File: blemap/services/auth_service.py

"""
Authentication service.

  - User registration (unique email, bcrypt hash)
  - User lookup
  - Password verification
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from blemap.core.security import hash_password, verify_password
from blemap.models.user import User
from blemap.schemas.user import UserCreate

logger = logging.getLogger(__name__)


class UserExistsError(Exception):
    pass


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.scalar(select(User).where(User.email == _normalize_email(email)))


def get_user(db: Session, user_id: str) -> Optional[User]:
    return db.get(User, user_id)


def register_user(db: Session, payload: UserCreate) -> User:
    if get_user_by_email(db, payload.email) is not None:
        raise UserExistsError(f"User with email {payload.email} already exists.")

    user = User(
        name=payload.name,
        email=_normalize_email(payload.email),
        hashed_password=hash_password(payload.password),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration on the unique email index
        db.rollback()
        raise UserExistsError(f"User with email {payload.email} already exists.")
    db.refresh(user)

    logger.info("Registered user %s", user.id)
    return user


def authenticate_user(
    db: Session,
    *,
    email: str,
    password: str,
) -> Optional[User]:
    """
    Return the user when the email exists and the password matches,
    otherwise None.
    """
    user = get_user_by_email(db, email)
    if user is None or not verify_password(password, user.hashed_password):
        logger.info("Failed login attempt for %s", email)
        return None
    return user
