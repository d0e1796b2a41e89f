# File: blemap/api/routes/routes_auth.py

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from blemap.api.deps import get_db
from blemap.core.security import create_access_token
from blemap.schemas.user import TokenResponse, UserCreate, UserLogin, UserRead
from blemap.services.auth_service import (
    UserExistsError,
    authenticate_user,
    register_user,
)

router = APIRouter()


@router.post(
    "/register",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
def register(payload: UserCreate, db: Session = Depends(get_db)):
    try:
        return register_user(db, payload)
    except UserExistsError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User with this email already exists.",
        )


@router.post("/login", response_model=TokenResponse, summary="User login")
def login(payload: UserLogin, db: Session = Depends(get_db)):
    """
    Exchange email + password for a bearer token.
    """
    user = authenticate_user(db, email=payload.email, password=payload.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid credentials.",
        )

    return TokenResponse(
        token=create_access_token(user.id),
        user=UserRead.model_validate(user),
    )
