import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from expense_api.db import get_db
from expense_api.errors import StorageFailure
from expense_api.models import User
from expense_api.schemas import AuthOut, SignInIn, SignUpIn
from expense_api.security import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _issue(user: User) -> dict:
    return {"token": create_access_token(user.id), "user": user}


@router.post("/signup", response_model=AuthOut, status_code=status.HTTP_201_CREATED)
def signup(body: SignUpIn, db: Session = Depends(get_db)):
    email = body.email.strip().lower()
    if not email or not body.password:
        raise HTTPException(status_code=400, detail="Email and password are required")
    try:
        if db.query(User).filter(User.email == email).first():
            raise HTTPException(status_code=400, detail="Email already registered")
        user = User(email=email, full_name=body.full_name, hashed_password=hash_password(body.password))
        db.add(user)
        db.commit()
        db.refresh(user)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error registering %s", email)
        raise StorageFailure("Failed to create account")
    logger.info("User %s registered", user.id)
    return _issue(user)


@router.post("/signin", response_model=AuthOut)
def signin(body: SignInIn, db: Session = Depends(get_db)):
    email = body.email.strip().lower()
    try:
        user = db.query(User).filter(User.email == email).first()
    except SQLAlchemyError:
        logger.exception("Error looking up %s", email)
        raise StorageFailure("Failed to sign in")
    if not user or not verify_password(body.password, user.hashed_password):
        raise HTTPException(status_code=400, detail="Incorrect email or password")
    return _issue(user)
