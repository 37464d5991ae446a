from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from event_booking.database.db import get_db
from event_booking.schemas.users import LoginRequest, MessageOut, SignupRequest, TokenOut
from event_booking.services import users

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=MessageOut)
def signup(payload: SignupRequest, db: Session = Depends(get_db)):
    try:
        users.signup(db, username=payload.username, email=payload.email, password=payload.password)
    except SQLAlchemyError:
        logger.exception("Signup failed")
        raise HTTPException(status_code=400, detail="Signup failed")
    return {"message": "User registered successfully"}


@router.post("/login", response_model=TokenOut)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    try:
        token = users.login(db, email=payload.email, password=payload.password)
    except SQLAlchemyError:
        logger.exception("Login failed")
        raise HTTPException(status_code=500, detail="Login failed")
    return {"message": "Login successful", "token": token}
