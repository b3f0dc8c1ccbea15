# backend/routers/auth_router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.session import get_db
from models.user_model import User
from routers.deps import bearer_token, get_current_user
from schemas.users import SignupPayload, LoginPayload, LoginResponse, UserOut
from services import auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=UserOut, status_code=201)
def signup(body: SignupPayload, db: Session = Depends(get_db)):
    user = auth_service.signup(db, body.email, body.password, body.country)
    return UserOut.model_validate(user)


@router.post("/login", response_model=LoginResponse)
def login(body: LoginPayload, db: Session = Depends(get_db)):
    token, user = auth_service.login(db, body.email, body.password)
    return LoginResponse(
        access_token=token.token,
        expires_at=token.expires_at,
        user=UserOut.model_validate(user),
    )


@router.post("/logout")
def logout(
    token: str = Depends(bearer_token),
    _user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    auth_service.logout(db, token)
    return {"ok": True}


@router.get("/me", response_model=UserOut)
def me(user: User = Depends(get_current_user)):
    return UserOut.model_validate(user)
