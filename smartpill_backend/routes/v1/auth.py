"""AUTH-01~02: 회원가입, 로그인."""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ...config.database import get_db
from ...models.user import User
from ...schemas.auth import (
    RegisterRequest,
    RegisterResponse,
    LoginRequest,
    LoginResponse,
)
from ...middleware.jwt import (
    hash_password,
    verify_password,
    create_access_token,
)

router = APIRouter()

logger = logging.getLogger(__name__)


def _normalize_email(email: str) -> str:
    return email.strip().lower()


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="AUTH-01 회원가입",
    responses={
        400: {"description": "이메일 형식 오류 / 비밀번호 8자 미만"},
        409: {"description": "중복된 이메일"},
    },
)
async def register(
    body: RegisterRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    email = _normalize_email(body.email)
    result = await db.execute(select(User).where(User.email == email))
    if result.scalar_one_or_none():
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")

    user = User(email=email, password_hash=hash_password(body.password))
    db.add(user)
    await db.flush()
    await db.refresh(user)
    logger.info("user %s registered", user.id)
    return RegisterResponse(id=user.id, email=user.email)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="AUTH-02 로그인",
    responses={401: {"description": "이메일 또는 비밀번호 불일치"}},
)
async def login(
    body: LoginRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    email = _normalize_email(body.email)
    result = await db.execute(select(User).where(User.email == email))
    user = result.scalar_one_or_none()
    # 계정 존재 여부를 노출하지 않도록 같은 응답
    if not user or not verify_password(body.password, user.password_hash):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password")
    return LoginResponse(token=create_access_token(user.id, user.email))
