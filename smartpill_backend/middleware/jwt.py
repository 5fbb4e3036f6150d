"""JWT 발급/검증 및 비밀번호 해싱."""
from datetime import datetime, timedelta, timezone
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
import bcrypt
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..config.settings import settings
from ..config.database import get_db
from ..models.user import User

security = HTTPBearer(auto_error=False)


def _truncate_to_72_bytes(password: str) -> bytes:
    """비밀번호를 UTF-8 바이트로 변환하고 72바이트로 제한 (문자 중간에서 자르지 않음)."""
    password_bytes = password.encode("utf-8")
    if len(password_bytes) > 72:
        password_bytes = password_bytes[:72].decode("utf-8", errors="ignore").encode("utf-8")
    return password_bytes


def hash_password(password: str) -> str:
    """bcrypt로 비밀번호 해싱 (72바이트 제한 자동 처리)."""
    hashed = bcrypt.hashpw(_truncate_to_72_bytes(password), bcrypt.gensalt())
    return hashed.decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(_truncate_to_72_bytes(plain), hashed.encode("utf-8"))
    except ValueError:
        # 저장된 해시 형식 오류
        return False


def create_access_token(
    user_id: int,
    email: str,
    *,
    expires_delta: timedelta | None = None,
) -> str:
    now = datetime.now(timezone.utc)
    delta = expires_delta if expires_delta is not None else timedelta(minutes=settings.jwt_access_expire_minutes)
    to_encode = {
        "sub": str(user_id),
        "email": email,
        "iat": now,
        "exp": now + delta,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict | None:
    """서명/만료 검증. 실패 시 None."""
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


async def _get_user_from_token(
    credentials: HTTPAuthorizationCredentials | None,
    db: AsyncSession,
) -> User | None:
    if not credentials or not credentials.credentials:
        return None
    payload = decode_token(credentials.credentials)
    if not payload or "sub" not in payload:
        return None
    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        return None
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """인증 필수. 토큰 없거나 만료/위조 시 401."""
    user = await _get_user_from_token(credentials, db)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user
