"""로그인 확인용 인사 API."""
from typing import Annotated

from fastapi import APIRouter, Depends

from ...models.user import User
from ...schemas.auth import HelloResponse
from ...middleware.jwt import get_current_user

router = APIRouter()


@router.get("/hello", response_model=HelloResponse, summary="인증된 사용자 인사")
async def hello(user: Annotated[User, Depends(get_current_user)]):
    return HelloResponse(message=f"Hello, {user.email}")
