"""테스트 공통 설정: 인메모리 SQLite(aiosqlite) + httpx ASGI 클라이언트."""
import os

# settings는 import 시점에 로드되므로 앱 import 전에 설정
os.environ["SQLALCHEMY_URL"] = "sqlite+aiosqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["DEBUG"] = "false"
os.environ["CORS_ORIGINS"] = "http://localhost:3001"

import httpx  # noqa: E402
import pytest_asyncio  # noqa: E402

from smartpill_backend.config import Base, engine  # noqa: E402
from smartpill_backend.main import app  # noqa: E402

DEFAULT_PASSWORD = "password123"


@pytest_asyncio.fixture
async def client():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    # 다음 테스트의 이벤트 루프에서 새 커넥션을 열도록 정리
    await engine.dispose()


@pytest_asyncio.fixture
async def make_token(client):
    """회원가입 + 로그인 후 Bearer 토큰 반환."""

    async def _make(email: str = "user@smartpill.io", password: str = DEFAULT_PASSWORD) -> str:
        res = await client.post("/api/v1/auth/register", json={"email": email, "password": password})
        assert res.status_code == 201, res.text
        res = await client.post("/api/v1/auth/login", json={"email": email, "password": password})
        assert res.status_code == 200, res.text
        return res.json()["token"]

    return _make


@pytest_asyncio.fixture
async def create_medication(client):
    async def _create(token: str, **overrides) -> dict:
        body = {
            "name": "Test Med",
            "dose": "10mg",
            "start_date": "2025-01-01",
            "daily_frequency": 1,
            "day_interval": 1,
        }
        body.update(overrides)
        res = await client.post("/api/v1/medications", json=body, headers=auth_headers(token))
        assert res.status_code == 201, res.text
        return res.json()

    return _create


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
