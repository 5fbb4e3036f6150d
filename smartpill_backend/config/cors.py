"""CORS 설정: SmartPill 웹 클라이언트에서 /api/v1 호출 허용."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .settings import settings

# 라우터에 실제로 있는 메서드만 (PATCH 없음)
API_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
# Bearer 토큰 + JSON 본문
API_HEADERS = ["Authorization", "Content-Type"]
# 401 응답의 WWW-Authenticate를 브라우저 스크립트에서 읽을 수 있도록
EXPOSED_HEADERS = ["WWW-Authenticate"]


def setup_cors(app: FastAPI) -> None:
    # 토큰은 Authorization 헤더로만 전달하므로 쿠키(credentials)는 허용하지 않는다
    allow_origins = ["*"] if settings.debug else settings.cors_origin_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=False,
        allow_methods=API_METHODS,
        allow_headers=API_HEADERS,
        expose_headers=EXPOSED_HEADERS,
        max_age=settings.cors_max_age,
    )
