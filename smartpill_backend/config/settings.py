"""환경 변수 및 앱 설정."""
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """앱 설정 (env 로드)."""

    # App
    app_name: str = "SmartPill API"
    debug: bool = False
    port: int = 3000

    # MySQL
    mysql_host: str = "localhost"
    mysql_port: int = 3306
    mysql_user: str = "root"
    mysql_password: str = ""
    mysql_database: str = "smartpill"

    # 설정 시 MySQL 대신 사용 (예: sqlite+aiosqlite:///./data/smartpill.db)
    sqlalchemy_url: str = ""

    # JWT
    jwt_secret: str = "change-me-in-production"
    jwt_algorithm: str = "HS256"
    jwt_access_expire_minutes: int = 60  # 1시간

    # CORS (프론트엔드)
    cors_origins: str = "http://localhost:3001"
    cors_max_age: int = 600  # preflight 캐시 (초)

    @property
    def database_url(self) -> str:
        if self.sqlalchemy_url:
            return self.sqlalchemy_url
        return (
            f"mysql+aiomysql://{self.mysql_user}:{self.mysql_password}"
            f"@{self.mysql_host}:{self.mysql_port}/{self.mysql_database}"
        )

    @property
    def cors_origin_list(self) -> list[str]:
        return [x.strip() for x in self.cors_origins.split(",") if x.strip()]

    model_config = {"env_file": ".env", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
