from .settings import settings, get_settings
from .database import engine, get_db, init_db, AsyncSessionLocal, Base
from .cors import setup_cors

__all__ = ["settings", "get_settings", "engine", "get_db", "init_db", "AsyncSessionLocal", "Base", "setup_cors"]
