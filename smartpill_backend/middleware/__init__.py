from .jwt import get_current_user
from .errors import register_exception_handlers

__all__ = ["get_current_user", "register_exception_handlers"]
