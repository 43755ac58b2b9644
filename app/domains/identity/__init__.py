from app.domains.identity.entities import User, UserRole
from app.domains.identity.schemas import UserBase, UserCreate, UserRegister, UserUpdate
from app.domains.identity.session import SessionHolder
from app.domains.identity.services import AuthService, UserService

__all__ = [
    "User", "UserRole",
    "UserBase", "UserCreate", "UserRegister", "UserUpdate",
    "SessionHolder",
    "AuthService", "UserService"
]
