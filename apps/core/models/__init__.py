from .user import User, Role, PRIVILEGED_ROLES

__all__ = [
    "User",
    "Role",
    "PRIVILEGED_ROLES",
]
