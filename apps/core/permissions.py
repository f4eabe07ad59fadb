# apps/core/permissions.py

from rest_framework.permissions import SAFE_METHODS, BasePermission


def can_mutate(user, record, owner_field: str = "created_by") -> bool:
    """
    소유자 정책: 작성자 본인 또는 privileged(aslab)만 수정/삭제/링크 가능.
    record.<owner_field>_id 로 작성자 비교 (관계 로딩 없이).
    """
    if user is None or not user.is_authenticated:
        return False
    if getattr(user, "is_privileged", False):
        return True
    owner_id = getattr(record, f"{owner_field}_id", None)
    return owner_id is not None and owner_id == user.id


class IsAslab(BasePermission):
    """
    aslab 전용 Permission
    """
    message = "Access denied. Aslab role required."

    def has_permission(self, request, view):
        user = request.user
        return bool(
            user
            and user.is_authenticated
            and getattr(user, "is_privileged", False)
        )


class IsAslabOrReadOnly(BasePermission):
    """조회는 로그인 사용자 전체, 쓰기는 aslab."""
    message = "Access denied. Aslab role required."

    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated):
            return False
        if request.method in SAFE_METHODS:
            return True
        return getattr(user, "is_privileged", False)
