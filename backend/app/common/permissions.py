from rest_framework.permissions import BasePermission


class IsAdminRole(BasePermission):
    """JWT 인증 + role == admin 인 계정만"""

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and getattr(user, "is_admin", False))
