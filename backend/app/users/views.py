import logging

from django.contrib.auth import authenticate
from django.contrib.auth.models import update_last_login
from rest_framework import status
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import AccessToken

from app.common.exceptions import ValidationError
from app.common.permissions import IsAdminRole
from app.common.responses import fail, ok
from .serializers import AdminMeSerializer, LoginSerializer

logger = logging.getLogger(__name__)


def issue_jwt_for_user(user) -> str:
    token = AccessToken.for_user(user)
    token["role"] = user.role
    return str(token)


class AdminLoginView(APIView):
    authentication_classes = []
    permission_classes = []

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        if not serializer.is_valid():
            raise ValidationError("email and password are required", fields=serializer.errors)

        email = serializer.validated_data["email"]
        user = authenticate(
            request,
            email=email,
            password=serializer.validated_data["password"],
        )
        if not user:
            logger.warning("admin login failed email=%s", email)
            return fail("INVALID_CREDENTIALS", "Invalid email or password", status.HTTP_401_UNAUTHORIZED)

        if not user.is_admin:
            logger.warning("admin login denied (role=%s) user=%s", user.role, user.id)
            return fail("FORBIDDEN", "Access denied. Admin privileges required.", status.HTTP_403_FORBIDDEN)

        update_last_login(None, user)
        logger.info("admin login user=%s", user.id)
        return ok({"accessToken": issue_jwt_for_user(user), "tokenType": "Bearer"})


class MeView(APIView):
    permission_classes = [IsAdminRole]

    def get(self, request):
        serializer = AdminMeSerializer(request.user)
        return ok(serializer.data)
