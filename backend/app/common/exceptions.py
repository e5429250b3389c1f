import logging

from django.db import DatabaseError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException, NotAuthenticated, PermissionDenied
from rest_framework.response import Response
from rest_framework.views import exception_handler
from rest_framework_simplejwt.exceptions import InvalidToken, TokenError

logger = logging.getLogger(__name__)


class ServiceError(APIException):
    """
    서비스 계층 에러의 베이스.
    extra 로 넘긴 값은 응답 body 에 그대로 합쳐진다 (attemptsLeft, details 등).
    """

    status_code = status.HTTP_400_BAD_REQUEST
    default_code = "BAD_REQUEST"
    default_detail = "Bad request"

    def __init__(self, message=None, **extra):
        super().__init__(detail=message or self.default_detail, code=self.default_code)
        self.message = str(self.detail)
        self.extra = extra

    def as_payload(self):
        return {"success": False, "error": self.message, "code": self.default_code, **self.extra}


class ValidationError(ServiceError):
    default_code = "VALIDATION_ERROR"
    default_detail = "Invalid input"


class NotFoundError(ServiceError):
    default_code = "OTP_NOT_FOUND"
    default_detail = "No valid OTP found for this phone number. Please request a new one."


class ExpiredError(ServiceError):
    default_code = "OTP_EXPIRED"
    default_detail = "OTP has expired. Please request a new one."


class AttemptsExhaustedError(ServiceError):
    default_code = "OTP_TOO_MANY_ATTEMPTS"
    default_detail = "Too many attempts. Please request a new OTP."


class MismatchError(ServiceError):
    default_code = "OTP_INVALID_CODE"
    default_detail = "Invalid OTP code. Please try again."

    def __init__(self, attempts_left: int, message=None):
        super().__init__(message, attemptsLeft=attempts_left)
        self.attempts_left = attempts_left


class RateLimitedError(ServiceError):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    default_code = "RATE_LIMITED"
    default_detail = "Too many code requests. Please wait before trying again."


class DuplicateError(ServiceError):
    status_code = status.HTTP_409_CONFLICT
    default_code = "DUPLICATE"
    default_detail = "Some of your information is already registered."


class DependencyError(ServiceError):
    """외부 의존성(메시징, DB) 실패. details 는 운영자 확인용."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_code = "DEPENDENCY_ERROR"
    default_detail = "Service temporarily unavailable"

    def __init__(self, message=None, details: str = ""):
        super().__init__(message, details=details)
        self.details = details


def custom_exception_handler(exc, context):
    if isinstance(exc, DatabaseError):
        logger.exception("database error in %s", context.get("view").__class__.__name__)
        exc = DependencyError("Database error", details=str(exc))

    response = exception_handler(exc, context)
    if response is None:
        # 예상 못한 에러도 JSON 으로 (스택은 로그에만)
        logger.exception("unhandled error in %s", context.get("view").__class__.__name__)
        error = DependencyError("Internal server error", details=f"{exc.__class__.__name__}: {exc}")
        return Response(error.as_payload(), status=error.status_code)

    if isinstance(exc, ServiceError):
        response.data = exc.as_payload()
    elif isinstance(exc, NotAuthenticated):
        response.data = {
            "success": False,
            "error": "Authorization header missing",
            "code": "UNAUTHORIZED",
        }
    elif isinstance(exc, PermissionDenied):
        response.data = {
            "success": False,
            "error": "Permission denied",
            "code": "FORBIDDEN",
        }
    elif isinstance(exc, (InvalidToken, TokenError)):
        response.data = {
            "success": False,
            "error": "Invalid token",
            "code": "INVALID_TOKEN",
        }
    elif isinstance(exc, Http404):
        response.data = {
            "success": False,
            "error": "Not found",
            "code": "NOT_FOUND",
        }

    return response

