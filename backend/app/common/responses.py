from rest_framework import status
from rest_framework.response import Response


def ok(data=None, http_status: int = status.HTTP_200_OK, **extra):
    body = {"success": True, **extra}
    if data is not None:
        body["data"] = data
    return Response(body, status=http_status)


def fail(code: str, message: str, http_status: int = status.HTTP_400_BAD_REQUEST, **extra):
    return Response(
        {"success": False, "error": message, "code": code, **extra},
        status=http_status,
    )
