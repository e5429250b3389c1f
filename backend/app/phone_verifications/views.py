# app/phone_verifications/views.py
from rest_framework.views import APIView

from app.common.exceptions import ValidationError
from app.common.responses import ok

from .services import issue_otp, verify_otp


def _body(request) -> dict:
    if not isinstance(request.data, dict):
        raise ValidationError("Request body must be a JSON object")
    return request.data


class SendOtpView(APIView):
    authentication_classes = []
    permission_classes = []

    def post(self, request):
        data = _body(request)
        phone = data.get("phoneNumber") or data.get("phone_number")
        verification = issue_otp(phone)

        return ok(
            message="OTP sent successfully",
            expiresAt=verification.expires_at.isoformat(),
        )


class VerifyOtpView(APIView):
    authentication_classes = []
    permission_classes = []

    def post(self, request):
        data = _body(request)
        phone = data.get("phoneNumber") or data.get("phone_number")
        code = data.get("otpCode") or data.get("otp_code")

        verify_otp(phone, code)
        return ok(message="Phone number verified successfully")
