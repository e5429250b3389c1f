from datetime import timedelta
from unittest.mock import patch

from django.test import TestCase, override_settings
from django.utils import timezone
from rest_framework.test import APIClient

from app.phone_verifications.models import PhoneVerification

from .helpers import TWILIO_SETTINGS, sent_code, twilio_response

PHONE = "+12465551234"


@override_settings(**TWILIO_SETTINGS)
@patch("app.phone_verifications.messaging.requests.post")
class SendOtpViewTests(TestCase):
    def setUp(self):
        self.client = APIClient()

    def test_success(self, mock_post):
        mock_post.return_value = twilio_response()

        res = self.client.post("/api/otp/send/", {"phoneNumber": "+1 (246) 555-1234"}, format="json")

        self.assertEqual(res.status_code, 200)
        body = res.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["message"], "OTP sent successfully")
        self.assertIn("expiresAt", body)
        self.assertEqual(set(body), {"success", "message", "expiresAt"})
        self.assertTrue(PhoneVerification.objects.filter(phone_number=PHONE).exists())

    def test_route_without_trailing_slash(self, mock_post):
        mock_post.return_value = twilio_response()
        res = self.client.post("/api/otp/send", {"phoneNumber": PHONE}, format="json")
        self.assertEqual(res.status_code, 200)

    def test_missing_phone(self, mock_post):
        res = self.client.post("/api/otp/send/", {}, format="json")

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["error"], "Phone number is required")
        mock_post.assert_not_called()

    def test_provider_failure_is_500_with_details(self, mock_post):
        mock_post.return_value = twilio_response(status_code=401, text="Authenticate")

        res = self.client.post("/api/otp/send/", {"phoneNumber": PHONE}, format="json")

        self.assertEqual(res.status_code, 500)
        body = res.json()
        self.assertEqual(body["error"], "Failed to send OTP")
        self.assertIn("Authenticate", body["details"])

    def test_non_object_body(self, mock_post):
        res = self.client.post("/api/otp/send/", [1, 2], format="json")

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["code"], "VALIDATION_ERROR")
        mock_post.assert_not_called()
        self.assertEqual(PhoneVerification.objects.count(), 0)

    def test_get_not_allowed(self, mock_post):
        res = self.client.get("/api/otp/send/")
        self.assertEqual(res.status_code, 405)

    def test_cors_preflight(self, mock_post):
        res = self.client.options(
            "/api/otp/send/",
            HTTP_ORIGIN="https://intake.example.com",
            HTTP_ACCESS_CONTROL_REQUEST_METHOD="POST",
            HTTP_ACCESS_CONTROL_REQUEST_HEADERS="content-type,x-client-info",
        )

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res["Access-Control-Allow-Origin"], "*")
        self.assertIn("POST", res["Access-Control-Allow-Methods"])


@override_settings(**TWILIO_SETTINGS)
@patch("app.phone_verifications.messaging.requests.post")
class VerifyOtpViewTests(TestCase):
    def setUp(self):
        self.client = APIClient()

    def _issue(self, mock_post):
        mock_post.return_value = twilio_response()
        self.client.post("/api/otp/send/", {"phoneNumber": PHONE}, format="json")
        return sent_code(mock_post)

    def _verify(self, code, phone=PHONE):
        return self.client.post(
            "/api/otp/verify/", {"phoneNumber": phone, "otpCode": code}, format="json"
        )

    def test_wrong_then_right(self, mock_post):
        code = self._issue(mock_post)
        wrong = "111111" if code != "111111" else "222222"

        res = self._verify(wrong)
        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["success"], False)
        self.assertEqual(res.json()["code"], "OTP_INVALID_CODE")
        self.assertEqual(res.json()["attemptsLeft"], 2)

        res = self._verify(code, phone="1 246 555 1234")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json(), {"success": True, "message": "Phone number verified successfully"})

    def test_missing_code(self, mock_post):
        res = self.client.post("/api/otp/verify/", {"phoneNumber": PHONE}, format="json")
        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["code"], "VALIDATION_ERROR")

    def test_non_object_body(self, mock_post):
        code = self._issue(mock_post)

        res = self.client.post("/api/otp/verify/", [PHONE, code], format="json")

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["code"], "VALIDATION_ERROR")
        v = PhoneVerification.objects.get(phone_number=PHONE)
        self.assertEqual(v.attempts, 0)
        self.assertFalse(v.verified)

    def test_not_found(self, mock_post):
        res = self._verify("123456")
        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["code"], "OTP_NOT_FOUND")

    def test_expired(self, mock_post):
        code = self._issue(mock_post)
        PhoneVerification.objects.filter(phone_number=PHONE).update(
            expires_at=timezone.now() - timedelta(minutes=1)
        )

        res = self._verify(code)
        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["code"], "OTP_EXPIRED")

    def test_too_many_attempts(self, mock_post):
        code = self._issue(mock_post)
        PhoneVerification.objects.filter(phone_number=PHONE).update(attempts=3)

        res = self._verify(code)
        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["code"], "OTP_TOO_MANY_ATTEMPTS")

    def test_second_verification_is_not_found(self, mock_post):
        code = self._issue(mock_post)
        self.assertEqual(self._verify(code).status_code, 200)

        res = self._verify(code)
        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["code"], "OTP_NOT_FOUND")

    def test_database_failure_is_500(self, mock_post):
        from django.db import OperationalError

        with patch(
            "app.phone_verifications.services.find_pending",
            side_effect=OperationalError("connection lost"),
        ):
            res = self._verify("123456")

        self.assertEqual(res.status_code, 500)
        self.assertIn("connection lost", res.json()["details"])
