from datetime import timedelta
from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase
from django.utils import timezone

from app.phone_verifications.models import PhoneVerification


class PurgePhoneVerificationsCommandTests(TestCase):
    def setUp(self):
        now = timezone.now()
        PhoneVerification.objects.create(
            phone_number="+12465550001", otp_code="123456", expires_at=now - timedelta(hours=30)
        )
        PhoneVerification.objects.create(
            phone_number="+12465550002", otp_code="123456", expires_at=now + timedelta(minutes=5)
        )

    def test_dry_run_keeps_rows(self):
        out = StringIO()
        call_command("purge_phone_verifications", "--retention-hours", "24", "--dry-run", stdout=out)

        self.assertIn("1 verification(s) would be deleted", out.getvalue())
        self.assertEqual(PhoneVerification.objects.count(), 2)

    def test_purge(self):
        out = StringIO()
        call_command("purge_phone_verifications", "--retention-hours", "24", stdout=out)

        self.assertIn("Deleted 1", out.getvalue())
        self.assertEqual(
            list(PhoneVerification.objects.values_list("phone_number", flat=True)), ["+12465550002"]
        )

    def test_negative_retention(self):
        with self.assertRaises(CommandError):
            call_command("purge_phone_verifications", "--retention-hours", "-1")
