# app/phone_verifications/models.py
from django.conf import settings
from django.db import models
from django.utils import timezone


class PhoneVerification(models.Model):
    STATUS_PENDING = "PENDING"
    STATUS_VERIFIED = "VERIFIED"
    STATUS_LOCKED = "LOCKED"
    STATUS_EXPIRED = "EXPIRED"

    phone_number = models.CharField(max_length=20)  # +E.164 형태로 정규화된 값
    otp_code = models.CharField(max_length=6)
    expires_at = models.DateTimeField()
    verified = models.BooleanField(default=False)
    verified_at = models.DateTimeField(null=True, blank=True)
    attempts = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "whatsapp_verifications"
        indexes = [
            models.Index(fields=["phone_number", "verified"], name="wa_verif_phone_verified_idx"),
            models.Index(fields=["expires_at"], name="wa_verif_expires_at_idx"),
        ]
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.id} {self.phone_number} {self.status}"

    def is_expired(self, now=None) -> bool:
        return (now or timezone.now()) > self.expires_at

    @property
    def is_locked(self) -> bool:
        return self.attempts >= settings.OTP_MAX_ATTEMPTS

    @property
    def attempts_left(self) -> int:
        return max(settings.OTP_MAX_ATTEMPTS - self.attempts, 0)

    @property
    def status(self) -> str:
        if self.verified:
            return self.STATUS_VERIFIED
        if self.is_locked:
            return self.STATUS_LOCKED
        if self.is_expired():
            return self.STATUS_EXPIRED
        return self.STATUS_PENDING
