# app/phone_verifications/services.py
import hmac
import logging
import secrets
from datetime import timedelta

from django.conf import settings
from django.db import transaction
from django.db.models import F
from django.utils import timezone

from app.common.exceptions import (
    AttemptsExhaustedError,
    DependencyError,
    ExpiredError,
    MismatchError,
    NotFoundError,
    ValidationError,
)

from .messaging import MessagingConfigError, MessagingError, ensure_messaging_configured, send_otp_message
from .models import PhoneVerification
from .phone import mask_phone, validate_phone
from .throttling import check_send_rate

logger = logging.getLogger(__name__)


def generate_otp() -> str:
    # 100000 ~ 999999 (앞자리 0 잘림 방지)
    return str(secrets.randbelow(900000) + 100000)


def issue_otp(phone_number: str, *, now=None) -> PhoneVerification:
    phone = validate_phone(phone_number)
    check_send_rate(phone)

    try:
        ensure_messaging_configured()
    except MessagingConfigError as e:
        logger.error("otp issue aborted: %s", e)
        raise DependencyError("Failed to send OTP", details=str(e))

    now = now or timezone.now()
    code = generate_otp()
    expires_at = now + timedelta(minutes=settings.OTP_EXPIRE_MINUTES)

    # 1) 이전 코드 전부 삭제 후 새 코드 저장
    with transaction.atomic():
        deleted, _ = PhoneVerification.objects.filter(phone_number=phone).delete()
        verification = PhoneVerification.objects.create(
            phone_number=phone,
            otp_code=code,
            expires_at=expires_at,
            verified=False,
            attempts=0,
        )
    logger.info("otp issued phone=%s superseded=%s", mask_phone(phone), deleted)

    # 2) WhatsApp 발송. 실패해도 레코드는 남겨둔다 (재발송 시 교체됨)
    try:
        send_otp_message(phone, code)
    except MessagingError as e:
        logger.error("otp delivery failed phone=%s: %s", mask_phone(phone), e)
        raise DependencyError("Failed to send OTP", details=str(e))

    return verification


def find_pending(phone: str):
    return (
        PhoneVerification.objects.filter(phone_number=phone, verified=False)
        .order_by("-created_at", "-id")
        .first()
    )


def verify_otp(phone_number: str, otp_code: str, *, now=None) -> PhoneVerification:
    if not phone_number or not otp_code:
        raise ValidationError("Phone number and OTP code are required")

    phone = validate_phone(phone_number)
    code = str(otp_code)
    now = now or timezone.now()

    v = find_pending(phone)
    if not v:
        raise NotFoundError()

    if v.is_expired(now):
        raise ExpiredError()

    if v.attempts >= settings.OTP_MAX_ATTEMPTS:
        raise AttemptsExhaustedError()

    if not hmac.compare_digest(v.otp_code.encode(), code.encode()):
        # attempts = attempts + 1 을 DB에서 원자적으로 (동시 요청 lost update 방지)
        updated = PhoneVerification.objects.filter(
            pk=v.pk, attempts__lt=settings.OTP_MAX_ATTEMPTS
        ).update(attempts=F("attempts") + 1)
        if not updated:
            raise AttemptsExhaustedError()

        v.refresh_from_db(fields=["attempts"])
        logger.info("otp mismatch phone=%s attempts=%s", mask_phone(phone), v.attempts)
        raise MismatchError(v.attempts_left)

    # 인증 성공 (verified 는 false -> true 한 번만)
    updated = PhoneVerification.objects.filter(pk=v.pk, verified=False).update(
        verified=True, verified_at=now
    )
    if not updated:
        raise NotFoundError()

    v.verified = True
    v.verified_at = now
    logger.info("otp verified phone=%s", mask_phone(phone))
    return v


def is_phone_verified(phone_number: str, *, within=None, now=None) -> bool:
    phone = validate_phone(phone_number)
    qs = PhoneVerification.objects.filter(phone_number=phone, verified=True)
    if within is not None:
        qs = qs.filter(verified_at__gte=(now or timezone.now()) - within)
    return qs.exists()


def stale_verifications(*, now=None, retention=None):
    now = now or timezone.now()
    if retention is None:
        retention = timedelta(hours=settings.OTP_RETENTION_HOURS)
    return PhoneVerification.objects.filter(expires_at__lt=now - retention)


def purge_stale_verifications(*, now=None, retention=None) -> int:
    deleted, _ = stale_verifications(now=now, retention=retention).delete()
    if deleted:
        logger.info("purged %s stale phone verifications", deleted)
    return deleted
