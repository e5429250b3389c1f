# app/phone_verifications/phone.py
import re

from app.common.exceptions import ValidationError

_E164_RE = re.compile(r"^\+\d{7,15}$")


def normalize_phone(phone: str) -> str:
    # "+1 (246) 555-1234" / "1-246-555-1234" -> "+12465551234"
    cleaned = re.sub(r"[^\d+]", "", str(phone or ""))
    if not cleaned.startswith("+"):
        cleaned = "+" + cleaned
    return cleaned


def validate_phone(phone: str) -> str:
    """정규화 후 +숫자(7~15자리) 형태가 아니면 ValidationError"""
    if not phone or not str(phone).strip():
        raise ValidationError("Phone number is required")

    normalized = normalize_phone(phone)
    if not _E164_RE.match(normalized):
        raise ValidationError("Invalid phone number format")
    return normalized


def mask_phone(phone: str) -> str:
    # 로그용: +1246****234
    if not phone or len(phone) <= 8:
        return "***"
    return f"{phone[:5]}{'*' * (len(phone) - 8)}{phone[-3:]}"
