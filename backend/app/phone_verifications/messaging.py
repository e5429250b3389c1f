# app/phone_verifications/messaging.py
import json
import logging

import requests
from django.conf import settings

from .phone import mask_phone

logger = logging.getLogger(__name__)

TWILIO_MESSAGES_URL = "https://api.twilio.com/2010-04-01/Accounts/{sid}/Messages.json"


class MessagingError(Exception):
    pass


class MessagingConfigError(MessagingError):
    pass


def _twilio_config() -> dict:
    config = {
        "account_sid": getattr(settings, "TWILIO_ACCOUNT_SID", ""),
        "auth_token": getattr(settings, "TWILIO_AUTH_TOKEN", ""),
        "from_number": getattr(settings, "TWILIO_WHATSAPP_NUMBER", ""),
        "template_sid": getattr(settings, "TWILIO_TEMPLATE_SID", ""),
    }
    missing = [k for k, v in config.items() if not v]
    if missing:
        raise MessagingConfigError(f"Twilio credentials not configured: {', '.join(missing)}")
    return config


def ensure_messaging_configured() -> None:
    _twilio_config()


def send_otp_message(to_number: str, code: str) -> str:
    """
    WhatsApp 템플릿 메시지로 OTP 발송.
    템플릿 변수는 {"1": code} 하나뿐. 성공 시 message sid 반환.
    """
    config = _twilio_config()
    from_number = config["from_number"]
    if not from_number.startswith("+"):
        from_number = "+" + from_number

    data = {
        "To": f"whatsapp:{to_number}",
        "From": f"whatsapp:{from_number}",
        "ContentSid": config["template_sid"],
        "ContentVariables": json.dumps({"1": code}),
    }

    try:
        resp = requests.post(
            TWILIO_MESSAGES_URL.format(sid=config["account_sid"]),
            data=data,
            auth=(config["account_sid"], config["auth_token"]),
            timeout=getattr(settings, "TWILIO_TIMEOUT_SECONDS", 10),
        )
    except requests.RequestException as e:
        raise MessagingError(f"Twilio request failed: {e}") from e

    if resp.status_code >= 400:
        logger.error("twilio send failed to=%s status=%s", mask_phone(to_number), resp.status_code)
        raise MessagingError(f"Twilio error {resp.status_code}: {resp.text}")

    # 2xx 면 발송 접수 완료. sid 파싱 실패는 발송 실패가 아니다
    try:
        message_sid = resp.json().get("sid", "")
    except ValueError:
        message_sid = ""
    logger.info("twilio message queued to=%s sid=%s", mask_phone(to_number), message_sid)
    return message_sid
