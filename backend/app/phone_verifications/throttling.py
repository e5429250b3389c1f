# app/phone_verifications/throttling.py
import logging

import redis
from django.conf import settings

from app.common.exceptions import RateLimitedError
from app.common.redis_client import get_redis

from .phone import mask_phone

logger = logging.getLogger(__name__)


def send_key(phone_number: str) -> str:
    return f"otp:send:{phone_number}"


def check_send_rate(phone_number: str) -> int:
    """
    번호별 발송 횟수 제한 (인스턴스 여러 대여도 공유되도록 redis 카운터 사용).
    제한 초과 시 RateLimitedError, 아니면 현재 윈도우 내 발송 횟수 반환.
    redis 장애 시에는 발송을 막지 않는다.
    """
    limit = settings.OTP_SEND_LIMIT
    if limit <= 0:
        return 0

    key = send_key(phone_number)
    try:
        r = get_redis()
        # 카운터 키는 항상 TTL 을 가진 채로 만들어진다
        r.set(key, 0, ex=settings.OTP_SEND_WINDOW_SECONDS, nx=True)
        count = r.incr(key)
    except redis.RedisError as e:
        logger.warning("otp rate limit skipped (redis unavailable): %s", e)
        return 0

    if count > limit:
        logger.info("otp send rate limited phone=%s count=%s", mask_phone(phone_number), count)
        raise RateLimitedError(retryAfter=settings.OTP_SEND_WINDOW_SECONDS)
    return count
